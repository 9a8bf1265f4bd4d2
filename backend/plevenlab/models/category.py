# plevenlab/models/category.py
from tortoise import fields, models

class Category(models.Model):
    """Grouping for events and posts, displayed with its color."""
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=128)
    color = fields.CharField(max_length=32, null=True)  # e.g. "#ff8800"

    class Meta:
        table = "categories"

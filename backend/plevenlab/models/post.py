# plevenlab/models/post.py
from tortoise import fields, models

class Post(models.Model):
    """
    News post written by a user under a category.
    Hidden posts (is_visible=False) are only listed to authenticated users.
    """
    id = fields.IntField(pk=True)
    title = fields.CharField(max_length=256)
    body = fields.TextField()
    category = fields.ForeignKeyField("models.Category", related_name="posts", on_delete=fields.CASCADE)
    creator = fields.ForeignKeyField("models.User", related_name="posts", on_delete=fields.CASCADE)
    is_visible = fields.BooleanField(default=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "posts"

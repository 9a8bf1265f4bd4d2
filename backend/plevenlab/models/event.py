# plevenlab/models/event.py
"""
Database model for events.
An event is a dated happening with a location, filed under a category and
created by a user.
"""
from tortoise import fields, models

class Event(models.Model):
    """
    Event database model.

    Relationships:
    - Belongs to a Category (many-to-one)
    - Created by a User (many-to-one); removed together with its creator
    """
    id = fields.IntField(pk=True)  # Primary key
    category = fields.ForeignKeyField(
        "models.Category",
        related_name="events",
        on_delete=fields.CASCADE
    )  # Category the event is filed under
    title = fields.CharField(max_length=256)
    created_by = fields.ForeignKeyField(
        "models.User",
        related_name="events",
        on_delete=fields.CASCADE
    )  # Author of the event
    created_date = fields.DatetimeField()
    start_date = fields.DatetimeField()
    end_date = fields.DatetimeField()
    location_friendly_name = fields.CharField(max_length=256, null=True)  # e.g. "Town hall, main room"
    location_lat = fields.FloatField(default=0.0)
    location_lng = fields.FloatField(default=0.0)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "events"

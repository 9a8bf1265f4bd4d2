# plevenlab/models/user.py
"""
Database model for users.
Represents a user account in the system, containing the login name,
contact address, and the stored password credential.
"""
from tortoise import fields, models

from plevenlab.core.credentials import Credential

class User(models.Model):
    """
    User database model.

    Relationships:
    - Has many Events (one-to-many, via related_name="events")
    - Has many Posts (one-to-many, via related_name="posts")

    Security:
    - Password is stored as an HMAC-SHA512 hash plus its salt, never as plain text
    - password_hash is exactly 64 raw bytes, password_salt exactly 128 raw bytes
    - The credential lives on the row, so deleting the account deletes it too
    """
    id = fields.IntField(pk=True)  # Primary key: numeric user identifier (token subject)
    name = fields.CharField(
        max_length=256,
        unique=True,
        index=True
    )  # User login name (must be unique, indexed for fast lookups)
    email = fields.CharField(max_length=256, null=True)  # Contact address (optional)
    password_hash = fields.BinaryField()  # HMAC-SHA512 digest, 64 bytes
    password_salt = fields.BinaryField()  # HMAC key, 128 bytes
    created_at = fields.DatetimeField(auto_now_add=True)  # Timestamp when account was created
    last_login_at = fields.DatetimeField(null=True)  # Timestamp of the last successful login

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name

    @property
    def credential(self) -> Credential:
        """Stored password material as a Credential."""
        return Credential(hash=bytes(self.password_hash), salt=bytes(self.password_salt))

    def set_credential(self, credential: Credential) -> None:
        """Replace the stored password material wholesale."""
        self.password_hash = credential.hash
        self.password_salt = credential.salt

# plevenlab/schemas/user.py
"""
Pydantic schemas for user management endpoints.
Password material (hash/salt) never appears in any outgoing model.
"""
from pydantic import BaseModel
from typing import Optional

class UserIn(BaseModel):
    """
    Request model for creating or updating a user.
    On update, an empty or missing password keeps the current one.
    """
    name: str  # Login name (must be unique)
    email: Optional[str] = None  # Contact address
    password: Optional[str] = None  # Plain text password (hashed server-side)

# plevenlab/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Defines the request model for login.
"""
from pydantic import BaseModel

class LoginRequest(BaseModel):
    """
    Request model for user login endpoint.
    Contains credentials for authentication.
    """
    username: str  # User login name
    password: str  # User password (plain text, verified server-side)

"""
Services Module

Business logic shared by the API routers:
- users: login checks, account creation and update
"""
from .users import (
    UserServiceError,
    authenticate,
    create_user,
    update_user,
)

__all__ = [
    "UserServiceError",
    "authenticate",
    "create_user",
    "update_user",
]

# plevenlab/models/__init__.py
"""
Database models module initialization.
Exports all database models for convenient imports throughout the application.

Models exported:
- User: User account and stored password credential
- Category: Grouping for events and posts
- Event: Dated event with location
- Post: News post
"""
from .user import User
from .category import Category
from .event import Event
from .post import Post

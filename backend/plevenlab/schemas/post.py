# plevenlab/schemas/post.py
from pydantic import BaseModel

class PostIn(BaseModel):
    """Request model for creating or replacing a post."""
    title: str
    body: str
    categoryId: int  # Existing category id
    creatorUserId: int  # Existing user id
    isVisible: bool = True

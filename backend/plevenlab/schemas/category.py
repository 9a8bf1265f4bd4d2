# plevenlab/schemas/category.py
from pydantic import BaseModel
from typing import Optional

class CategoryIn(BaseModel):
    name: str
    color: Optional[str] = None

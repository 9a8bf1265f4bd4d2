# plevenlab/api/v1/routers/categories.py
from fastapi import APIRouter, Depends, HTTPException, status

from plevenlab.api.v1.deps import get_current_user
from plevenlab.models.category import Category
from plevenlab.schemas.category import CategoryIn

router = APIRouter(prefix="/categories", tags=["categories"])


def category_to_dict(c: Category) -> dict:
    return {"id": c.id, "name": c.name, "color": c.color}


async def _get_or_404(category_id: int) -> Category:
    c = await Category.get_or_none(id=category_id)
    if not c:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="NOT_FOUND")
    return c


@router.get("")
async def list_categories():
    rows = await Category.all().order_by("name")
    return {"success": True, "data": {"items": [category_to_dict(c) for c in rows]}}


@router.get("/{category_id}")
async def get_category(category_id: int):
    return {"success": True, "data": category_to_dict(await _get_or_404(category_id))}


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(get_current_user)])
async def create_category(body: CategoryIn):
    c = await Category.create(name=body.name.strip(), color=body.color)
    return {"success": True, "data": category_to_dict(c)}


@router.put("/{category_id}", dependencies=[Depends(get_current_user)])
async def update_category(category_id: int, body: CategoryIn):
    c = await _get_or_404(category_id)
    c.name = body.name.strip()
    c.color = body.color
    await c.save()
    return {"success": True, "data": category_to_dict(c)}


@router.delete("/{category_id}", dependencies=[Depends(get_current_user)])
async def delete_category(category_id: int):
    """Delete a category; its events and posts are removed with it."""
    c = await _get_or_404(category_id)
    data = category_to_dict(c)
    await c.delete()
    return {"success": True, "data": data}

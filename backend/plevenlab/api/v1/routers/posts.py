# plevenlab/api/v1/routers/posts.py
from fastapi import APIRouter, Depends, HTTPException, Query, status

from plevenlab.api.v1.deps import get_current_user, get_optional_user
from plevenlab.api.v1.routers.categories import category_to_dict
from plevenlab.models.category import Category
from plevenlab.models.post import Post
from plevenlab.models.user import User
from plevenlab.schemas.post import PostIn

router = APIRouter(prefix="/posts", tags=["posts"])


def post_to_dict(p: Post) -> dict:
    return {
        "id": p.id,
        "title": p.title,
        "body": p.body,
        "category": category_to_dict(p.category),
        "creator": {"id": p.creator.id, "name": p.creator.name},
        "isVisible": p.is_visible,
        "createdAt": p.created_at.isoformat() if p.created_at else None,
    }


async def _get_or_404(post_id: int, include_hidden: bool = True) -> Post:
    qs = Post.filter(id=post_id)
    if not include_hidden:
        qs = qs.filter(is_visible=True)
    p = await qs.first().prefetch_related("category", "creator")
    if not p:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="NOT_FOUND")
    return p


async def _post_fields(body: PostIn) -> dict:
    category = await Category.get_or_none(id=body.categoryId)
    creator = await User.get_or_none(id=body.creatorUserId)
    if not category or not creator:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                            detail={"code": "UNKNOWN_REFERENCE", "message": "Category or user does not exist"})
    return {
        "category": category,
        "creator": creator,
        "title": body.title,
        "body": body.body,
        "is_visible": body.isVisible,
    }


@router.get("")
async def list_posts(
    offset: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=200),
    user: User | None = Depends(get_optional_user),
):
    """
    Get paginated list of posts, newest first.
    Anonymous callers only see visible posts.
    """
    qs = Post.all() if user else Post.filter(is_visible=True)
    total = await qs.count()
    rows = await qs.order_by("-created_at", "-id").offset(offset).limit(limit).prefetch_related("category", "creator")
    items = [post_to_dict(p) for p in rows]
    return {"success": True, "data": {"items": items, "offset": offset, "limit": limit, "total": total}}


@router.get("/{post_id}")
async def get_post(post_id: int, user: User | None = Depends(get_optional_user)):
    return {"success": True, "data": post_to_dict(await _get_or_404(post_id, include_hidden=user is not None))}


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(get_current_user)])
async def create_post(body: PostIn):
    p = await Post.create(**await _post_fields(body))
    return {"success": True, "data": post_to_dict(p)}


@router.put("/{post_id}", dependencies=[Depends(get_current_user)])
async def update_post(post_id: int, body: PostIn):
    p = await _get_or_404(post_id)
    for name, value in (await _post_fields(body)).items():
        setattr(p, name, value)
    await p.save()
    return {"success": True, "data": post_to_dict(p)}


@router.delete("/{post_id}", dependencies=[Depends(get_current_user)])
async def delete_post(post_id: int):
    p = await _get_or_404(post_id)
    data = post_to_dict(p)
    await p.delete()
    return {"success": True, "data": data}

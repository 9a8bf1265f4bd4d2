# plevenlab/api/v1/routers/users.py
from fastapi import APIRouter, Depends, HTTPException, Query, status

from plevenlab.api.v1.deps import get_current_user
from plevenlab.models.user import User
from plevenlab.schemas.user import UserIn
from plevenlab.services.users import UserServiceError, create_user, update_user

router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(get_current_user)])


def user_to_dict(u: User) -> dict:
    """
    Convert User model instance to dictionary format for API responses.
    Password hash and salt are deliberately left out.
    """
    return {
        "id": u.id,
        "name": u.name,
        "email": u.email,
        "createdAt": u.created_at.isoformat() if u.created_at else None,
        "lastLoginAt": u.last_login_at.isoformat() if u.last_login_at else None,
    }


def _bad_request(exc: UserServiceError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                         detail={"code": exc.code, "message": exc.message})


@router.get("")
async def list_users(
    offset: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=200),
):
    """
    Get paginated list of users, ordered by id.

    Returns:
        dict: success flag and data with items/offset/limit/total
    """
    total = await User.all().count()
    rows = await User.all().order_by("id").offset(offset).limit(limit)
    items = [user_to_dict(u) for u in rows]
    return {"success": True, "data": {"items": items, "offset": offset, "limit": limit, "total": total}}


@router.get("/{user_id}")
async def get_user(user_id: int):
    u = await User.get_or_none(id=user_id)
    if not u:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="USER_NOT_FOUND")
    return {"success": True, "data": user_to_dict(u)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def post_user(body: UserIn):
    """
    Create a new user account.

    Raises:
        HTTPException (400): Blank password (INVALID_INPUT) or taken name (USERNAME_TAKEN)
    """
    try:
        u = await create_user(body)
    except UserServiceError as exc:
        raise _bad_request(exc)
    return {"success": True, "data": user_to_dict(u)}


@router.put("/{user_id}")
async def put_user(user_id: int, body: UserIn):
    """
    Replace name/email of a user, and the password when one is given.

    Raises:
        HTTPException (404): If user not found
        HTTPException (400): If the new name is taken by another user
    """
    try:
        u = await update_user(user_id, body)
    except UserServiceError as exc:
        raise _bad_request(exc)
    if not u:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="USER_NOT_FOUND")
    return {"success": True, "data": user_to_dict(u)}


@router.delete("/{user_id}")
async def delete_user(user_id: int):
    """Delete a user together with its credential, events and posts."""
    u = await User.get_or_none(id=user_id)
    if not u:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="USER_NOT_FOUND")
    data = user_to_dict(u)
    await u.delete()
    return {"success": True, "data": data}

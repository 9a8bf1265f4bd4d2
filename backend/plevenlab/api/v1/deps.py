import jwt  # PyJWT
from fastapi import Header, HTTPException, status
from plevenlab.config import settings
from plevenlab.core.security import TokenIssuer, decode_access_token, get_token_issuer
from plevenlab.models.user import User

async def get_current_user(
    authorization: str | None = Header(default=None),
):
    """
    FastAPI dependency to get the current authenticated user.

    Extracts the JWT from the `Authorization: Bearer <token>` header, checks
    its signature and expiry, and loads the user named by its `sub` claim.

    Args:
        authorization: Optional Authorization header value

    Returns:
        User: The authenticated user object from database

    Raises:
        HTTPException (401): If no token is provided (AUTH_REQUIRED)
        HTTPException (401): If token is invalid or expired (AUTH_INVALID_TOKEN)
        HTTPException (401): If user not found in database (AUTH_USER_NOT_FOUND)

    Usage:
        @router.get("/protected")
        async def protected_route(user: User = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    token = None
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()

    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="AUTH_REQUIRED")

    try:
        payload = decode_access_token(token, settings.jwt_secret)
        user_id = int(payload["sub"])
    except (jwt.InvalidTokenError, KeyError, ValueError):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="AUTH_INVALID_TOKEN")

    user = await User.get_or_none(id=user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="AUTH_USER_NOT_FOUND")
    return user

def token_issuer() -> TokenIssuer:
    """FastAPI dependency returning the application TokenIssuer."""
    return get_token_issuer()

async def get_optional_user(
    authorization: str | None = Header(default=None),
) -> User | None:
    """
    Like get_current_user, but anonymous requests yield None instead of 401.
    A token that is present but invalid is still rejected.
    """
    if not authorization:
        return None
    return await get_current_user(authorization)

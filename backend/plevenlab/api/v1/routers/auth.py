from fastapi import APIRouter, HTTPException, status, Depends
from plevenlab.api.v1.deps import get_current_user, token_issuer
from plevenlab.api.v1.routers.users import user_to_dict
from plevenlab.core.security import TokenIssuer
from plevenlab.models.user import User
from plevenlab.schemas.auth import LoginRequest
from plevenlab.services.users import authenticate

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/login")
async def login(payload: LoginRequest, issuer: TokenIssuer = Depends(token_issuer)):
    """
    Authenticate user and issue a bearer token.

    Validates user credentials and issues a JWT valid for 7 days whose
    subject is the user id.

    Args:
        payload: Request body containing username and password
        issuer: Application TokenIssuer (from dependency)

    Returns:
        dict: Response containing:
            - success: bool (always True on success)
            - data: dict with:
                - user: User information (id, name, email, ...)
                - token: JWT token string

    Raises:
        HTTPException (400): If the password is blank (INVALID_INPUT)
        HTTPException (401): If credentials are invalid

    Note:
        Unknown username and wrong password produce the same response.
    """
    user = await authenticate(payload.username, payload.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
                            detail={"code": "AUTH_INVALID_CREDENTIALS", "message": "Username or password is incorrect"})
    token = issuer.issue(user.id)
    return {"success": True, "data": {"user": user_to_dict(user), "token": token}}

@router.get("/me")
async def me(user: User = Depends(get_current_user)):
    """
    Get current authenticated user information.

    Raises:
        HTTPException (401): If user is not authenticated
    """
    return {"success": True, "data": user_to_dict(user)}

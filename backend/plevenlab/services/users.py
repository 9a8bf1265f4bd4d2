# plevenlab/services/users.py
"""
User account service.

Wraps the credential codec around the User table: login checks, account
creation and account updates. Routers call into here instead of touching
password material themselves.
"""
import datetime as dt
import logging

from plevenlab.core.credentials import create_credential, require_password, verify_credential
from plevenlab.models.user import User
from plevenlab.schemas.user import UserIn

logger = logging.getLogger("uvicorn.error")


class UserServiceError(Exception):
    """
    Business-rule violation in the user service.

    Attributes:
        code: Stable error code returned to API clients (e.g. USERNAME_TAKEN)
        message: Human-readable description
    """

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


async def authenticate(username: str, password: str) -> User | None:
    """
    Check a login name and password.

    The password is checked for blankness before the account lookup, and
    unknown user and wrong password both return None, so the caller cannot
    tell them apart and neither can the client.

    Raises:
        CredentialError(INVALID_INPUT): If the password is blank
        CredentialError(MALFORMED_CREDENTIAL): If the stored credential is corrupt
    """
    require_password(password)
    user = await User.get_or_none(name=username)
    if user is None:
        return None
    if not verify_credential(password, user.credential):
        return None

    user.last_login_at = dt.datetime.now(dt.timezone.utc)
    await user.save(update_fields=["last_login_at"])
    return user


async def _ensure_name_available(name: str, exclude_id: int | None = None) -> None:
    qs = User.filter(name=name)
    if exclude_id is not None:
        qs = qs.exclude(id=exclude_id)
    if await qs.exists():
        raise UserServiceError("USERNAME_TAKEN", f'Username "{name}" is already taken')


async def create_user(data: UserIn) -> User:
    """
    Create a new account with a freshly derived credential.

    Raises:
        CredentialError(INVALID_INPUT): If the password is missing or blank
        UserServiceError(USERNAME_TAKEN): If the name is already in use
    """
    credential = create_credential(data.password)
    await _ensure_name_available(data.name)
    user = await User.create(
        name=data.name,
        email=data.email,
        password_hash=credential.hash,
        password_salt=credential.salt,
    )
    logger.info("[users] created user id=%s name=%s", user.id, user.name)
    return user


async def update_user(user_id: int, data: UserIn) -> User | None:
    """
    Update name, email and (optionally) password of an account.

    The password is only replaced when a non-blank one is supplied; the new
    credential replaces the old hash and salt together.

    Returns:
        The updated user, or None if no user has that id

    Raises:
        UserServiceError(USERNAME_TAKEN): If the new name belongs to another user
    """
    user = await User.get_or_none(id=user_id)
    if user is None:
        return None

    if user.name != data.name:
        await _ensure_name_available(data.name, exclude_id=user.id)

    user.name = data.name
    user.email = data.email
    if data.password and data.password.strip():
        user.set_credential(create_credential(data.password))
    await user.save()
    return user

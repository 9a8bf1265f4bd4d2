# plevenlab/core/bootstrap.py
"""
Bootstrap module for application initialization.
Creates the administrator account on the first startup of a deployment,
so a fresh install is never locked out.
"""
import logging
from typing import Awaitable, Callable

from plevenlab.config import settings
from plevenlab.core.credentials import Credential, create_credential
from plevenlab.core.passwords import DEFAULT_ADMIN_POLICY, generate_password
from plevenlab.models.user import User

logger = logging.getLogger("uvicorn.error")

CountUsers = Callable[[], Awaitable[int]]
PersistUser = Callable[[str, str, Credential], Awaitable[User]]


async def _count_users() -> int:
    return await User.all().count()


async def _persist_user(name: str, email: str, credential: Credential) -> User:
    return await User.create(
        name=name,
        email=email,
        password_hash=credential.hash,
        password_salt=credential.salt,
    )


async def ensure_default_admin(
    count_users: CountUsers | None = None,
    persist: PersistUser | None = None,
) -> User | None:
    """
    Create the administrator account if the user store is empty.

    Only takes effect when there are no users at all; on any later startup it
    does nothing, so it is safe to run on every boot. Must be awaited before
    the HTTP layer accepts requests.

    The generated one-time password is written to the log exactly once and
    never stored in plain text. This is a last-resort bootstrap mechanism:
    operators should log in and change it.

    Args:
        count_users: Async callable returning the number of stored users
            (defaults to counting the users table)
        persist: Async callable storing (name, email, credential) and
            returning the new user (defaults to inserting into the users table)

    Returns:
        The created administrator, or None if users already existed
    """
    count_users = count_users or _count_users
    persist = persist or _persist_user

    if await count_users() > 0:
        return None  # Skip creation if any account already exists

    password = generate_password(DEFAULT_ADMIN_POLICY)
    user = await persist(settings.admin_username, settings.admin_email, create_credential(password))

    # Sensitive: the only place the plaintext password ever appears
    logger.warning("[bootstrap] Automatically created user: %s password: %s", user.name, password)
    return user

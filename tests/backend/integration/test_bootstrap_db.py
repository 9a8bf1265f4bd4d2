import logging

import pytest
from tortoise import Tortoise

from plevenlab.config import settings
from plevenlab.core.bootstrap import ensure_default_admin
from plevenlab.core.db import close_db, init_db
from plevenlab.models.user import User
from plevenlab.services.users import authenticate


pytestmark = pytest.mark.asyncio


async def test_bootstrap_is_idempotent_against_database(db, caplog):
    with caplog.at_level(logging.WARNING, logger="uvicorn.error"):
        admin = await ensure_default_admin()
    assert admin is not None
    assert await User.all().count() == 1

    assert await ensure_default_admin() is None
    assert await User.all().count() == 1

    stored = await User.get(name=settings.admin_username)
    assert stored.email == settings.admin_email
    assert len(stored.password_hash) == 64
    assert len(stored.password_salt) == 128

    # The logged one-time password logs the admin in
    record = next(r for r in caplog.records if "[bootstrap]" in r.getMessage())
    password = record.args[1]
    assert (await authenticate(settings.admin_username, password)).id == stored.id


async def test_bootstrap_skipped_when_users_exist(db, create_user):
    await create_user()
    assert await ensure_default_admin() is None
    assert not await User.filter(name=settings.admin_username).exists()


async def test_first_start_on_empty_database_with_generate_schemas():
    if Tortoise._inited:
        await Tortoise.close_connections()
    await init_db(generate_schemas=True)
    try:
        admin = await ensure_default_admin()
        assert admin is not None
        assert await User.all().count() == 1
    finally:
        await close_db()

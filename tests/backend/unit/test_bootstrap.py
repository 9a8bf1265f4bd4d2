"""
Unit tests for core.bootstrap module.
Runs the administrator bootstrap against an in-memory stand-in store.
"""
import logging
from types import SimpleNamespace

import pytest

from plevenlab.config import settings
from plevenlab.core.bootstrap import ensure_default_admin
from plevenlab.core.credentials import verify_credential

pytestmark = pytest.mark.asyncio


class MemoryUserStore:
    """Minimal user store exposing the two calls the bootstrap needs."""

    def __init__(self):
        self.users = []

    async def count(self) -> int:
        return len(self.users)

    async def persist(self, name, email, credential):
        user = SimpleNamespace(id=len(self.users) + 1, name=name, email=email, credential=credential)
        self.users.append(user)
        return user


async def test_creates_admin_on_empty_store(caplog):
    store = MemoryUserStore()
    with caplog.at_level(logging.WARNING, logger="uvicorn.error"):
        user = await ensure_default_admin(store.count, store.persist)

    assert len(store.users) == 1
    assert user.name == settings.admin_username
    assert user.email == settings.admin_email
    assert len(user.credential.hash) == 64
    assert len(user.credential.salt) == 128

    # The one-time password is logged once and matches the stored credential
    records = [r for r in caplog.records if "[bootstrap]" in r.getMessage()]
    assert len(records) == 1
    password = records[0].args[1]
    assert user.name in records[0].getMessage()
    assert password in records[0].getMessage()
    assert len(password) >= 16
    assert verify_credential(password, user.credential) is True


async def test_second_run_is_noop(caplog):
    store = MemoryUserStore()
    await ensure_default_admin(store.count, store.persist)
    caplog.clear()

    with caplog.at_level(logging.WARNING, logger="uvicorn.error"):
        result = await ensure_default_admin(store.count, store.persist)

    assert result is None
    assert len(store.users) == 1
    assert not [r for r in caplog.records if "[bootstrap]" in r.getMessage()]


async def test_existing_users_block_creation():
    store = MemoryUserStore()
    await store.persist("someone", None, None)
    assert await ensure_default_admin(store.count, store.persist) is None
    assert [u.name for u in store.users] == ["someone"]

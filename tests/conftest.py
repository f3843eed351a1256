"""Pytest configuration and fixtures for platform core.

Unit tests use AsyncMock collaborators. Integration tests use
platform_core.infrastructure.persistence.database and skip unless
DATABASE_URL points at a Postgres database.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from platform_core.application.services.password_generator import PasswordGenerator
from platform_core.application.services.user_service import UserService
from platform_core.core.config import get_settings
from platform_core.domain.entities.user import UserEntity
from platform_core.infrastructure.persistence import database


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def inactive_user() -> UserEntity:
    return UserEntity(
        id="user-1",
        username="jdoe",
        first_name="John",
        last_name="Doe",
        hash_key="a" * 64,
        hashed_password="$2b$12$hash",
        active=False,
    )


@pytest.fixture
def user_repo() -> AsyncMock:
    """Mock user repository; save echoes its argument."""
    repo = AsyncMock()
    repo.save = AsyncMock(side_effect=lambda user: user)
    repo.get_by_id = AsyncMock(return_value=None)
    repo.get_by_username = AsyncMock(return_value=None)
    repo.get_by_hash_key = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def password_hasher() -> MagicMock:
    hasher = MagicMock()
    hasher.hash_password = MagicMock(side_effect=lambda p: f"hashed:{p}")
    return hasher


@pytest.fixture
def user_service(user_repo: AsyncMock, password_hasher: MagicMock) -> UserService:
    return UserService(
        user_repo=user_repo,
        password_generator=PasswordGenerator(),
        password_hasher=password_hasher,
    )


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository integration tests. Rolls back after test.

    Requires DATABASE_URL (postgresql+asyncpg://...). Skips when not configured.
    Run without DB via: pytest -m 'not requires_db'.
    """
    settings = get_settings()
    if not settings.database_url.startswith("postgresql"):
        pytest.skip("Postgres not configured: set DATABASE_URL=postgresql+asyncpg://...")
    await database.create_schema()
    assert database.AsyncSessionLocal is not None
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
    await database.dispose_engine()

"""Tests for service wiring and the SQL-not-configured guard."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from platform_core.application.services.user_service import UserService
from platform_core.composition import build_password_generator, build_user_service
from platform_core.core.config import Settings
from platform_core.domain.exceptions import SqlNotConfiguredException
from platform_core.infrastructure.persistence import database
from platform_core.infrastructure.persistence.repositories.user_repo import UserRepository
from platform_core.infrastructure.security.password import BcryptPasswordHasher


def test_build_user_service_wires_collaborators() -> None:
    settings = Settings(
        _env_file=None,
        password_length=6,
        password_min_uppercase=0,
        password_min_digits=0,
        password_min_special=6,
        password_special_characters="#",
        max_page_size=25,
    )
    service = build_user_service(MagicMock(spec=AsyncSession), settings)
    assert isinstance(service, UserService)
    assert isinstance(service._user_repo, UserRepository)
    assert service._user_repo.max_page_size == 25
    assert isinstance(service._password_hasher, BcryptPasswordHasher)
    assert service.generate_password() == "######"


def test_build_password_generator_uses_configured_specials() -> None:
    generator = build_password_generator(
        Settings(_env_file=None, password_special_characters="$")
    )
    assert generator.special == "$"


@pytest.mark.asyncio
async def test_get_db_without_database_url_raises(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "")
    monkeypatch.setattr(database, "AsyncSessionLocal", None)
    monkeypatch.setattr(database, "engine", None)
    with pytest.raises(SqlNotConfiguredException):
        async with database.session_scope():
            pass

"""Composition root: build application services from infrastructure implementations.

Callers (scripts, a web layer) depend on these factories, not on infra directly.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from platform_core.application.services.password_generator import (
    PasswordGenerator,
    PasswordPolicy,
)
from platform_core.application.services.user_service import UserService
from platform_core.core.config import Settings, get_settings
from platform_core.infrastructure.persistence.repositories import UserRepository
from platform_core.infrastructure.security.password import BcryptPasswordHasher


def build_password_generator(settings: Settings | None = None) -> PasswordGenerator:
    settings = settings or get_settings()
    return PasswordGenerator(special=settings.password_special_characters)


def password_policy_from_settings(settings: Settings) -> PasswordPolicy:
    return PasswordPolicy(
        length=settings.password_length,
        min_upper=settings.password_min_uppercase,
        min_digits=settings.password_min_digits,
        min_special=settings.password_min_special,
    )


def build_user_service(
    session: AsyncSession, settings: Settings | None = None
) -> UserService:
    """Return a UserService bound to session (one per unit of work)."""
    settings = settings or get_settings()
    return UserService(
        user_repo=UserRepository(session, max_page_size=settings.max_page_size),
        password_generator=build_password_generator(settings),
        password_hasher=BcryptPasswordHasher(),
        password_policy=password_policy_from_settings(settings),
        password_min_length=settings.password_min_length,
    )

"""Persistence repositories. Re-exports for dependency injection."""

from platform_core.infrastructure.persistence.repositories.base import BaseRepository
from platform_core.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = ["BaseRepository", "UserRepository"]

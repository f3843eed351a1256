"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities, application DTOs or schemas only; no
infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from platform_core.application.dtos.pagination import PageResult
    from platform_core.domain.entities.user import UserEntity
    from platform_core.schemas.pagination import PageRequest
    from platform_core.schemas.user import UserSearchForm


class IUserRepository(Protocol):
    """Protocol for user repository (DIP).

    Implementations own transactional boundaries. get_by_hash_key must lock
    the matched row (or equivalent) so that two concurrent activations with
    the same key cannot both succeed.
    """

    async def get_by_id(self, user_id: str) -> UserEntity | None:
        """Return user by ID."""

    async def get_by_username(self, username: str) -> UserEntity | None:
        """Return user by unique username."""

    async def get_by_hash_key(self, hash_key: str) -> UserEntity | None:
        """Return the user holding this activation key, locked for update."""

    async def save(self, user: UserEntity) -> UserEntity:
        """Insert or update the user; return the persisted form (with id)."""

    async def delete(self, user_id: str) -> None:
        """Delete user by ID. No-op when the user does not exist."""

    async def find_all(
        self, page_request: PageRequest, search_form: UserSearchForm
    ) -> PageResult[UserEntity]:
        """Return one page of users matching the search form."""

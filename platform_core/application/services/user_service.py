"""User application service: lookup, CRUD, activation and credentials."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from platform_core.application.services.password_generator import (
    DEFAULT_PASSWORD_POLICY,
    PasswordPolicy,
)
from platform_core.domain.exceptions import (
    PasswordGeneratorConfigurationException,
    ResourceNotFoundException,
    UserActivationException,
    ValidationException,
)

if TYPE_CHECKING:
    from platform_core.application.dtos.pagination import PageResult
    from platform_core.application.interfaces.repositories import IUserRepository
    from platform_core.application.interfaces.services import (
        IPasswordGenerator,
        IPasswordHasher,
    )
    from platform_core.domain.entities.user import UserEntity
    from platform_core.schemas.pagination import PageRequest
    from platform_core.schemas.user import UserSearchForm

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD_MIN_LENGTH = 8


def _mask_key(hash_key: str) -> str:
    """Return a log-safe prefix of an activation key."""
    return f"{hash_key[:8]}..." if len(hash_key) > 8 else "***"


class UserService:
    """Orchestrates user lookup, persistence, activation and password generation.

    Collaborators are injected; the service holds no state between calls.
    Callers own the transaction (one session per unit of work).
    """

    def __init__(
        self,
        user_repo: IUserRepository,
        password_generator: IPasswordGenerator,
        password_hasher: IPasswordHasher,
        *,
        password_policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY,
        password_min_length: int = DEFAULT_PASSWORD_MIN_LENGTH,
    ) -> None:
        self._user_repo = user_repo
        self._password_generator = password_generator
        self._password_hasher = password_hasher
        self._password_policy = password_policy
        self._password_min_length = password_min_length

    async def find(self, user_id: str) -> UserEntity:
        """Return user by id. Raises ResourceNotFoundException if missing."""
        logger.debug("find() - id: %s", user_id)
        user = await self._user_repo.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException("user", user_id)
        return user

    async def find_by_username(self, username: str) -> UserEntity:
        """Return user by username. Raises ResourceNotFoundException if missing."""
        logger.debug("find_by_username() - username: %s", username)
        user = await self._user_repo.get_by_username(username)
        if user is None:
            raise ResourceNotFoundException("user", username)
        return user

    async def find_all(
        self, page_request: PageRequest, search_form: UserSearchForm
    ) -> PageResult[UserEntity]:
        logger.debug(
            "find_all() - page_request: %s, search_form: %s", page_request, search_form
        )
        return await self._user_repo.find_all(page_request, search_form)

    async def create(self, user: UserEntity) -> UserEntity:
        logger.debug("create() - user: %r", user)
        return await self._user_repo.save(user)

    async def update(self, user: UserEntity) -> UserEntity:
        logger.debug("update() - user: %r", user)
        return await self._user_repo.save(user)

    async def delete(self, user_id: str) -> None:
        logger.debug("delete() - id: %s", user_id)
        await self._user_repo.delete(user_id)

    async def activate(self, hash_key: str) -> UserEntity:
        """Activate the account holding hash_key and consume the key.

        Keys are single-use: a second activation with the same key fails
        lookup and raises UserActivationException.

        Raises:
            UserActivationException: If no user holds hash_key.
        """
        logger.info("Activating user with hash key %s", _mask_key(hash_key))
        user = await self._user_repo.get_by_hash_key(hash_key) if hash_key else None
        if user is None:
            logger.error(
                "Cannot activate user with hash key %s. Wrong hash key.",
                _mask_key(hash_key),
            )
            raise UserActivationException()
        user.activate()
        saved = await self._user_repo.save(user)
        logger.info("Activated user %s (%s)", saved.id, saved.username)
        return saved

    def generate_password(self) -> str:
        """Return a random password for the fixed admin-issued policy.

        Raises:
            PasswordGeneratorConfigurationException: If the policy is infeasible.
        """
        policy = self._password_policy
        try:
            return self._password_generator.generate(
                policy.length, policy.min_upper, policy.min_digits, policy.min_special
            )
        except PasswordGeneratorConfigurationException:
            logger.exception("Password generator misconfigured: %s", policy)
            raise

    async def change_password(self, user_id: str, new_password: str) -> UserEntity:
        """Hash and store a new password for the user.

        Raises:
            ResourceNotFoundException: If the user does not exist.
            ValidationException: If new_password is shorter than the minimum length.
        """
        logger.debug("change_password() - id: %s", user_id)
        user = await self.find(user_id)
        if len(new_password) < self._password_min_length:
            raise ValidationException(
                f"Password must be at least {self._password_min_length} characters",
                field="password",
            )
        hashed = await asyncio.to_thread(
            self._password_hasher.hash_password, new_password
        )
        user.change_password(hashed)
        return await self._user_repo.save(user)

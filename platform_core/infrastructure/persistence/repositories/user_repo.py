"""User repository (SQLAlchemy). Interface methods take and return domain entities."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from platform_core.application.dtos.pagination import PageResult
from platform_core.domain.entities.user import UserEntity
from platform_core.domain.enums import SortDirection
from platform_core.domain.exceptions import (
    UserAlreadyExistsException,
    ValidationException,
)
from platform_core.infrastructure.persistence.models.user import User
from platform_core.infrastructure.persistence.repositories.base import BaseRepository
from platform_core.schemas.pagination import PageRequest
from platform_core.schemas.user import USER_SORT_FIELDS, UserSearchForm

logger = logging.getLogger(__name__)

DEFAULT_MAX_PAGE_SIZE = 100

# Columns copied between UserEntity and the User model (id is handled separately).
_USER_FIELDS = (
    "username",
    "screen_name",
    "first_name",
    "middle_name",
    "last_name",
    "job_title",
    "selected_language",
    "gender",
    "birthday",
    "registration_ip",
    "hash_key",
    "hashed_password",
    "active",
)


def _user_to_entity(u: User) -> UserEntity:
    """Map ORM User to domain UserEntity."""
    return UserEntity(id=u.id, **{field: getattr(u, field) for field in _USER_FIELDS})


def _apply_entity(u: User, entity: UserEntity) -> None:
    """Copy domain fields onto the ORM User."""
    for field in _USER_FIELDS:
        setattr(u, field, getattr(entity, field))


def _contains(value: str) -> str:
    """Return an ILIKE pattern matching value anywhere, with wildcards escaped."""
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class UserRepository(BaseRepository[User]):
    """User repository. Lookup by id, username or activation key; upsert; paged search."""

    def __init__(
        self, db: AsyncSession, *, max_page_size: int = DEFAULT_MAX_PAGE_SIZE
    ) -> None:
        super().__init__(db, User)
        self.max_page_size = max_page_size

    async def get_by_id(self, user_id: str) -> UserEntity | None:
        user = await self.get_model(user_id)
        return _user_to_entity(user) if user else None

    async def get_by_username(self, username: str) -> UserEntity | None:
        result = await self.db.execute(select(User).where(User.username == username))
        user = result.scalar_one_or_none()
        return _user_to_entity(user) if user else None

    async def get_by_hash_key(self, hash_key: str) -> UserEntity | None:
        """Return the user holding hash_key, with the row locked until the transaction ends.

        A concurrent activation with the same key blocks on the lock and then
        finds no row once the first one has cleared the key and committed.
        """
        result = await self.db.execute(
            select(User).where(User.hash_key == hash_key).with_for_update()
        )
        user = result.scalar_one_or_none()
        return _user_to_entity(user) if user else None

    async def save(self, user: UserEntity) -> UserEntity:
        """Insert the user, or update it when a row with its id exists.

        Raises:
            UserAlreadyExistsException: On a username or hash_key unique violation.
        """
        existing = await self.get_model(user.id) if user.id else None
        try:
            if existing is None:
                model = User(id=user.id) if user.id else User()
                _apply_entity(model, user)
                model = await self.create(model)
            else:
                _apply_entity(existing, user)
                model = await self.flush_update(existing)
        except IntegrityError:
            logger.warning("Unique constraint violated saving user %s", user.username)
            raise UserAlreadyExistsException()
        return _user_to_entity(model)

    async def delete(self, user_id: str) -> None:
        user = await self.get_model(user_id)
        if user is None:
            logger.debug("delete() - user %s not found, nothing to delete", user_id)
            return
        await self.delete_model(user)

    async def find_all(
        self, page_request: PageRequest, search_form: UserSearchForm
    ) -> PageResult[UserEntity]:
        """Return one page of users matching search_form.

        Default order is username ascending; size is capped at max_page_size.

        Raises:
            ValidationException: If page_request.sort is not a sortable field.
        """
        order_by = self._order_by(page_request)
        stmt = self._apply_filters(select(User), search_form)
        total = await self.count(stmt)
        size = min(page_request.size, self.max_page_size)
        stmt = stmt.order_by(*order_by)
        users = await self.fetch_page(stmt, page_request.page * size, size)
        return PageResult(
            items=[_user_to_entity(u) for u in users],
            page=page_request.page,
            size=size,
            total=total,
        )

    @staticmethod
    def _apply_filters(stmt: Select[Any], search_form: UserSearchForm) -> Select[Any]:
        if search_form.username is not None:
            stmt = stmt.where(
                User.username.ilike(_contains(search_form.username), escape="\\")
            )
        if search_form.first_name is not None:
            stmt = stmt.where(
                User.first_name.ilike(_contains(search_form.first_name), escape="\\")
            )
        if search_form.last_name is not None:
            stmt = stmt.where(
                User.last_name.ilike(_contains(search_form.last_name), escape="\\")
            )
        if search_form.active is not None:
            stmt = stmt.where(User.active.is_(search_form.active))
        return stmt

    @staticmethod
    def _order_by(page_request: PageRequest) -> list[Any]:
        sort = page_request.sort or "username"
        if sort not in USER_SORT_FIELDS:
            raise ValidationException(
                f"Cannot sort users by '{sort}'. Allowed: {', '.join(USER_SORT_FIELDS)}",
                field="sort",
            )
        column = getattr(User, sort)
        if page_request.direction == SortDirection.DESC:
            primary = column.desc()
        else:
            primary = column.asc()
        # Tie-break on id so pages are stable when the sort column has duplicates.
        return [primary, User.id.asc()]

"""Request schemas (pydantic) for listings and search."""

from platform_core.schemas.pagination import DEFAULT_PAGE_SIZE, PageRequest
from platform_core.schemas.user import USER_SORT_FIELDS, UserSearchForm

__all__ = ["DEFAULT_PAGE_SIZE", "PageRequest", "USER_SORT_FIELDS", "UserSearchForm"]

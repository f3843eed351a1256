"""Paging request schema (page number, size, sort)."""

from pydantic import BaseModel, ConfigDict, Field

from platform_core.domain.enums import SortDirection

DEFAULT_PAGE_SIZE = 20


class PageRequest(BaseModel):
    """Requested page of a listing. Pages are 0-based.

    Size is bounded by settings.max_page_size at the repository.
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=0, ge=0)
    size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    sort: str | None = None
    direction: SortDirection = SortDirection.ASC

"""Application DTOs (read-models, no ORM dependency)."""

from platform_core.application.dtos.pagination import PageResult

__all__ = ["PageResult"]

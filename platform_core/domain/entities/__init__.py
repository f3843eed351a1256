"""Domain entities.

Pure domain models; no ORM or persistence concerns.
"""

from platform_core.domain.entities.user import UserEntity

__all__ = ["UserEntity"]

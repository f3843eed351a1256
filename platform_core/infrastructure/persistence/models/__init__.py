"""ORM models. Importing this package registers all tables on Base.metadata."""

from platform_core.infrastructure.persistence.models.user import User

__all__ = ["User"]

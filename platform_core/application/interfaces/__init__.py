"""Application interfaces (ports). Implemented by infrastructure."""

from platform_core.application.interfaces.repositories import IUserRepository
from platform_core.application.interfaces.services import (
    IPasswordGenerator,
    IPasswordHasher,
)

__all__ = ["IPasswordGenerator", "IPasswordHasher", "IUserRepository"]

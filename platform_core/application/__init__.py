"""Application layer: interfaces, DTOs and services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, password hashing).
"""

from platform_core.application.interfaces import (
    IPasswordGenerator,
    IPasswordHasher,
    IUserRepository,
)
from platform_core.application.services import PasswordGenerator, UserService

__all__ = [
    "IPasswordGenerator",
    "IPasswordHasher",
    "IUserRepository",
    "PasswordGenerator",
    "UserService",
]

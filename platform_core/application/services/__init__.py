"""Application services."""

from platform_core.application.services.password_generator import (
    DEFAULT_PASSWORD_POLICY,
    PasswordGenerator,
    PasswordPolicy,
    count_character_classes,
)
from platform_core.application.services.user_service import UserService

__all__ = [
    "DEFAULT_PASSWORD_POLICY",
    "PasswordGenerator",
    "PasswordPolicy",
    "UserService",
    "count_character_classes",
]

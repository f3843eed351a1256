"""Domain layer: entities, builders, enums, and exceptions.

No dependencies on infrastructure. Used by application and infrastructure
layers.
"""

from platform_core.domain.builders import UserBuilder
from platform_core.domain.entities import UserEntity
from platform_core.domain.enums import SortDirection, UserGender, UserLanguage
from platform_core.domain.exceptions import (
    PasswordGeneratorConfigurationException,
    PlatformException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    UserActivationException,
    UserAlreadyExistsException,
    ValidationException,
)

__all__ = [
    # Entities and builders
    "UserBuilder",
    "UserEntity",
    # Enums
    "SortDirection",
    "UserGender",
    "UserLanguage",
    # Exceptions
    "PasswordGeneratorConfigurationException",
    "PlatformException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "UserActivationException",
    "UserAlreadyExistsException",
    "ValidationException",
]

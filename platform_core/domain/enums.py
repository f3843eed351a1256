"""Domain enumerations for the platform core.

Enums represent fixed sets of domain values (e.g. user language).
"""

from enum import Enum


class UserLanguage(str, Enum):
    """Interface language selected by a user."""

    ENGLISH = "english"
    POLISH = "polish"
    RUSSIAN = "russian"
    SPANISH = "spanish"
    UKRAINIAN = "ukrainian"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid language values as strings."""
        return [language.value for language in cls]


class UserGender(str, Enum):
    """User gender as recorded in personal data."""

    MALE = "male"
    FEMALE = "female"


class SortDirection(str, Enum):
    """Sort direction for paged queries."""

    ASC = "asc"
    DESC = "desc"

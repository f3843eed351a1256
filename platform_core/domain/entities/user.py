"""User domain entity.

Represents a platform account, independent of persistence.
"""

from dataclasses import dataclass
from datetime import date

from platform_core.domain.enums import UserGender, UserLanguage
from platform_core.domain.exceptions import ValidationException


@dataclass
class UserEntity:
    """Domain entity for a user account.

    Owns the activation state transition: a user becomes active only through
    activate(), which also consumes the activation hash key so it cannot be
    replayed. Validation runs on construction.
    """

    username: str
    id: str | None = None
    screen_name: str | None = None
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    job_title: str | None = None
    selected_language: UserLanguage = UserLanguage.ENGLISH
    gender: UserGender | None = None
    birthday: date | None = None
    registration_ip: str | None = None
    hash_key: str | None = None
    hashed_password: str | None = None
    active: bool = False

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate user business rules. Raises ValidationException if invalid."""
        if not self.username or not self.username.strip():
            raise ValidationException("Username is required", field="username")

    def activate(self) -> None:
        """Mark the account active and consume the activation hash key."""
        self.active = True
        self.hash_key = None

    def change_password(self, hashed_password: str) -> None:
        """Replace the stored password hash."""
        if not hashed_password:
            raise ValidationException("Password hash is required", field="password")
        self.hashed_password = hashed_password

    def __repr__(self) -> str:
        # Never include hashed_password or hash_key in logs.
        return (
            f"UserEntity(id={self.id!r}, username={self.username!r}, "
            f"active={self.active!r})"
        )

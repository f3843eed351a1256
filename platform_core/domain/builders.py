"""Fluent builder for user entities.

Collects fields step by step and returns a fully formed UserEntity from
build(). A builder may be reused; each build() returns a new entity.
"""

from __future__ import annotations

from datetime import date

from platform_core.domain.entities.user import UserEntity
from platform_core.domain.enums import UserGender, UserLanguage
from platform_core.domain.exceptions import ValidationException
from platform_core.shared.utils.generators import generate_hash_key


class UserBuilder:
    """Assemble a UserEntity with chained setters.

    Example:
        user = (
            UserBuilder()
            .credentials("jdoe", hashed)
            .personal_data("John", None, "Doe")
            .registration_ip("10.0.0.1")
            .build()
        )
    """

    def __init__(self) -> None:
        self._username: str | None = None
        self._hashed_password: str | None = None
        self._screen_name: str | None = None
        self._first_name: str | None = None
        self._middle_name: str | None = None
        self._last_name: str | None = None
        self._birthday: date | None = None
        self._job_title: str | None = None
        self._language = UserLanguage.ENGLISH
        self._gender: UserGender | None = None
        self._registration_ip: str | None = None
        self._hash_key: str | None = None
        self._active = False

    def credentials(self, username: str, hashed_password: str | None) -> UserBuilder:
        self._username = username
        self._hashed_password = hashed_password
        return self

    def screen_name(self, screen_name: str) -> UserBuilder:
        self._screen_name = screen_name
        return self

    def personal_data(
        self,
        first_name: str | None,
        middle_name: str | None,
        last_name: str | None,
    ) -> UserBuilder:
        self._first_name = first_name
        self._middle_name = middle_name
        self._last_name = last_name
        return self

    def additional_data(
        self,
        birthday: date | None = None,
        job_title: str | None = None,
        language: UserLanguage = UserLanguage.ENGLISH,
        gender: UserGender | None = None,
    ) -> UserBuilder:
        self._birthday = birthday
        self._job_title = job_title
        self._language = language
        self._gender = gender
        return self

    def registration_ip(self, registration_ip: str) -> UserBuilder:
        self._registration_ip = registration_ip
        return self

    def hash_key(self, hash_key: str) -> UserBuilder:
        self._hash_key = hash_key
        return self

    def active(self, active: bool = True) -> UserBuilder:
        self._active = active
        return self

    def build(self) -> UserEntity:
        """Return a new UserEntity.

        An inactive user without an explicit hash key gets a freshly issued
        activation key. Active users carry no key.

        Raises:
            ValidationException: If credentials() was never called.
        """
        if self._username is None:
            raise ValidationException("Username is required", field="username")
        hash_key = self._hash_key
        if hash_key is None and not self._active:
            hash_key = generate_hash_key()
        return UserEntity(
            username=self._username,
            hashed_password=self._hashed_password,
            screen_name=self._screen_name,
            first_name=self._first_name,
            middle_name=self._middle_name,
            last_name=self._last_name,
            birthday=self._birthday,
            job_title=self._job_title,
            selected_language=self._language,
            gender=self._gender,
            registration_ip=self._registration_ip,
            hash_key=hash_key,
            active=self._active,
        )

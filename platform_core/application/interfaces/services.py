"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from typing import Protocol


class IPasswordGenerator(Protocol):
    """Protocol for random password generation with per-class minimum counts."""

    def generate(
        self, length: int, min_upper: int, min_digits: int, min_special: int
    ) -> str:
        """Return a password of exactly length characters meeting every minimum."""


class IPasswordHasher(Protocol):
    """Protocol for one-way password hashing."""

    def hash_password(self, password: str) -> str:
        """Return a salted hash of password."""

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Return True if plain_password matches hashed_password."""

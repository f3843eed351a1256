"""Random password generation with compositional constraints.

Required characters of each class are drawn first, the remaining positions
are filled from the combined alphabet, and the result is shuffled so the
required characters are not front-loaded.
"""

from __future__ import annotations

import random
import secrets
import string
from dataclasses import dataclass
from itertools import combinations

from platform_core.domain.exceptions import PasswordGeneratorConfigurationException

DEFAULT_SPECIAL_CHARACTERS = "!@#$%^&*-_=+"


@dataclass(frozen=True)
class PasswordPolicy:
    """Length and per-class minimum counts for a generated password."""

    length: int
    min_upper: int
    min_digits: int
    min_special: int


DEFAULT_PASSWORD_POLICY = PasswordPolicy(length=12, min_upper=2, min_digits=8, min_special=2)


@dataclass(frozen=True)
class CharacterClassCounts:
    """Number of characters of each class in a password."""

    lower: int
    upper: int
    digits: int
    special: int
    other: int


def count_character_classes(
    password: str, special: str = DEFAULT_SPECIAL_CHARACTERS
) -> CharacterClassCounts:
    """Count lowercase, uppercase, digit and special characters in password.

    Characters outside the ASCII letters, digits and the given special
    alphabet are counted as other.
    """
    lower = upper = digits = specials = other = 0
    for ch in password:
        if ch in string.ascii_lowercase:
            lower += 1
        elif ch in string.ascii_uppercase:
            upper += 1
        elif ch in string.digits:
            digits += 1
        elif ch in special:
            specials += 1
        else:
            other += 1
    return CharacterClassCounts(lower, upper, digits, specials, other)


class PasswordGenerator:
    """Generate passwords with a minimum number of uppercase, digit and special characters.

    Uses the OS CSPRNG (secrets.SystemRandom) unless another random.Random
    instance is injected.
    """

    def __init__(
        self,
        special: str = DEFAULT_SPECIAL_CHARACTERS,
        *,
        uppercase: str = string.ascii_uppercase,
        lowercase: str = string.ascii_lowercase,
        digits: str = string.digits,
        rng: random.Random | None = None,
    ) -> None:
        if not special or not uppercase or not lowercase or not digits:
            raise PasswordGeneratorConfigurationException(
                "Character alphabets must not be empty"
            )
        alphabets = {
            "uppercase": uppercase,
            "lowercase": lowercase,
            "digits": digits,
            "special": special,
        }
        for first, second in combinations(alphabets, 2):
            shared = set(alphabets[first]) & set(alphabets[second])
            if shared:
                raise PasswordGeneratorConfigurationException(
                    f"Character alphabets '{first}' and '{second}' overlap",
                    shared="".join(sorted(shared)),
                )
        self._special = special
        self._uppercase = uppercase
        self._lowercase = lowercase
        self._digits = digits
        self._alphabet = lowercase + uppercase + digits + special
        self._rng = rng or secrets.SystemRandom()

    @property
    def special(self) -> str:
        return self._special

    def generate(
        self, length: int, min_upper: int, min_digits: int, min_special: int
    ) -> str:
        """Return a random password of exactly length characters.

        Raises:
            PasswordGeneratorConfigurationException: If a count is negative,
                length is below 1, or the minimums add up to more than length.
        """
        self._check_constraints(length, min_upper, min_digits, min_special)
        rng = self._rng
        chars = [rng.choice(self._uppercase) for _ in range(min_upper)]
        chars.extend(rng.choice(self._digits) for _ in range(min_digits))
        chars.extend(rng.choice(self._special) for _ in range(min_special))
        remaining = length - len(chars)
        chars.extend(rng.choice(self._alphabet) for _ in range(remaining))
        rng.shuffle(chars)
        return "".join(chars)

    def generate_for(self, policy: PasswordPolicy) -> str:
        """Return a password satisfying policy."""
        return self.generate(
            policy.length, policy.min_upper, policy.min_digits, policy.min_special
        )

    @staticmethod
    def _check_constraints(
        length: int, min_upper: int, min_digits: int, min_special: int
    ) -> None:
        details = {
            "length": length,
            "min_upper": min_upper,
            "min_digits": min_digits,
            "min_special": min_special,
        }
        if length < 1:
            raise PasswordGeneratorConfigurationException(
                "Password length must be at least 1", **details
            )
        if min(min_upper, min_digits, min_special) < 0:
            raise PasswordGeneratorConfigurationException(
                "Minimum character counts must not be negative", **details
            )
        if min_upper + min_digits + min_special > length:
            raise PasswordGeneratorConfigurationException(
                "Password constraints exceed requested length", **details
            )

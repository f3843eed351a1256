"""Tests for PasswordGenerator (length, class minimums, shuffling, configuration errors)."""

import random
import secrets

import pytest

from platform_core.application.services.password_generator import (
    DEFAULT_PASSWORD_POLICY,
    DEFAULT_SPECIAL_CHARACTERS,
    PasswordGenerator,
    PasswordPolicy,
    count_character_classes,
)
from platform_core.domain.exceptions import PasswordGeneratorConfigurationException

VALID_PARAMETERS = [
    (12, 2, 8, 2),
    (1, 0, 0, 0),
    (1, 1, 0, 0),
    (4, 1, 1, 1),
    (8, 0, 8, 0),
    (10, 10, 0, 0),
    (16, 3, 3, 3),
    (64, 0, 0, 0),
]


class TestGenerateConstraints:
    """Every output has the requested length and meets every minimum."""

    @pytest.mark.parametrize("length,min_upper,min_digits,min_special", VALID_PARAMETERS)
    def test_length_and_minimums(
        self, length: int, min_upper: int, min_digits: int, min_special: int
    ) -> None:
        generator = PasswordGenerator()
        for _ in range(50):
            password = generator.generate(length, min_upper, min_digits, min_special)
            counts = count_character_classes(password)
            assert len(password) == length
            assert counts.upper >= min_upper
            assert counts.digits >= min_digits
            assert counts.special >= min_special
            assert counts.other == 0

    def test_fixed_policy_12_2_8_2(self) -> None:
        password = PasswordGenerator().generate(12, 2, 8, 2)
        counts = count_character_classes(password)
        assert len(password) == 12
        assert counts.upper == 2
        assert counts.digits == 8
        assert counts.special == 2
        assert counts.lower == 0

    def test_generate_for_policy(self) -> None:
        password = PasswordGenerator().generate_for(DEFAULT_PASSWORD_POLICY)
        assert len(password) == DEFAULT_PASSWORD_POLICY.length

    def test_custom_special_alphabet(self) -> None:
        generator = PasswordGenerator(special="#")
        password = generator.generate(6, 0, 0, 3)
        assert password.count("#") >= 3
        assert count_character_classes(password, special="#").other == 0


class TestGenerateRandomness:
    """Output is not deterministic and required characters are not front-loaded."""

    def test_outputs_are_distinct(self) -> None:
        generator = PasswordGenerator()
        outputs = {generator.generate(12, 2, 8, 2) for _ in range(100)}
        # 10^8 digit arrangements alone; collisions are practically impossible.
        assert len(outputs) == 100

    def test_default_source_is_system_random(self) -> None:
        assert isinstance(PasswordGenerator()._rng, secrets.SystemRandom)

    def test_injected_rng_is_deterministic(self) -> None:
        a = PasswordGenerator(rng=random.Random(42)).generate(16, 3, 3, 3)
        b = PasswordGenerator(rng=random.Random(42)).generate(16, 3, 3, 3)
        assert a == b

    def test_required_characters_are_shuffled(self) -> None:
        generator = PasswordGenerator(rng=random.Random(7))
        first_two = [generator.generate(12, 2, 8, 2)[:2] for _ in range(200)]
        # Without shuffling the uppercase draws would always lead.
        assert any(not prefix.isupper() for prefix in first_two)


class TestGenerateConfigurationErrors:
    """Infeasible parameters raise PasswordGeneratorConfigurationException."""

    def test_minimums_exceed_length(self) -> None:
        with pytest.raises(PasswordGeneratorConfigurationException) as exc_info:
            PasswordGenerator().generate(5, 3, 3, 0)
        assert exc_info.value.error_code == "CONFIGURATION_ERROR"
        assert "exceed" in exc_info.value.message
        assert exc_info.value.details == {
            "length": 5,
            "min_upper": 3,
            "min_digits": 3,
            "min_special": 0,
        }

    def test_negative_minimum(self) -> None:
        with pytest.raises(PasswordGeneratorConfigurationException):
            PasswordGenerator().generate(8, -1, 2, 2)

    def test_zero_length(self) -> None:
        with pytest.raises(PasswordGeneratorConfigurationException):
            PasswordGenerator().generate(0, 0, 0, 0)

    def test_empty_special_alphabet(self) -> None:
        with pytest.raises(PasswordGeneratorConfigurationException):
            PasswordGenerator(special="")

    @pytest.mark.parametrize(
        "alphabets",
        [
            {"special": "AB"},
            {"special": "!7"},
            {"special": "!a"},
            {"uppercase": "ABC", "lowercase": "abcA"},
            {"digits": "0123x", "lowercase": "xyz"},
        ],
    )
    def test_overlapping_alphabets(self, alphabets) -> None:
        with pytest.raises(PasswordGeneratorConfigurationException) as exc_info:
            PasswordGenerator(**alphabets)
        assert "overlap" in exc_info.value.message

    def test_disjoint_alphabets_keep_special_guarantee(self) -> None:
        generator = PasswordGenerator(special="~?")
        for _ in range(50):
            password = generator.generate(12, 2, 8, 2)
            assert sum(ch in "~?" for ch in password) >= 2


def test_count_character_classes() -> None:
    counts = count_character_classes("AB12345678!@")
    assert counts.upper == 2
    assert counts.digits == 8
    assert counts.special == 2
    assert counts.lower == 0
    assert counts.other == 0
    assert count_character_classes("aé ").other == 2


def test_default_policy_values() -> None:
    assert DEFAULT_PASSWORD_POLICY == PasswordPolicy(12, 2, 8, 2)
    assert DEFAULT_SPECIAL_CHARACTERS == "!@#$%^&*-_=+"

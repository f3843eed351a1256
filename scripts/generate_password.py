"""Print a random password (no database access).

Usage:
    python -m scripts.generate_password [length min_upper min_digits min_special]
Without arguments the configured policy is used (default 12 chars, 2 upper, 8 digits, 2 special).
"""

import sys

from platform_core.composition import build_password_generator, password_policy_from_settings
from platform_core.core.config import get_settings
from platform_core.domain.exceptions import PasswordGeneratorConfigurationException


def main() -> None:
    """Generate and print one password."""
    settings = get_settings()
    args = sys.argv[1:]
    if args and len(args) != 4:
        print(
            "Usage: python -m scripts.generate_password [length min_upper min_digits min_special]",
            file=sys.stderr,
        )
        sys.exit(1)
    try:
        numbers = [int(a) for a in args]
    except ValueError:
        print("Arguments must be integers", file=sys.stderr)
        sys.exit(1)
    generator = build_password_generator(settings)
    try:
        if numbers:
            password = generator.generate(*numbers)
        else:
            password = generator.generate_for(password_policy_from_settings(settings))
    except PasswordGeneratorConfigurationException as exc:
        print(f"{exc.error_code}: {exc.message}", file=sys.stderr)
        sys.exit(1)
    print(password)


if __name__ == "__main__":
    main()

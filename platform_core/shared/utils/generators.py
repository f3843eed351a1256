"""ID and token generators (CUID for primary keys, hex hash keys for activation)."""

import secrets

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()

HASH_KEY_BYTES = 32


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def generate_hash_key() -> str:
    """Generate a one-time account activation key (64 hex characters)."""
    return secrets.token_hex(HASH_KEY_BYTES)

"""Activate a user account by its one-time hash key.

Usage:
    python -m scripts.activate_user <hash_key>
"""

import asyncio
import sys

from platform_core.composition import build_user_service
from platform_core.domain.exceptions import PlatformException
from platform_core.infrastructure.persistence.database import dispose_engine, session_scope
from platform_core.shared.telemetry.logging import setup_logging


async def main() -> None:
    """Activate the user holding the hash key given in argv."""
    if len(sys.argv) < 2:
        print("Usage: python -m scripts.activate_user <hash_key>", file=sys.stderr)
        sys.exit(1)
    hash_key = sys.argv[1]

    setup_logging()
    try:
        async with session_scope() as session:
            user = await build_user_service(session).activate(hash_key)
    except PlatformException as exc:
        print(f"{exc.error_code}: {exc.message}", file=sys.stderr)
        sys.exit(1)
    finally:
        await dispose_engine()
    print(f"Activated user {user.id} ({user.username})")


if __name__ == "__main__":
    asyncio.run(main())

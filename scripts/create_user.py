"""Create an inactive user with a generated password and print its activation key.

Usage:
    python -m scripts.create_user <username> [first_name last_name]
The generated password and hash key are printed once; only the bcrypt hash is stored.
"""

import asyncio
import sys

from platform_core.composition import build_user_service
from platform_core.domain.builders import UserBuilder
from platform_core.domain.exceptions import PlatformException
from platform_core.infrastructure.persistence.database import dispose_engine, session_scope
from platform_core.infrastructure.security.password import get_password_hash
from platform_core.shared.telemetry.logging import setup_logging


async def main() -> None:
    """Create user from argv."""
    if len(sys.argv) < 2:
        print(
            "Usage: python -m scripts.create_user <username> [first_name last_name]",
            file=sys.stderr,
        )
        sys.exit(1)
    username = sys.argv[1]
    first_name = sys.argv[2] if len(sys.argv) > 2 else None
    last_name = sys.argv[3] if len(sys.argv) > 3 else None

    setup_logging()
    try:
        async with session_scope() as session:
            service = build_user_service(session)
            password = service.generate_password()
            user = (
                UserBuilder()
                .credentials(username, await asyncio.to_thread(get_password_hash, password))
                .personal_data(first_name, None, last_name)
                .build()
            )
            created = await service.create(user)
    except PlatformException as exc:
        print(f"{exc.error_code}: {exc.message}", file=sys.stderr)
        sys.exit(1)
    finally:
        await dispose_engine()
    print(f"Created user: {created.id} ({created.username})")
    print(f"Password: {password}")
    print(f"Activation key: {created.hash_key}")


if __name__ == "__main__":
    asyncio.run(main())

"""Create the database schema for all models (idempotent).

Usage:
    python -m scripts.init_db
Requires DATABASE_URL.
"""

import asyncio
import sys

from platform_core.domain.exceptions import SqlNotConfiguredException
from platform_core.infrastructure.persistence.database import create_schema, dispose_engine
from platform_core.shared.telemetry.logging import setup_logging


async def main() -> None:
    """Create tables."""
    setup_logging()
    try:
        await create_schema()
    except SqlNotConfiguredException as exc:
        print(exc.message, file=sys.stderr)
        sys.exit(1)
    finally:
        await dispose_engine()
    print("Schema created")


if __name__ == "__main__":
    asyncio.run(main())

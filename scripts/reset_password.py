"""Reset an employee's password.

Usage:
    python -m scripts.reset_password <email> <new_password>
When Redis is enabled the repository also evicts the cached principal,
otherwise logins keep checking the old hash until it expires.
"""

import asyncio
import sys

from backoffice.core.config import get_settings
from backoffice.infrastructure.cache import CacheService
from backoffice.infrastructure.persistence import database
from backoffice.infrastructure.persistence.repositories import EmployeeRepository


async def main() -> None:
    """Reset password for the employee with the given email."""
    if len(sys.argv) < 3:
        print(
            "Usage: python -m scripts.reset_password <email> <new_password>",
            file=sys.stderr,
        )
        sys.exit(1)
    email = sys.argv[1]
    new_password = sys.argv[2]

    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("DATABASE_URL is not configured", file=sys.stderr)
        sys.exit(1)

    cache = None
    if get_settings().redis_enabled:
        cache = CacheService()
        await cache.connect()

    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            repo = EmployeeRepository(session, cache_service=cache)
            employee = await repo.update_password(email, new_password)
    if cache is not None:
        await cache.disconnect()
    await database.dispose_engine()

    if not employee:
        print(f"Employee not found: {email}", file=sys.stderr)
        sys.exit(1)
    print(f"Password reset for employee {employee.id} ({employee.email})")


if __name__ == "__main__":
    asyncio.run(main())

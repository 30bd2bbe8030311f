"""Create a back-office employee.

Usage:
    python -m scripts.create_employee <email> [password] [--role ROLE ...] [--tab TAB]
If password is omitted, a random one is printed. Creates the employee table
if it does not exist yet.
"""

import argparse
import asyncio
import secrets
import sys

from backoffice.domain.exceptions import ValidationException
from backoffice.infrastructure.persistence import database
from backoffice.infrastructure.persistence.repositories import EmployeeRepository


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="python -m scripts.create_employee")
    parser.add_argument("email")
    parser.add_argument("password", nargs="?")
    parser.add_argument("--role", action="append", default=[], dest="roles")
    parser.add_argument("--tab", default=None, help="Default landing tab, e.g. orders")
    parser.add_argument("--firstname", default="")
    parser.add_argument("--lastname", default="")
    return parser.parse_args(argv)


async def main(argv: list[str]) -> None:
    """Create the employee described by argv."""
    args = _parse_args(argv)
    password = args.password or secrets.token_urlsafe(12)

    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("DATABASE_URL is not configured", file=sys.stderr)
        sys.exit(1)
    await database.create_all()

    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            repo = EmployeeRepository(session)
            try:
                employee = await repo.create_employee(
                    args.email,
                    password,
                    firstname=args.firstname,
                    lastname=args.lastname,
                    roles=args.roles,
                    default_tab=args.tab,
                )
            except ValidationException as e:
                print(e.message, file=sys.stderr)
                sys.exit(1)
    print(f"Created employee: {employee.id} ({employee.email})")
    if not args.password:
        print(f"Password: {password}")
    await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1:]))

"""Pytest configuration and fixtures for the back office.

Environment is set before backoffice.main is imported so create_app() sees a
valid SECRET_KEY, no Redis and non-secure cookies (the test client speaks
plain HTTP). Database-backed collaborators are replaced with in-memory fakes
through app.dependency_overrides.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-backoffice-sessions")
os.environ.setdefault("REDIS_ENABLED", "false")
os.environ.setdefault("SESSION_COOKIE_SECURE", "false")

from collections.abc import Iterator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.api.dependencies import get_cache, get_employee_lookup
from backoffice.application.dtos.employee import EmployeeForAuthentication
from backoffice.application.queries.get_employee_for_authentication import (
    GetEmployeeForAuthentication,
)
from backoffice.core.limiter import limiter, reset_login_attempts
from backoffice.infrastructure.persistence import database
from backoffice.infrastructure.security.password import get_password_hash
from backoffice.main import app

EMPLOYEE_EMAIL = "demo@example.com"
EMPLOYEE_PASSWORD = "Correct-Horse-Battery-1"


class FakeCache:
    """In-memory cache with the CacheService contract (JSON-safe values, bool writes)."""

    def __init__(self, *, available: bool = True, fail_writes: bool = False) -> None:
        self.data: dict[str, Any] = {}
        self.available = available
        self.fail_writes = fail_writes
        self.set_calls: list[tuple[str, Any, int]] = []

    def is_available(self) -> bool:
        return self.available

    async def get(self, key: str) -> Any:
        if not self.available:
            return None
        return self.data.get(key)

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        self.set_calls.append((key, value, ttl))
        if self.fail_writes:
            return False
        self.data[key] = value
        return True

    async def delete(self, key: str) -> bool:
        return self.data.pop(key, None) is not None


class FakeEmployeeLookup:
    """Employee lookup over a dict keyed by lowercased email; counts calls."""

    def __init__(self, employees: list[EmployeeForAuthentication] | None = None) -> None:
        self.employees = {e.email.lower(): e for e in employees or []}
        self.calls: list[str] = []

    def remove(self, email: str) -> None:
        self.employees.pop(email.lower(), None)

    async def handle(
        self, query: GetEmployeeForAuthentication
    ) -> EmployeeForAuthentication | None:
        self.calls.append(query.email.value)
        return self.employees.get(query.email.value)


@pytest.fixture(scope="session")
def employee_password_hash() -> str:
    """bcrypt hash of EMPLOYEE_PASSWORD (computed once; bcrypt is slow by design)."""
    return get_password_hash(EMPLOYEE_PASSWORD)


@pytest.fixture
def employee(employee_password_hash: str) -> EmployeeForAuthentication:
    return EmployeeForAuthentication(
        employee_id="emp-1",
        email=EMPLOYEE_EMAIL,
        password_hash=employee_password_hash,
        roles=("ROLE_EMPLOYEE", "ROLE_MOD_TAB_ADMINORDERS_READ"),
        default_page_url="/admin/dashboard",
    )


@pytest.fixture
def employee_lookup(employee: EmployeeForAuthentication) -> FakeEmployeeLookup:
    return FakeEmployeeLookup([employee])


@pytest.fixture
def fake_cache() -> FakeCache:
    return FakeCache()


@pytest.fixture(autouse=True)
def _no_rate_limits() -> Iterator[None]:
    """Disable the per-IP limiter and clear per-email attempts between tests."""
    limiter.enabled = False
    reset_login_attempts()
    yield
    limiter.enabled = True
    reset_login_attempts()


@pytest.fixture
async def client(
    employee_lookup: FakeEmployeeLookup, fake_cache: FakeCache
) -> AsyncClient:
    """Async HTTP client against the app with lookup and cache replaced by fakes."""
    app.dependency_overrides[get_employee_lookup] = lambda: employee_lookup
    app.dependency_overrides[get_cache] = lambda: fake_cache
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository tests. Rolls back after each test.

    Skips when DATABASE_URL is not set. Mark tests using it with
    @pytest.mark.requires_db; run without a database via: pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip("Postgres not configured: set DATABASE_URL")
    await database.create_all()
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
    # Connections are bound to this test's event loop.
    await database.dispose_engine()

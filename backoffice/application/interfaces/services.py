"""Service interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from backoffice.application.dtos.employee import EmployeeForAuthentication
    from backoffice.application.queries.get_employee_for_authentication import (
        GetEmployeeForAuthentication,
    )


class ICacheService(Protocol):
    """Protocol for the key/value cache used by the user provider."""

    def is_available(self) -> bool:
        """Return True if the cache is connected and usable."""

    async def get(self, key: str) -> Any:
        """Return cached value or None on miss or backend failure."""

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value with TTL; return False when the write did not happen."""

    async def delete(self, key: str) -> bool:
        """Remove key; return True if deleted."""


class IEmployeeLookupService(Protocol):
    """Protocol for resolving an employee for authentication by email."""

    async def handle(
        self, query: GetEmployeeForAuthentication
    ) -> EmployeeForAuthentication | None:
        """Return the employee, or None when no active employee matches."""

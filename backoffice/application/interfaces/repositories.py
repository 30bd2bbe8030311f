"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from backoffice.application.dtos.employee import EmployeeResult


class IEmployeeRepository(Protocol):
    """Protocol for employee repository (DIP)."""

    async def get_by_email(self, email: str) -> EmployeeResult | None:
        """Return employee by email (case-insensitive), or None."""

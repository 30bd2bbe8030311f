"""Employee lookup for authentication.

The handler returns None when no active employee matches; the user provider
converts that into UsernameNotFoundException in one place.
"""

from __future__ import annotations

from dataclasses import dataclass

from backoffice.application.dtos.employee import (
    EmployeeForAuthentication,
    EmployeeResult,
)
from backoffice.application.interfaces.repositories import IEmployeeRepository
from backoffice.core.constants import ROLE_EMPLOYEE
from backoffice.domain.value_objects import Email


@dataclass(frozen=True)
class GetEmployeeForAuthentication:
    """Query: the employee behind a login email."""

    email: Email

    @classmethod
    def from_email(cls, email: str) -> GetEmployeeForAuthentication:
        """Build the query from a raw address. Raises ValueError if it is not an email."""
        return cls(Email(email))


def build_admin_link(admin_path_prefix: str, tab: str) -> str:
    """Return the back-office URL path for a tab (e.g. /admin/orders)."""
    return f"{admin_path_prefix}/{tab.strip('/')}"


def employee_roles(stored_roles: tuple[str, ...]) -> tuple[str, ...]:
    """ROLE_EMPLOYEE first, then stored roles in order, without duplicates."""
    roles = [ROLE_EMPLOYEE]
    for role in stored_roles:
        if role and role not in roles:
            roles.append(role)
    return tuple(roles)


class GetEmployeeForAuthenticationHandler:
    """Resolves GetEmployeeForAuthentication against the employee repository."""

    def __init__(
        self,
        employee_repo: IEmployeeRepository,
        admin_path_prefix: str,
        default_landing_tab: str,
    ) -> None:
        self.employee_repo = employee_repo
        self.admin_path_prefix = admin_path_prefix
        self.default_landing_tab = default_landing_tab

    async def handle(
        self, query: GetEmployeeForAuthentication
    ) -> EmployeeForAuthentication | None:
        """Return the employee for authentication, or None if missing or inactive."""
        employee = await self.employee_repo.get_by_email(query.email.value)
        if employee is None or not employee.is_active:
            return None
        return self._to_result(employee)

    def _to_result(self, employee: EmployeeResult) -> EmployeeForAuthentication:
        tab = employee.default_tab or self.default_landing_tab
        return EmployeeForAuthentication(
            employee_id=employee.id,
            email=employee.email,
            password_hash=employee.hashed_password,
            roles=employee_roles(employee.roles),
            default_page_url=build_admin_link(self.admin_path_prefix, tab),
        )

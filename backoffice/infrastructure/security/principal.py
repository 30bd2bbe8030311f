"""Principal: the identity object the security layer works with.

One flat value object carrying exactly what authentication needs. The cache
holds its plain record (to_cache_record) and every read rebuilds a fresh
instance, so cached data never depends on the in-memory class layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from backoffice.application.dtos.employee import EmployeeForAuthentication


@dataclass(frozen=True)
class EmployeePrincipal:
    """Authenticated back-office employee."""

    employee_id: str
    username: str
    password_hash: str
    roles: tuple[str, ...]

    @property
    def password(self) -> str:
        """Stored password hash (compared by the credential validator)."""
        return self.password_hash

    @classmethod
    def from_employee(cls, employee: EmployeeForAuthentication) -> EmployeePrincipal:
        return cls(
            employee_id=employee.employee_id,
            username=employee.email,
            password_hash=employee.password_hash,
            roles=tuple(employee.roles),
        )

    def to_cache_record(self) -> dict[str, Any]:
        """JSON-safe record stored in the cache."""
        return {
            "employee_id": self.employee_id,
            "username": self.username,
            "password_hash": self.password_hash,
            "roles": list(self.roles),
        }

    @classmethod
    def from_cache_record(cls, record: dict[str, Any]) -> EmployeePrincipal:
        """Rebuild from a cache record. Raises KeyError/TypeError/ValueError if malformed."""
        roles = record["roles"]
        if not isinstance(roles, list) or not all(isinstance(r, str) for r in roles):
            raise ValueError("roles must be a list of strings")
        return cls(
            employee_id=str(record["employee_id"]),
            username=str(record["username"]),
            password_hash=str(record["password_hash"]),
            roles=tuple(roles),
        )

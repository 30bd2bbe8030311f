"""DTOs for employee use cases (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EmployeeResult:
    """Employee read-model returned by the repository. Includes the password hash."""

    id: str
    email: str
    firstname: str
    lastname: str
    hashed_password: str
    is_active: bool
    roles: tuple[str, ...]
    default_tab: str | None


@dataclass(frozen=True)
class EmployeeForAuthentication:
    """What the security layer needs to authenticate an employee and open a session."""

    employee_id: str
    email: str
    password_hash: str
    roles: tuple[str, ...]
    default_page_url: str

"""Repositories: SQLAlchemy implementations of the application ports."""

from backoffice.infrastructure.persistence.repositories.employee_repo import (
    EmployeeRepository,
)

__all__ = ["EmployeeRepository"]

"""Application DTOs (no ORM dependency)."""

from backoffice.application.dtos.employee import (
    EmployeeForAuthentication,
    EmployeeResult,
)

__all__ = ["EmployeeForAuthentication", "EmployeeResult"]

"""Query objects and their handlers."""

from backoffice.application.queries.get_employee_for_authentication import (
    GetEmployeeForAuthentication,
    GetEmployeeForAuthenticationHandler,
)

__all__ = ["GetEmployeeForAuthentication", "GetEmployeeForAuthenticationHandler"]

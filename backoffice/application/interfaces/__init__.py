"""Ports (protocols) implemented by infrastructure."""

from backoffice.application.interfaces.repositories import IEmployeeRepository
from backoffice.application.interfaces.services import (
    ICacheService,
    IEmployeeLookupService,
)

__all__ = ["ICacheService", "IEmployeeLookupService", "IEmployeeRepository"]

"""Persistence models: ORM entities and mixins."""

from backoffice.infrastructure.persistence.models.employee import Employee
from backoffice.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin

__all__ = ["CuidMixin", "Employee", "TimestampMixin"]

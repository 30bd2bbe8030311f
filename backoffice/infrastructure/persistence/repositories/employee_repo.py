"""Employee repository. Interface methods return application DTOs.

Updates evict the employee's cached principal so the next login sees the
new password hash instead of waiting for the cache TTL.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.application.dtos.employee import EmployeeResult
from backoffice.application.interfaces.services import ICacheService
from backoffice.domain.exceptions import ValidationException
from backoffice.domain.value_objects import Email
from backoffice.infrastructure.cache.keys import employee_key
from backoffice.infrastructure.persistence.models.employee import Employee
from backoffice.infrastructure.persistence.repositories.base import BaseRepository
from backoffice.infrastructure.security.password import get_password_hash

logger = logging.getLogger(__name__)


def _employee_to_result(e: Employee) -> EmployeeResult:
    """Map ORM Employee to application EmployeeResult."""
    return EmployeeResult(
        id=e.id,
        email=e.email,
        firstname=e.firstname,
        lastname=e.lastname,
        hashed_password=e.hashed_password,
        is_active=e.is_active,
        roles=tuple(e.roles or ()),
        default_tab=e.default_tab,
    )


class EmployeeRepository(BaseRepository[Employee]):
    """Employee repository. Lookup by email, create_employee, update_password."""

    def __init__(
        self, db: AsyncSession, cache_service: ICacheService | None = None
    ) -> None:
        super().__init__(db, Employee)
        self.cache_service = cache_service

    async def _on_after_update(self, obj: Employee) -> None:
        """Evict the cached principal for this employee."""
        if self.cache_service is None:
            return
        if not await self.cache_service.delete(employee_key(obj.email)):
            logger.warning(
                "Cached principal for employee %s not evicted; it expires with the cache TTL",
                obj.id,
            )

    async def _get_model_by_email(self, email: str) -> Employee | None:
        result = await self.db.execute(
            select(Employee).where(func.lower(Employee.email) == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> EmployeeResult | None:
        employee = await self._get_model_by_email(email)
        return _employee_to_result(employee) if employee else None

    async def create_employee(
        self,
        email: str,
        password: str,
        *,
        firstname: str = "",
        lastname: str = "",
        roles: Iterable[str] = (),
        default_tab: str | None = None,
    ) -> EmployeeResult:
        """Create an active employee; raise ValidationException if the email is taken or invalid."""
        try:
            normalized = Email(email).value
        except ValueError as e:
            raise ValidationException(str(e), field="email") from e
        hashed = await asyncio.to_thread(get_password_hash, password)
        employee = Employee(
            email=normalized,
            firstname=firstname,
            lastname=lastname,
            hashed_password=hashed,
            is_active=True,
            roles=list(roles),
            default_tab=default_tab,
        )
        try:
            created = await self.create(employee)
        except IntegrityError:
            raise ValidationException(
                "Email is already registered", field="email"
            ) from None
        return _employee_to_result(created)

    async def update_password(self, email: str, new_password: str) -> EmployeeResult | None:
        """Replace the password hash; return None when no employee has this email."""
        employee = await self._get_model_by_email(email)
        if not employee:
            return None
        employee.hashed_password = await asyncio.to_thread(get_password_hash, new_password)
        updated = await self.update(employee)
        return _employee_to_result(updated)

"""User provider: resolves employee principals for the security layer.

Cache first, then the employee lookup service. A cache hit is trusted as-is
(no re-validation against the database) until the entry expires. Concurrent
cold lookups for the same username are not coordinated; each may hit the
lookup service and the last cache write wins.
"""

from __future__ import annotations

import logging
from typing import Any

from backoffice.application.interfaces.services import (
    ICacheService,
    IEmployeeLookupService,
)
from backoffice.application.queries.get_employee_for_authentication import (
    GetEmployeeForAuthentication,
)
from backoffice.domain.exceptions import (
    UnsupportedPrincipalException,
    UsernameNotFoundException,
)
from backoffice.infrastructure.cache.keys import employee_key
from backoffice.infrastructure.security.principal import EmployeePrincipal

logger = logging.getLogger(__name__)


class UserProvider:
    """Loads EmployeePrincipal instances by username (employee email)."""

    def __init__(
        self,
        employee_lookup: IEmployeeLookupService,
        cache: ICacheService | None = None,
        cache_ttl: int = 3600,
    ) -> None:
        self.employee_lookup = employee_lookup
        self.cache = cache
        self.cache_ttl = cache_ttl

    async def load_user_by_username(self, username: str) -> EmployeePrincipal:
        """Return the principal for username.

        Raises:
            UsernameNotFoundException: No active employee has this email.
        """
        key = employee_key(username)
        cached = await self._get_cached(key)
        if cached is not None:
            return cached

        try:
            query = GetEmployeeForAuthentication.from_email(username)
        except ValueError:
            raise UsernameNotFoundException(username) from None
        employee = await self.employee_lookup.handle(query)
        if employee is None:
            raise UsernameNotFoundException(username)

        principal = EmployeePrincipal.from_employee(employee)
        await self._store(key, principal)
        return principal

    async def refresh_user(self, principal: Any) -> EmployeePrincipal:
        """Reload a principal by its username (cache-first, same as a fresh load).

        Raises:
            UnsupportedPrincipalException: principal was not produced by this provider.
            UsernameNotFoundException: The employee no longer exists.
        """
        if not isinstance(principal, EmployeePrincipal):
            raise UnsupportedPrincipalException(type(principal).__name__)
        return await self.load_user_by_username(principal.username)

    def supports_class(self, cls: type) -> bool:
        """Only EmployeePrincipal is handled by this provider."""
        return cls is EmployeePrincipal

    async def _get_cached(self, key: str) -> EmployeePrincipal | None:
        if self.cache is None:
            return None
        # get() reports a miss while the backend is down and may reconnect it.
        record = await self.cache.get(key)
        if record is None:
            return None
        try:
            return EmployeePrincipal.from_cache_record(record)
        except (KeyError, TypeError, ValueError):
            logger.warning("Discarding malformed employee cache entry %s", key)
            return None

    async def _store(self, key: str, principal: EmployeePrincipal) -> None:
        """Best-effort cache write; failure is logged and the principal is still used."""
        if self.cache is None:
            return
        if not self.cache.is_available():
            logger.debug("Employee cache unavailable; not caching %s", key)
            return
        if not await self.cache.set(key, principal.to_cache_record(), ttl=self.cache_ttl):
            logger.warning("Employee cache write failed for %s", key)

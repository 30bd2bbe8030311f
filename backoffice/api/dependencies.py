"""Dependency injection (composition root).

Builds repositories, the employee lookup handler, the user provider, the
session handler and the login authenticator from settings and app state.
Routes depend only on these functions; tests replace them through
app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.application.interfaces.services import (
    ICacheService,
    IEmployeeLookupService,
)
from backoffice.application.queries.get_employee_for_authentication import (
    GetEmployeeForAuthenticationHandler,
)
from backoffice.core.config import get_settings
from backoffice.domain.exceptions import (
    AuthenticationException,
    UsernameNotFoundException,
)
from backoffice.infrastructure.persistence.database import get_db
from backoffice.infrastructure.persistence.repositories import EmployeeRepository
from backoffice.infrastructure.security import (
    EmployeeAuthenticationHandler,
    EmployeePrincipal,
    LoginFormAuthenticator,
    SessionCredentials,
    UserProvider,
)


async def get_employee_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EmployeeRepository:
    return EmployeeRepository(db)


def get_employee_lookup(
    employee_repo: Annotated[EmployeeRepository, Depends(get_employee_repo)],
) -> IEmployeeLookupService:
    """Employee lookup for authentication (query handler over the repository)."""
    settings = get_settings()
    return GetEmployeeForAuthenticationHandler(
        employee_repo,
        admin_path_prefix=settings.admin_path_prefix,
        default_landing_tab=settings.default_landing_tab,
    )


def get_cache(request: Request) -> ICacheService | None:
    """Shared cache from app state; None when Redis is disabled."""
    return getattr(request.app.state, "cache", None)


def get_user_provider(
    employee_lookup: Annotated[IEmployeeLookupService, Depends(get_employee_lookup)],
    cache: Annotated[ICacheService | None, Depends(get_cache)],
) -> UserProvider:
    return UserProvider(
        employee_lookup,
        cache=cache,
        cache_ttl=get_settings().cache_ttl_employees,
    )


def get_authentication_handler() -> EmployeeAuthenticationHandler:
    """Session cookie handler configured from settings."""
    settings = get_settings()
    return EmployeeAuthenticationHandler(
        secret_key=settings.secret_key.get_secret_value(),
        cookie_name=settings.session_cookie_name,
        lifetime_seconds=settings.session_lifetime_seconds,
        idle_seconds=settings.session_idle_seconds,
        secure=settings.session_cookie_secure,
    )


def get_login_authenticator(
    user_provider: Annotated[UserProvider, Depends(get_user_provider)],
    employee_lookup: Annotated[IEmployeeLookupService, Depends(get_employee_lookup)],
    authentication_handler: Annotated[
        EmployeeAuthenticationHandler, Depends(get_authentication_handler)
    ],
) -> LoginFormAuthenticator:
    return LoginFormAuthenticator(
        user_provider=user_provider,
        employee_lookup=employee_lookup,
        authentication_handler=authentication_handler,
    )


def require_session(
    request: Request,
    authentication_handler: Annotated[
        EmployeeAuthenticationHandler, Depends(get_authentication_handler)
    ],
) -> SessionCredentials:
    """Valid session cookie or 401. Resolved before any database dependency."""
    credentials = authentication_handler.get_authentication_credentials(request)
    if credentials is None:
        raise AuthenticationException()
    return credentials


async def get_current_employee(
    session: Annotated[SessionCredentials, Depends(require_session)],
    user_provider: Annotated[UserProvider, Depends(get_user_provider)],
) -> EmployeePrincipal:
    """Refresh the session's principal through the user provider (cache-first).

    Raises AuthenticationException when the employee no longer exists or the
    email now belongs to a different employee.
    """
    session_principal = EmployeePrincipal(
        employee_id=session.employee_id,
        username=session.email,
        password_hash="",
        roles=(),
    )
    try:
        principal = await user_provider.refresh_user(session_principal)
    except UsernameNotFoundException:
        raise AuthenticationException() from None
    if principal.employee_id != session.employee_id:
        raise AuthenticationException()
    return principal

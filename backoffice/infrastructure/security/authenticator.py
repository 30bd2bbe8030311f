"""Login form authenticator for the back office.

Handles POSTs to the login route: binds the form, resolves the employee
through the user provider, checks the password and, on success, opens the
session and redirects. Every failure (invalid form, unknown email, wrong
password, employee gone since the cache entry was written) produces the same
redirect back to the login page so responses never reveal which emails exist.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from urllib.parse import urlencode

from fastapi import Request, Response
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from backoffice.application.interfaces.services import IEmployeeLookupService
from backoffice.application.queries.get_employee_for_authentication import (
    GetEmployeeForAuthentication,
)
from backoffice.core.constants import LOGIN_ROUTE
from backoffice.domain.exceptions import (
    AuthenticationException,
    UsernameNotFoundException,
)
from backoffice.infrastructure.security.password import get_dummy_hash, verify_password
from backoffice.infrastructure.security.principal import EmployeePrincipal
from backoffice.infrastructure.security.session import EmployeeAuthenticationHandler
from backoffice.infrastructure.security.user_provider import UserProvider
from backoffice.schemas.auth import LoginForm

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginCredentials:
    """Username and password from one request; both None when the form was invalid."""

    username: str | None
    password: str | None


class LoginFormAuthenticator:
    """Authenticates employees from the back-office login form."""

    def __init__(
        self,
        user_provider: UserProvider,
        employee_lookup: IEmployeeLookupService,
        authentication_handler: EmployeeAuthenticationHandler,
        login_route: str = LOGIN_ROUTE,
    ) -> None:
        self.user_provider = user_provider
        self.employee_lookup = employee_lookup
        self.authentication_handler = authentication_handler
        self.login_route = login_route

    def supports(self, request: Request) -> bool:
        """Only POSTs that matched the login route are handled."""
        route = request.scope.get("route")
        return (
            getattr(route, "name", None) == self.login_route
            and request.method == "POST"
        )

    async def _bind_form(self, request: Request) -> LoginForm | None:
        form = await request.form()
        try:
            return LoginForm.model_validate(dict(form))
        except ValidationError:
            return None

    async def get_credentials(self, request: Request) -> LoginCredentials:
        form = await self._bind_form(request)
        if form is None:
            return LoginCredentials(username=None, password=None)
        return LoginCredentials(username=str(form.email), password=form.password)

    async def get_user(
        self, credentials: LoginCredentials, user_provider: UserProvider
    ) -> EmployeePrincipal | None:
        """Resolve the principal; None when no username was submitted.

        Raises:
            UsernameNotFoundException: No employee has this email.
        """
        if credentials.username is None:
            return None
        return await user_provider.load_user_by_username(credentials.username)

    async def check_credentials(
        self, credentials: LoginCredentials, user: EmployeePrincipal
    ) -> bool:
        if credentials.password is None:
            return False
        return await asyncio.to_thread(
            verify_password, credentials.password, user.password
        )

    async def on_authentication_success(
        self, request: Request, principal: EmployeePrincipal
    ) -> Response:
        """Open the session and redirect to redirect_url or the employee's default page.

        The employee is looked up again (bypassing the principal cache) to get
        the default page and current roles for the session.

        Raises:
            AuthenticationException: The employee disappeared since the principal was cached.
        """
        client_ip = request.client.host if request.client else "unknown"
        logger.info("Back office connection from %s", client_ip)

        form = await self._bind_form(request)
        employee = await self.employee_lookup.handle(
            GetEmployeeForAuthentication.from_email(principal.username)
        )
        if employee is None:
            raise AuthenticationException()

        stay_logged_in = form.stay_logged_in if form else False
        redirect_url = form.redirect_url if form else None
        response = RedirectResponse(
            redirect_url or employee.default_page_url, status_code=303
        )
        self.authentication_handler.set_authentication_credentials(
            response, employee, stay_logged_in
        )
        return response

    def get_login_url(self, request: Request) -> str:
        return str(request.app.url_path_for(self.login_route))

    async def on_authentication_failure(self, request: Request) -> Response:
        """Redirect back to the login page with a non-specific error flag."""
        params = {"error": "1"}
        form = await self._bind_form(request)
        if form is not None and form.redirect_url:
            params["redirect_url"] = form.redirect_url
        return RedirectResponse(
            f"{self.get_login_url(request)}?{urlencode(params)}", status_code=303
        )

    async def authenticate(self, request: Request) -> Response | None:
        """Run the full login flow; None when this request is not a login POST."""
        if not self.supports(request):
            return None

        credentials = await self.get_credentials(request)
        try:
            user = await self.get_user(credentials, self.user_provider)
        except UsernameNotFoundException:
            user = None

        if user is None:
            # Same cost as a real check so unknown emails are not faster.
            await asyncio.to_thread(
                verify_password, credentials.password or "", await get_dummy_hash()
            )
            logger.info("Back office login failed: unknown or missing username")
            return await self.on_authentication_failure(request)

        if not await self.check_credentials(credentials, user):
            logger.info("Back office login failed: bad credentials for employee %s", user.employee_id)
            return await self.on_authentication_failure(request)

        try:
            return await self.on_authentication_success(request, user)
        except AuthenticationException:
            logger.info("Back office login failed: employee %s no longer available", user.employee_id)
            return await self.on_authentication_failure(request)

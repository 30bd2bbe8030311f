"""Back-office auth routes: login form, login submit, logout and current employee.

The login POST is handled entirely by LoginFormAuthenticator; this module
only adds rate limiting and wiring.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from backoffice.api.dependencies import (
    get_authentication_handler,
    get_current_employee,
    get_login_authenticator,
)
from backoffice.core.config import get_settings
from backoffice.core.constants import LOGIN_ROUTE
from backoffice.core.limiter import check_login_rate_per_email, limit_login
from backoffice.infrastructure.security import (
    EmployeeAuthenticationHandler,
    EmployeePrincipal,
    LoginFormAuthenticator,
)
from backoffice.pages import render_login_page
from backoffice.schemas.auth import CurrentEmployeeResponse, is_local_path

router = APIRouter()


@router.get("/login", response_class=HTMLResponse, name="admin_login_form")
async def login_form(
    request: Request,
    error: str | None = None,
    redirect_url: str | None = None,
) -> HTMLResponse:
    """Render the login form. Any error flag shows the same generic message."""
    settings = get_settings()
    safe_redirect = redirect_url if redirect_url and is_local_path(redirect_url) else None
    return HTMLResponse(
        content=render_login_page(
            settings.app_name,
            action=str(request.app.url_path_for(LOGIN_ROUTE)),
            error=error is not None,
            redirect_url=safe_redirect,
        )
    )


@router.post("/login", name=LOGIN_ROUTE)
@limit_login
async def login(
    request: Request,
    authenticator: Annotated[LoginFormAuthenticator, Depends(get_login_authenticator)],
) -> Response:
    """Authenticate from the posted form; redirect on success and on failure."""
    form = await request.form()
    email = form.get("email")
    check_login_rate_per_email(email if isinstance(email, str) else None)
    response = await authenticator.authenticate(request)
    if response is None:
        # Only reachable if the route name and the authenticator's login route diverge.
        return await authenticator.on_authentication_failure(request)
    return response


@router.post("/logout", name="admin_logout")
async def logout(
    request: Request,
    authentication_handler: Annotated[
        EmployeeAuthenticationHandler, Depends(get_authentication_handler)
    ],
) -> Response:
    """Close the session and return to the login form."""
    response = RedirectResponse(
        str(request.app.url_path_for("admin_login_form")), status_code=303
    )
    authentication_handler.clear_authentication_credentials(response)
    return response


@router.get("/me", response_model=CurrentEmployeeResponse)
async def get_me(
    current: Annotated[EmployeePrincipal, Depends(get_current_employee)],
) -> CurrentEmployeeResponse:
    """Return the employee behind the session cookie."""
    return CurrentEmployeeResponse(
        employee_id=current.employee_id,
        email=current.username,
        roles=list(current.roles),
    )

"""Security: credential validation, principals, user provider, session and login authenticator."""

from backoffice.infrastructure.security.authenticator import (
    LoginCredentials,
    LoginFormAuthenticator,
)
from backoffice.infrastructure.security.password import get_password_hash, verify_password
from backoffice.infrastructure.security.principal import EmployeePrincipal
from backoffice.infrastructure.security.session import (
    EmployeeAuthenticationHandler,
    SessionCredentials,
)
from backoffice.infrastructure.security.user_provider import UserProvider

__all__ = [
    "EmployeeAuthenticationHandler",
    "EmployeePrincipal",
    "LoginCredentials",
    "LoginFormAuthenticator",
    "SessionCredentials",
    "UserProvider",
    "get_password_hash",
    "verify_password",
]

"""Back-office session: signed cookie holding the authenticated employee.

The cookie value is an itsdangerous timed signature over
{employee_id, email, stay_logged_in}. Tampered or expired cookies read as
"no session". With stay-logged-in the cookie is persistent; otherwise it is
a browser-session cookie that is also rejected after the idle lifetime.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request, Response
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from backoffice.application.dtos.employee import EmployeeForAuthentication

_SESSION_SALT = "backoffice.session"


@dataclass(frozen=True)
class SessionCredentials:
    """Payload recovered from a valid session cookie."""

    employee_id: str
    email: str
    stay_logged_in: bool


class EmployeeAuthenticationHandler:
    """Sets, reads and clears the employee session cookie."""

    def __init__(
        self,
        secret_key: str,
        cookie_name: str,
        lifetime_seconds: int,
        idle_seconds: int,
        secure: bool = True,
        cookie_path: str = "/",
    ) -> None:
        self.serializer = URLSafeTimedSerializer(secret_key, salt=_SESSION_SALT)
        self.cookie_name = cookie_name
        self.lifetime_seconds = lifetime_seconds
        self.idle_seconds = idle_seconds
        self.secure = secure
        self.cookie_path = cookie_path

    def set_authentication_credentials(
        self,
        response: Response,
        employee: EmployeeForAuthentication,
        stay_logged_in: bool,
    ) -> None:
        """Open the session for employee on response."""
        token = self.serializer.dumps(
            {
                "employee_id": employee.employee_id,
                "email": employee.email,
                "stay_logged_in": bool(stay_logged_in),
            }
        )
        response.set_cookie(
            key=self.cookie_name,
            value=token,
            max_age=self.lifetime_seconds if stay_logged_in else None,
            path=self.cookie_path,
            httponly=True,
            secure=self.secure,
            samesite="lax",
        )

    def get_authentication_credentials(self, request: Request) -> SessionCredentials | None:
        """Return the session payload, or None if missing, tampered or expired."""
        token = request.cookies.get(self.cookie_name)
        if not token:
            return None
        try:
            data = self.serializer.loads(token, max_age=self.lifetime_seconds)
        except (SignatureExpired, BadSignature):
            return None
        if not isinstance(data, dict):
            return None
        try:
            credentials = SessionCredentials(
                employee_id=str(data["employee_id"]),
                email=str(data["email"]),
                stay_logged_in=bool(data.get("stay_logged_in", False)),
            )
        except KeyError:
            return None
        if not credentials.stay_logged_in:
            # Shorter limit for sessions that did not opt into "stay logged in".
            try:
                self.serializer.loads(token, max_age=self.idle_seconds)
            except SignatureExpired:
                return None
        return credentials

    def clear_authentication_credentials(self, response: Response) -> None:
        response.delete_cookie(
            key=self.cookie_name,
            path=self.cookie_path,
            httponly=True,
            secure=self.secure,
            samesite="lax",
        )

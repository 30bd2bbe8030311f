"""Tests for the signed session cookie handler."""

from fastapi import Request, Response
from itsdangerous import URLSafeTimedSerializer

from backoffice.application.dtos.employee import EmployeeForAuthentication
from backoffice.infrastructure.security.session import (
    EmployeeAuthenticationHandler,
    SessionCredentials,
)

COOKIE = "bo_session"


def _handler(**overrides: object) -> EmployeeAuthenticationHandler:
    values: dict = {
        "secret_key": "unit-test-secret",
        "cookie_name": COOKIE,
        "lifetime_seconds": 3600,
        "idle_seconds": 600,
        "secure": False,
    }
    values.update(overrides)
    return EmployeeAuthenticationHandler(**values)


def _employee() -> EmployeeForAuthentication:
    return EmployeeForAuthentication(
        employee_id="emp-1",
        email="demo@example.com",
        password_hash="$2b$12$hash",
        roles=("ROLE_EMPLOYEE",),
        default_page_url="/admin/dashboard",
    )


def _request_with_cookie(value: str | None) -> Request:
    headers = []
    if value is not None:
        headers.append((b"cookie", f"{COOKIE}={value}".encode()))
    return Request({"type": "http", "method": "GET", "path": "/", "headers": headers})


def _cookie_value(response: Response) -> str:
    header = response.headers["set-cookie"]
    return header.split(";", 1)[0].split("=", 1)[1]


def test_round_trip_returns_session_credentials() -> None:
    handler = _handler()
    response = Response()

    handler.set_authentication_credentials(response, _employee(), stay_logged_in=False)
    credentials = handler.get_authentication_credentials(
        _request_with_cookie(_cookie_value(response))
    )

    assert credentials == SessionCredentials("emp-1", "demo@example.com", False)


def test_cookie_flags_depend_on_stay_logged_in() -> None:
    handler = _handler()

    session_only = Response()
    handler.set_authentication_credentials(session_only, _employee(), stay_logged_in=False)
    persistent = Response()
    handler.set_authentication_credentials(persistent, _employee(), stay_logged_in=True)

    assert "max-age" not in session_only.headers["set-cookie"].lower()
    assert "httponly" in session_only.headers["set-cookie"].lower()
    assert "samesite=lax" in session_only.headers["set-cookie"].lower()
    assert "max-age=3600" in persistent.headers["set-cookie"].lower()


def test_missing_or_tampered_cookie_reads_as_no_session() -> None:
    handler = _handler()
    response = Response()
    handler.set_authentication_credentials(response, _employee(), stay_logged_in=True)
    token = _cookie_value(response)

    assert handler.get_authentication_credentials(_request_with_cookie(None)) is None
    assert handler.get_authentication_credentials(_request_with_cookie(token + "x")) is None
    assert _handler(secret_key="other").get_authentication_credentials(
        _request_with_cookie(token)
    ) is None


def test_expired_cookie_reads_as_no_session() -> None:
    response = Response()
    _handler().set_authentication_credentials(response, _employee(), stay_logged_in=True)

    expired = _handler(lifetime_seconds=-1)

    assert expired.get_authentication_credentials(
        _request_with_cookie(_cookie_value(response))
    ) is None


def test_idle_limit_applies_only_without_stay_logged_in() -> None:
    writer = _handler()
    reader = _handler(idle_seconds=-1)
    short = Response()
    writer.set_authentication_credentials(short, _employee(), stay_logged_in=False)
    long = Response()
    writer.set_authentication_credentials(long, _employee(), stay_logged_in=True)

    assert reader.get_authentication_credentials(_request_with_cookie(_cookie_value(short))) is None
    assert reader.get_authentication_credentials(_request_with_cookie(_cookie_value(long))) is not None


def test_payload_without_required_fields_is_rejected() -> None:
    serializer = URLSafeTimedSerializer("unit-test-secret", salt="backoffice.session")
    token = serializer.dumps({"email": "demo@example.com"})

    assert _handler().get_authentication_credentials(_request_with_cookie(token)) is None


def test_clear_expires_cookie() -> None:
    response = Response()

    _handler().clear_authentication_credentials(response)

    header = response.headers["set-cookie"].lower()
    assert header.startswith(f"{COOKIE}=")
    assert "max-age=0" in header

"""Login flow over HTTP: success redirects, uniform failures, session cookie."""

from httpx import AsyncClient, Response

from backoffice.infrastructure.cache.keys import employee_key
from tests.conftest import EMPLOYEE_EMAIL, EMPLOYEE_PASSWORD, FakeCache, FakeEmployeeLookup

LOGIN_URL = "/admin/login"
FAILURE_URL = "/admin/login?error=1"
COOKIE_NAME = "backoffice_session"


def _session_cookie(response: Response) -> str | None:
    for header in response.headers.get_list("set-cookie"):
        if header.startswith(f"{COOKIE_NAME}="):
            return header
    return None


async def _login(client: AsyncClient, **fields: str) -> Response:
    data = {"email": EMPLOYEE_EMAIL, "password": EMPLOYEE_PASSWORD}
    data.update(fields)
    return await client.post(LOGIN_URL, data=data)


async def test_valid_login_redirects_to_default_page(client: AsyncClient) -> None:
    response = await _login(client)

    assert response.status_code == 303
    assert response.headers["location"] == "/admin/dashboard"
    cookie = _session_cookie(response)
    assert cookie is not None
    assert "httponly" in cookie.lower()
    assert "max-age" not in cookie.lower()


async def test_valid_login_honors_local_redirect_url(client: AsyncClient) -> None:
    response = await _login(client, redirect_url="/admin/orders")

    assert response.status_code == 303
    assert response.headers["location"] == "/admin/orders"


async def test_external_redirect_url_falls_back_to_default_page(client: AsyncClient) -> None:
    response = await _login(client, redirect_url="https://evil.example/phish")

    assert response.headers["location"] == "/admin/dashboard"


async def test_stay_logged_in_sets_persistent_cookie(client: AsyncClient) -> None:
    response = await _login(client, stay_logged_in="1")

    cookie = _session_cookie(response)
    assert cookie is not None
    assert "max-age=" in cookie.lower()


async def test_email_is_case_insensitive(client: AsyncClient) -> None:
    response = await _login(client, email="DEMO@Example.com")

    assert response.status_code == 303
    assert response.headers["location"] == "/admin/dashboard"


async def test_unknown_email_and_wrong_password_fail_identically(client: AsyncClient) -> None:
    unknown = await _login(client, email="nobody@example.com")
    wrong = await _login(client, password="not-the-password")

    for response in (unknown, wrong):
        assert response.status_code == 303
        assert response.headers["location"] == FAILURE_URL
        assert _session_cookie(response) is None


async def test_invalid_form_fails_like_bad_credentials(client: AsyncClient) -> None:
    response = await client.post(LOGIN_URL, data={"email": "not-an-email"})

    assert response.status_code == 303
    assert response.headers["location"] == FAILURE_URL


async def test_failure_keeps_local_redirect_url(client: AsyncClient) -> None:
    response = await _login(client, password="nope", redirect_url="/admin/orders")

    assert response.headers["location"] == f"{FAILURE_URL}&redirect_url=%2Fadmin%2Forders"


async def test_login_caches_principal_once(
    client: AsyncClient, fake_cache: FakeCache, employee_lookup: FakeEmployeeLookup
) -> None:
    await _login(client)
    employee_lookup.calls.clear()

    await _login(client, password="wrong")

    assert employee_key(EMPLOYEE_EMAIL) in fake_cache.data
    assert employee_lookup.calls == []


async def test_cached_employee_removed_upstream_cannot_log_in(
    client: AsyncClient, employee_lookup: FakeEmployeeLookup
) -> None:
    await _login(client)
    employee_lookup.remove(EMPLOYEE_EMAIL)

    response = await _login(client)

    assert response.headers["location"] == FAILURE_URL
    assert _session_cookie(response) is None


async def test_unknown_email_is_not_cached(
    client: AsyncClient, fake_cache: FakeCache
) -> None:
    await _login(client, email="nobody@example.com")

    assert fake_cache.data == {}


async def test_login_form_page(client: AsyncClient) -> None:
    response = await client.get(LOGIN_URL, params={"error": "1", "redirect_url": "/admin/orders"})

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert 'action="/admin/login"' in response.text
    assert "Invalid email or password" in response.text
    assert 'name="redirect_url" value="/admin/orders"' in response.text
    assert response.headers["cache-control"] == "no-store"


async def test_login_form_drops_external_redirect(client: AsyncClient) -> None:
    response = await client.get(LOGIN_URL, params={"redirect_url": "//evil.example"})

    assert "redirect_url" not in response.text
    assert "Invalid email or password" not in response.text

"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_reports_cache_disabled(client: AsyncClient) -> None:
    """GET /health returns ok; Redis is disabled in tests."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "cache": "disabled"}


async def test_root_redirects_to_login_form(client: AsyncClient) -> None:
    response = await client.get("/")
    assert response.status_code == 307
    assert response.headers["location"] == "/admin/login"


async def test_security_headers_present(client: AsyncClient) -> None:
    response = await client.get("/health")
    assert response.headers["x-frame-options"] == "DENY"
    assert response.headers["x-content-type-options"] == "nosniff"
    assert "frame-ancestors 'none'" in response.headers["content-security-policy"]
    # no-store only applies under the admin prefix
    assert "cache-control" not in response.headers

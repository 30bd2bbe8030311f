"""Health check endpoint. Reports cache state but never fails on it."""

from fastapi import APIRouter, Request

from backoffice.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    """Return ok plus whether the employee cache is connected."""
    cache = getattr(request.app.state, "cache", None)
    if cache is None:
        return HealthResponse(cache="disabled")
    return HealthResponse(cache="up" if cache.is_available() else "down")

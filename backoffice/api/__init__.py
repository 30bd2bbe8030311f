"""HTTP API: routers, endpoints and dependency wiring."""

from backoffice.api.router import admin_router, health_router

__all__ = ["admin_router", "health_router"]

"""FastAPI application entry point.

Wiring only: logging, lifespan, exception handlers, rate limiter,
middleware, routers. Settings are loaded inside create_app() so tests can
set env (and clear the get_settings cache) first.
"""

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.responses import RedirectResponse

from backoffice.api import admin_router, health_router
from backoffice.core.config import get_settings
from backoffice.core.exception_handlers import register_exception_handlers
from backoffice.core.lifespan import create_lifespan
from backoffice.core.limiter import limiter
from backoffice.middleware import SecurityHeadersMiddleware
from backoffice.shared.logging import setup_logging


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    # Overwritten by the lifespan; set here so requests without a lifespan
    # (e.g. ASGITransport in tests) see "no cache".
    app.state.cache = None

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    app.add_middleware(
        SecurityHeadersMiddleware, no_store_prefix=settings.admin_path_prefix
    )

    app.include_router(admin_router, prefix=settings.admin_path_prefix)
    app.include_router(health_router)

    @app.get("/", include_in_schema=False)
    def root() -> RedirectResponse:
        """Send visitors to the login form."""
        return RedirectResponse(app.url_path_for("admin_login_form"), status_code=307)

    return app


app = create_app()

"""HTTP middleware. Applied in create_app."""

from backoffice.middleware.security_headers import SecurityHeadersMiddleware

__all__ = ["SecurityHeadersMiddleware"]

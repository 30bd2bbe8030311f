"""Security headers middleware.

Adds security response headers suited to a server-rendered back office:
the login page may only load its own resources and inline styles, may not
be framed, and may only post forms to this origin. Responses under the
admin prefix are marked no-store so credentials pages are never cached.
Uses raw ASGI (no BaseHTTPMiddleware).
"""

from typing import Callable

DEFAULT_HEADERS = {
    "Content-Security-Policy": (
        "default-src 'self'; style-src 'self' 'unsafe-inline'; "
        "form-action 'self'; frame-ancestors 'none'"
    ),
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "same-origin",
}


def SecurityHeadersMiddleware(
    app: Callable,
    headers: dict[str, str] | None = None,
    no_store_prefix: str | None = None,
) -> Callable:
    """Set security headers on all responses; Cache-Control: no-store under no_store_prefix."""
    resolved = headers if headers is not None else DEFAULT_HEADERS.copy()
    header_list = [(k.encode(), v.encode()) for k, v in resolved.items()]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        extra = list(header_list)
        if no_store_prefix and scope.get("path", "").startswith(no_store_prefix):
            extra.append((b"Cache-Control", b"no-store"))

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                out = list(message.get("headers", []))
                seen = {h[0].lower() for h in out}
                for name_b, value_b in extra:
                    if name_b.lower() not in seen:
                        out.append((name_b, value_b))
                        seen.add(name_b.lower())
                message["headers"] = out
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app

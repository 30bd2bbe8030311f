"""Rate limiting for the login endpoint.

Two layers: slowapi limits POSTs per client IP, and an in-memory sliding
window limits attempts per submitted email so one account cannot be
brute-forced from many addresses. Both read their limits from settings at
request time.
"""

import time
from threading import Lock

from fastapi import HTTPException
from slowapi import Limiter
from slowapi.util import get_remote_address

from backoffice.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def _login_rate_limit() -> str:
    return get_settings().login_rate_limit


limit_login = limiter.limit(_login_rate_limit)

_login_attempts: dict[str, list[float]] = {}
_login_attempts_lock = Lock()
_last_sweep = 0.0


def _sweep_expired(cutoff: float) -> None:
    """Drop emails with no attempt after cutoff. Caller holds the lock."""
    for key in [k for k, times in _login_attempts.items() if not times or times[-1] <= cutoff]:
        del _login_attempts[key]


def check_login_rate_per_email(email: str | None) -> None:
    """Raise 429 if too many login attempts were made for this email in the window.

    Attempts are counted whether or not the email belongs to an employee.
    Emails whose attempts have all left the window are forgotten (swept at
    most once per window) so the map stays bounded by recent traffic.
    """
    global _last_sweep
    if not email:
        return
    settings = get_settings()
    now = time.monotonic()
    cutoff = now - settings.login_attempt_window_seconds
    key = email.strip().lower()
    with _login_attempts_lock:
        if now - _last_sweep >= settings.login_attempt_window_seconds:
            _sweep_expired(cutoff)
            _last_sweep = now
        attempts = [t for t in _login_attempts.get(key, ()) if t > cutoff]
        if len(attempts) >= settings.login_attempts_per_email:
            _login_attempts[key] = attempts
            raise HTTPException(
                status_code=429,
                detail="Too many login attempts; try again later",
            )
        attempts.append(now)
        _login_attempts[key] = attempts


def reset_login_attempts() -> None:
    """Forget all per-email attempts (tests and administrative resets)."""
    global _last_sweep
    with _login_attempts_lock:
        _login_attempts.clear()
        _last_sweep = 0.0

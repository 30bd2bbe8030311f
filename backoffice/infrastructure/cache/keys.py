"""Cache key builders. Single place for key format.

Usernames are emails and may contain characters the key space rejects
(e.g. "@"), so they are hashed rather than embedded.
"""

import hashlib

from backoffice.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_EMPLOYEE


def normalize_username(username: str) -> str:
    """Strip surrounding whitespace and lowercase (emails are case-insensitive here)."""
    return username.strip().lower()


def employee_key(username: str) -> str:
    """Cache key for the principal resolved from username (SHA-256 of the normalized value)."""
    digest = hashlib.sha256(normalize_username(username).encode("utf-8")).hexdigest()
    return f"{CACHE_PREFIX_EMPLOYEE}{CACHE_KEY_SEP}auth{CACHE_KEY_SEP}{digest}"

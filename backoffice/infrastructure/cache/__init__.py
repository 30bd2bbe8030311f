"""Cache: Redis service and cache key utilities.

Used by the user provider to memoize resolved employee principals.
Key format lives in keys.py.
"""

from backoffice.infrastructure.cache.keys import employee_key
from backoffice.infrastructure.cache.redis_cache import CacheService

__all__ = ["CacheService", "employee_key"]

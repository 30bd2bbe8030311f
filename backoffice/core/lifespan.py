"""Application lifespan: startup and shutdown.

Only wiring of infrastructure (employee cache, database engine); no
business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from backoffice.core.config import get_settings
from backoffice.infrastructure.persistence.database import dispose_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Connect the Redis cache (if enabled); on exit disconnect it and dispose the engine."""
    settings = get_settings()

    if settings.redis_enabled:
        from backoffice.infrastructure.cache.redis_cache import CacheService

        cache = CacheService()
        await cache.connect()
        app.state.cache = cache
    else:
        app.state.cache = None
        logger.info("Redis disabled; employee principals will not be cached")

    yield

    if getattr(app.state, "cache", None) is not None:
        await app.state.cache.disconnect()
        logger.info("Cache disconnected")

    await dispose_engine()

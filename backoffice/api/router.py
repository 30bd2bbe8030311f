"""Router aggregation.

admin_router is mounted under settings.admin_path_prefix by create_app;
health_router is mounted at the root.
"""

from fastapi import APIRouter

from backoffice.api.endpoints import auth, health

admin_router = APIRouter()
admin_router.include_router(auth.router, tags=["auth"])

health_router = APIRouter()
health_router.include_router(health.router, prefix="/health", tags=["health"])

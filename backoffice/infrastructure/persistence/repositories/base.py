"""Base repository: generic writes with a post-update hook."""

from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.infrastructure.persistence.database import Base


class BaseRepository[ModelType: Base]:
    """Base repository with create, update and an after-update hook.

    Subclasses override _on_after_update to invalidate caches that hold
    data derived from the updated row.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """Flush changes on an attached record and run _on_after_update hook."""
        await self.db.flush()
        await self.db.refresh(obj)
        await self._on_after_update(obj)
        return obj

    async def _on_after_update(self, obj: ModelType) -> None:
        """Override in subclasses to invalidate caches or emit events."""

"""
Base repository with generic CRUD operations.

All entity-specific repositories inherit from this.
"""
from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from hr_platform.models.base import BaseModel

# Generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Base repository providing standard CRUD operations.

    Repositories only flush; committing is the calling service's decision so
    that one operation maps to one transaction.

    Usage:
        class SkillRepository(BaseRepository[Skill]):
            def __init__(self):
                super().__init__(Skill)
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get_by_id(
        self,
        db: AsyncSession,
        id: int,
    ) -> Optional[ModelType]:
        """Get a single record by ID."""
        result = await db.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def exists(
        self,
        db: AsyncSession,
        id: int,
    ) -> bool:
        """Check whether a record with this ID exists without loading it."""
        result = await db.execute(
            select(self.model.id).where(self.model.id == id)
        )
        return result.scalar_one_or_none() is not None

    async def create(
        self,
        db: AsyncSession,
        **kwargs: Any,
    ) -> ModelType:
        """Create a new record. Unique violations surface here as IntegrityError."""
        instance = self.model(**kwargs)
        db.add(instance)
        await db.flush()
        await db.refresh(instance)
        return instance

    async def update(
        self,
        db: AsyncSession,
        instance: ModelType,
        **kwargs: Any,
    ) -> ModelType:
        """Update an existing record."""
        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)
        await db.flush()
        await db.refresh(instance)
        return instance

    async def delete(
        self,
        db: AsyncSession,
        id: int,
    ) -> bool:
        """Hard delete a record by ID. Dependent rows go through ON DELETE CASCADE."""
        result = await db.execute(
            delete(self.model).where(self.model.id == id)
        )
        return result.rowcount > 0

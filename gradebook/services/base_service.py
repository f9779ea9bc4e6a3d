# gradebook/services/base_service.py
"""Base service with common CRUD operations."""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import Type, Any, Dict, Optional, List, TypeVar, Generic
import logging

logger = logging.getLogger(__name__)

# Define generic type
T = TypeVar('T')

class BaseService(Generic[T]):
    def __init__(self, model: Type[T], db: AsyncSession):
        self.model = model
        self.db = db

    async def get(self, id: Any) -> Optional[T]:
        stmt = select(self.model).where(self.model.id == id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_multi(self, order_by: Any = None, **filters) -> List[T]:
        stmt = select(self.model)

        for key, value in filters.items():
            if hasattr(self.model, key) and value is not None:
                stmt = stmt.where(getattr(self.model, key) == value)

        if order_by is not None:
            stmt = stmt.order_by(*order_by) if isinstance(order_by, (list, tuple)) else stmt.order_by(order_by)

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create(self, obj_in: Dict) -> T:
        obj = self.model(**obj_in)
        self.db.add(obj)
        await self.commit()
        await self.db.refresh(obj)
        return obj

    async def update(self, id: Any, obj_in: Dict) -> Optional[T]:
        obj = await self.get(id)

        if not obj:
            return None
        self.apply(obj, obj_in)
        await self.commit()
        await self.db.refresh(obj)
        return obj

    async def hard_delete(self, id: Any) -> bool:
        """Permanently delete record from database"""
        obj = await self.get(id)
        if not obj:
            return False
        await self.db.delete(obj)
        await self.commit()
        return True

    @staticmethod
    def apply(obj: T, obj_in: Dict):
        for key, value in obj_in.items():
            setattr(obj, key, value)

    async def commit(self):
        """Commit the session's transaction, rolling back on failure."""
        try:
            await self.db.commit()
        except Exception as e:
            logger.error(f"Commit failed for {self.model.__name__}: {e}")
            await self.db.rollback()
            raise

    async def rollback(self):
        await self.db.rollback()

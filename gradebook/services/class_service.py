# gradebook/services/class_service.py
from typing import List
from uuid import UUID
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from .base_service import BaseService
from .access_service import AccessService
from .cascade import CLASS_CASCADE, run_cascade
from ..core.exceptions import NotFoundOrUnauthorized
from ..models import ClassModel

logger = logging.getLogger(__name__)


class ClassService(BaseService[ClassModel]):
    def __init__(self, db: AsyncSession):
        super().__init__(ClassModel, db)
        self.access = AccessService(db)

    def _with_roster(self):
        return select(self.model).options(
            selectinload(self.model.students),
            selectinload(self.model.subjects),
        )

    async def get_classes(self, teacher_id: UUID) -> List[ClassModel]:
        """Get all classes of a teacher with students and subjects loaded"""
        stmt = self._with_roster().where(
            self.model.teacher_id == teacher_id
        ).order_by(self.model.name.asc()).execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_class(self, class_id: UUID, teacher_id: UUID) -> ClassModel:
        stmt = self._with_roster().where(
            self.model.id == class_id,
            self.model.teacher_id == teacher_id
        ).execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        class_obj = result.scalar_one_or_none()
        if class_obj is None:
            raise NotFoundOrUnauthorized("Class")
        return class_obj

    async def create_class(self, name: str, teacher_id: UUID) -> ClassModel:
        class_obj = await self.create({"name": name, "teacher_id": teacher_id})
        logger.info(f"Created class {class_obj.id} for teacher {teacher_id}")
        return await self.get_class(class_obj.id, teacher_id)

    async def update_class(self, class_id: UUID, name: str, teacher_id: UUID) -> ClassModel:
        class_obj = await self.access.owned_class(class_id, teacher_id)
        class_obj.name = name
        await self.commit()
        return await self.get_class(class_id, teacher_id)

    async def delete_class(self, class_id: UUID, teacher_id: UUID) -> None:
        """Delete a class and everything under it in one transaction"""
        try:
            await self.access.owned_class(class_id, teacher_id)
            removed = await run_cascade(self.db, CLASS_CASCADE, class_id)
            await self.db.commit()
        except Exception:
            await self.rollback()
            raise
        logger.info(f"Deleted class {class_id} ({removed} rows removed)")

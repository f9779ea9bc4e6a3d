# gradebook/services/subject_service.py
from typing import List
from uuid import UUID
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from .base_service import BaseService
from .access_service import AccessService
from .cascade import SUBJECT_CASCADE, run_cascade
from ..models import ClassModel, Subject

logger = logging.getLogger(__name__)


class SubjectService(BaseService[Subject]):
    def __init__(self, db: AsyncSession):
        super().__init__(Subject, db)
        self.access = AccessService(db)

    async def get_subjects(self, class_id: UUID, teacher_id: UUID) -> List[Subject]:
        stmt = select(self.model).join(
            ClassModel, self.model.class_id == ClassModel.id
        ).where(
            self.model.class_id == class_id,
            ClassModel.teacher_id == teacher_id
        ).order_by(self.model.name.asc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create_subject(self, class_id: UUID, data: dict, teacher_id: UUID) -> Subject:
        await self.access.owned_class(class_id, teacher_id)
        subject = await self.create({**data, "class_id": class_id})
        logger.info(f"Created subject {subject.id} in class {class_id}")
        return subject

    async def update_subject(self, subject_id: UUID, data: dict, teacher_id: UUID) -> Subject:
        subject = await self.access.owned_subject(subject_id, teacher_id)
        self.apply(subject, data)
        await self.commit()
        await self.db.refresh(subject)
        return subject

    async def delete_subject(self, subject_id: UUID, teacher_id: UUID) -> None:
        """Remove a subject with its lessons and their records"""
        try:
            await self.access.owned_subject(subject_id, teacher_id)
            await run_cascade(self.db, SUBJECT_CASCADE, subject_id)
            await self.db.commit()
        except Exception:
            await self.rollback()
            raise
        logger.info(f"Deleted subject {subject_id}")

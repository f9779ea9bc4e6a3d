# gradebook/services/student_service.py
from typing import List
from uuid import UUID
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from .base_service import BaseService
from .access_service import AccessService
from .cascade import STUDENT_CASCADE, run_cascade
from ..models import ClassModel, Student

logger = logging.getLogger(__name__)


class StudentService(BaseService[Student]):
    def __init__(self, db: AsyncSession):
        super().__init__(Student, db)
        self.access = AccessService(db)

    async def get_students(self, class_id: UUID, teacher_id: UUID) -> List[Student]:
        """Roster of a class ordered by last name, then first name"""
        stmt = select(self.model).join(
            ClassModel, self.model.classroom_id == ClassModel.id
        ).where(
            self.model.classroom_id == class_id,
            ClassModel.teacher_id == teacher_id
        ).order_by(self.model.last_name.asc(), self.model.first_name.asc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create_student(self, class_id: UUID, data: dict, teacher_id: UUID) -> Student:
        await self.access.owned_class(class_id, teacher_id)
        student = await self.create({**data, "classroom_id": class_id})
        logger.info(f"Added student {student.id} to class {class_id}")
        return student

    async def update_student(self, student_id: UUID, data: dict, teacher_id: UUID) -> Student:
        student = await self.access.owned_student(student_id, teacher_id)
        self.apply(student, data)
        await self.commit()
        await self.db.refresh(student)
        return student

    async def delete_student(self, student_id: UUID, teacher_id: UUID) -> None:
        """Remove a student along with their lesson records and direct messages"""
        try:
            await self.access.owned_student(student_id, teacher_id)
            await run_cascade(self.db, STUDENT_CASCADE, student_id)
            await self.db.commit()
        except Exception:
            await self.rollback()
            raise
        logger.info(f"Deleted student {student_id}")

# gradebook/services/access_service.py
"""Ownership checks shared by every service.

Each lookup joins up to the owning class and compares its teacher with
the caller. A missing row and a row owned by another teacher both raise
NotFoundOrUnauthorized.
"""
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from ..core.exceptions import NotFoundOrUnauthorized
from ..models import ClassModel, Student, Subject, Lesson


class AccessService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def owned_class(self, class_id: UUID, teacher_id: UUID) -> ClassModel:
        stmt = select(ClassModel).where(
            ClassModel.id == class_id,
            ClassModel.teacher_id == teacher_id,
        )
        return await self._one(stmt, "Class")

    async def owned_student(self, student_id: UUID, teacher_id: UUID) -> Student:
        stmt = select(Student).join(ClassModel, Student.classroom_id == ClassModel.id).where(
            Student.id == student_id,
            ClassModel.teacher_id == teacher_id,
        )
        return await self._one(stmt, "Student")

    async def owned_subject(self, subject_id: UUID, teacher_id: UUID) -> Subject:
        stmt = select(Subject).join(ClassModel, Subject.class_id == ClassModel.id).where(
            Subject.id == subject_id,
            ClassModel.teacher_id == teacher_id,
        )
        return await self._one(stmt, "Subject")

    async def owned_lesson(self, lesson_id: UUID, teacher_id: UUID) -> Lesson:
        stmt = select(Lesson).join(ClassModel, Lesson.class_id == ClassModel.id).where(
            Lesson.id == lesson_id,
            ClassModel.teacher_id == teacher_id,
        )
        return await self._one(stmt, "Lesson")

    async def _one(self, stmt, resource: str):
        result = await self.db.execute(stmt)
        obj = result.scalar_one_or_none()
        if obj is None:
            raise NotFoundOrUnauthorized(resource)
        return obj

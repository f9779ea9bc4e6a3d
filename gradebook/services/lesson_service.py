# gradebook/services/lesson_service.py
"""Lessons and their per-student records.

Every lesson is returned inflated with its records. Lessons are created
together with one record per student of the class roster at that moment,
and afterwards records are only ever updated.
"""
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Optional
from uuid import UUID
import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from .base_service import BaseService
from .access_service import AccessService
from .cascade import LESSON_CASCADE, run_cascade
from ..core.config import settings
from ..core.exceptions import IntegrityFailure, NotFoundOrUnauthorized, ValidationFailure
from ..models import ClassModel, Student, Subject, Lesson, LessonRecord, LessonType, AttendanceStatus
from ..schemas.lesson import LessonRead, LessonRecordRead, LessonUpdate

logger = logging.getLogger(__name__)


def iso_weekday(day: date) -> int:
    return day.isoweekday()


def grade_ceiling(lesson: Lesson) -> int:
    """Highest grade a record of this lesson may hold"""
    if lesson.lesson_type == LessonType.CLASSWORK or not lesson.max_score:
        return settings.default_max_score
    return lesson.max_score


class LessonService(BaseService[Lesson]):
    def __init__(self, db: AsyncSession):
        super().__init__(Lesson, db)
        self.access = AccessService(db)

    async def attach_records(self, lessons: Iterable[Lesson]) -> List[LessonRead]:
        """Fetch all records for the lessons in one query and group them by lesson"""
        lessons = list(lessons)
        lesson_ids = [lesson.id for lesson in lessons]
        records_by_lesson: Dict[UUID, List[LessonRecord]] = defaultdict(list)

        if lesson_ids:
            stmt = select(LessonRecord).where(
                LessonRecord.lesson_id.in_(lesson_ids)
            ).order_by(LessonRecord.student_id).execution_options(populate_existing=True)
            result = await self.db.execute(stmt)
            for record in result.scalars().all():
                records_by_lesson[record.lesson_id].append(record)

        inflated = []
        for lesson in lessons:
            lesson_read = LessonRead.model_validate(lesson)
            lesson_read.records = [
                LessonRecordRead.model_validate(record)
                for record in records_by_lesson.get(lesson.id, [])
            ]
            inflated.append(lesson_read)
        return inflated

    def _scoped(self, teacher_id: UUID, start: Optional[date], end: Optional[date]):
        stmt = select(self.model).join(
            ClassModel, self.model.class_id == ClassModel.id
        ).where(ClassModel.teacher_id == teacher_id)

        if start:
            stmt = stmt.where(self.model.date >= start)
        if end:
            stmt = stmt.where(self.model.date <= end)

        return stmt.order_by(self.model.date.asc()).execution_options(populate_existing=True)

    async def get_lessons_for_class(
        self,
        class_id: UUID,
        teacher_id: UUID,
        start: Optional[date] = None,
        end: Optional[date] = None
    ) -> List[LessonRead]:
        stmt = self._scoped(teacher_id, start, end).where(self.model.class_id == class_id)
        result = await self.db.execute(stmt)
        return await self.attach_records(result.scalars().all())

    async def get_lessons_for_subject(
        self,
        subject_id: UUID,
        teacher_id: UUID,
        start: Optional[date] = None,
        end: Optional[date] = None
    ) -> List[LessonRead]:
        stmt = self._scoped(teacher_id, start, end).where(self.model.subject_id == subject_id)
        result = await self.db.execute(stmt)
        return await self.attach_records(result.scalars().all())

    async def get_lesson(self, lesson_id: UUID, teacher_id: UUID) -> LessonRead:
        lesson = await self.access.owned_lesson(lesson_id, teacher_id)
        await self.db.refresh(lesson)
        return (await self.attach_records([lesson]))[0]

    async def _find_by_subject_date(self, subject_id: UUID, lesson_date: date) -> Optional[Lesson]:
        stmt = select(self.model).where(
            self.model.subject_id == subject_id,
            self.model.date == lesson_date
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def create_lesson(self, lesson_date: date, subject_id: UUID, class_id: UUID, teacher_id: UUID) -> LessonRead:
        """Create a lesson with a blank record for every enrolled student.

        If the subject already has a lesson on that date, that lesson is
        returned instead, including when a concurrent request inserted it
        first.
        """
        await self.access.owned_class(class_id, teacher_id)
        subject = await self.access.owned_subject(subject_id, teacher_id)
        if subject.class_id != class_id:
            raise NotFoundOrUnauthorized("Subject")
        self._check_lesson_day(subject, lesson_date)

        existing = await self._find_by_subject_date(subject_id, lesson_date)
        if existing:
            return (await self.attach_records([existing]))[0]

        try:
            roster = await self.db.execute(
                select(Student.id).where(Student.classroom_id == class_id)
            )
            student_ids = list(roster.scalars().all())

            lesson = Lesson(
                date=lesson_date,
                topic=settings.new_lesson_topic,
                homework="",
                subject_id=subject_id,
                class_id=class_id,
                lesson_type=LessonType.CLASSWORK,
            )
            self.db.add(lesson)
            await self.db.flush()

            self.db.add_all([
                LessonRecord(
                    lesson_id=lesson.id,
                    student_id=student_id,
                    grade=None,
                    attendance=AttendanceStatus.PRESENT,
                    comment=None,
                )
                for student_id in student_ids
            ])
            await self.db.commit()
        except IntegrityError:
            await self.rollback()
            existing = await self._find_by_subject_date(subject_id, lesson_date)
            if existing is None:
                raise IntegrityFailure("Lesson could not be created")
            logger.info(f"Lesson for subject {subject_id} on {lesson_date} created concurrently, reusing it")
            return (await self.attach_records([existing]))[0]
        except Exception:
            await self.rollback()
            raise

        logger.info(f"Created lesson {lesson.id} with {len(student_ids)} records")
        return await self.get_lesson(lesson.id, teacher_id)

    def _check_lesson_day(self, subject: Subject, lesson_date: date) -> None:
        if iso_weekday(lesson_date) not in (subject.lesson_days or []):
            raise ValidationFailure(
                f"{subject.name} has no lesson on {lesson_date.isoformat()}", field="date"
            )

    async def update_lesson(self, lesson_id: UUID, update: LessonUpdate, teacher_id: UUID) -> LessonRead:
        """Apply lesson field changes and record patches atomically"""
        moved = False
        try:
            lesson = await self.access.owned_lesson(lesson_id, teacher_id)

            changes = update.fields.model_dump(exclude_unset=True) if update.fields is not None else {}
            if changes:
                if "date" in changes and changes["date"] != lesson.date:
                    subject = await self.access.owned_subject(lesson.subject_id, teacher_id)
                    self._check_lesson_day(subject, changes["date"])
                    moved = True
                self.apply(lesson, changes)

            if update.records:
                await self._apply_record_patches(lesson, update.records)

            if "max_score" in changes or "lesson_type" in changes:
                await self._check_grades_within_ceiling(lesson)

            await self.db.commit()
        except IntegrityError:
            await self.rollback()
            if moved:
                raise ValidationFailure("The subject already has a lesson on that date", field="date")
            raise IntegrityFailure(f"Lesson {lesson_id} could not be updated")
        except Exception:
            await self.rollback()
            raise

        return await self.get_lesson(lesson_id, teacher_id)

    async def _apply_record_patches(self, lesson: Lesson, patches) -> None:
        patch_ids = [patch.id for patch in patches]
        result = await self.db.execute(
            select(LessonRecord).where(
                LessonRecord.id.in_(patch_ids),
                LessonRecord.lesson_id == lesson.id
            )
        )
        records = {record.id: record for record in result.scalars().all()}
        ceiling = grade_ceiling(lesson)

        for patch in patches:
            record = records.get(patch.id)
            if record is None:
                raise IntegrityFailure(f"Lesson record {patch.id} not found in lesson {lesson.id}")

            changes = patch.model_dump(exclude_unset=True, exclude={"id"})
            grade = changes.get("grade")
            if grade is not None and not 0 <= grade <= ceiling:
                raise ValidationFailure(f"Grade must be between 0 and {ceiling}", field="grade")
            self.apply(record, changes)

    async def _check_grades_within_ceiling(self, lesson: Lesson) -> None:
        # Records already in the session keep their unflushed patches
        result = await self.db.execute(
            select(LessonRecord).where(LessonRecord.lesson_id == lesson.id)
        )
        ceiling = grade_ceiling(lesson)
        for record in result.scalars().all():
            if record.grade is not None and record.grade > ceiling:
                raise ValidationFailure(
                    f"Existing grade {record.grade} exceeds the new maximum of {ceiling}",
                    field="max_score"
                )

    async def delete_lesson(self, lesson_id: UUID, teacher_id: UUID) -> None:
        try:
            await self.access.owned_lesson(lesson_id, teacher_id)
            await run_cascade(self.db, LESSON_CASCADE, lesson_id)
            await self.db.commit()
        except Exception:
            await self.rollback()
            raise
        logger.info(f"Deleted lesson {lesson_id}")

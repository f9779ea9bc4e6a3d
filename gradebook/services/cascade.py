# gradebook/services/cascade.py
"""Dependency-ordered delete plans.

A plan is a list of (model, criteria factory) steps. Children come before
parents so that every step leaves referential integrity intact; the caller
runs the whole plan inside one transaction.
"""
from typing import Any, Callable, List, Tuple, Type
from uuid import UUID
import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import ClassModel, Student, Subject, Lesson, LessonRecord, Message

logger = logging.getLogger(__name__)

CascadeStep = Tuple[Type[Any], Callable[[UUID], Any]]


CLASS_CASCADE: List[CascadeStep] = [
    (LessonRecord, lambda class_id: LessonRecord.lesson_id.in_(
        select(Lesson.id).where(Lesson.class_id == class_id))),
    (LessonRecord, lambda class_id: LessonRecord.student_id.in_(
        select(Student.id).where(Student.classroom_id == class_id))),
    (Lesson, lambda class_id: Lesson.class_id == class_id),
    (Message, lambda class_id: Message.classroom_id == class_id),
    (Subject, lambda class_id: Subject.class_id == class_id),
    (Student, lambda class_id: Student.classroom_id == class_id),
    (ClassModel, lambda class_id: ClassModel.id == class_id),
]

SUBJECT_CASCADE: List[CascadeStep] = [
    (LessonRecord, lambda subject_id: LessonRecord.lesson_id.in_(
        select(Lesson.id).where(Lesson.subject_id == subject_id))),
    (Lesson, lambda subject_id: Lesson.subject_id == subject_id),
    (Subject, lambda subject_id: Subject.id == subject_id),
]

STUDENT_CASCADE: List[CascadeStep] = [
    (LessonRecord, lambda student_id: LessonRecord.student_id == student_id),
    (Message, lambda student_id: Message.student_id == student_id),
    (Student, lambda student_id: Student.id == student_id),
]

LESSON_CASCADE: List[CascadeStep] = [
    (LessonRecord, lambda lesson_id: LessonRecord.lesson_id == lesson_id),
    (Lesson, lambda lesson_id: Lesson.id == lesson_id),
]


async def run_cascade(db: AsyncSession, plan: List[CascadeStep], root_id: UUID) -> int:
    """Execute a plan in order without committing; returns rows removed."""
    removed = 0
    for model, criteria in plan:
        result = await db.execute(
            delete(model).where(criteria(root_id)).execution_options(synchronize_session=False)
        )
        logger.debug(f"Cascade removed {result.rowcount} {model.__tablename__} rows for {root_id}")
        removed += result.rowcount or 0
    return removed

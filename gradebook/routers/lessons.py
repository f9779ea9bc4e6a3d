# gradebook/routers/lessons.py
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.security import require_identity
from ..schemas.lesson import LessonCreate, LessonRead, LessonUpdate
from ..services.lesson_service import LessonService

router = APIRouter(prefix="/api/v1/lessons", tags=["Lessons"])

@router.post("/", response_model=LessonRead, status_code=201)
async def create_lesson(
    lesson_data: LessonCreate,
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    """Create the lesson for a calendar cell, or return the existing one"""
    return await LessonService(db).create_lesson(
        lesson_data.date, lesson_data.subject_id, lesson_data.class_id, teacher_id
    )

@router.get("/{lesson_id}", response_model=LessonRead)
async def get_lesson(
    lesson_id: UUID,
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    return await LessonService(db).get_lesson(lesson_id, teacher_id)

@router.patch("/{lesson_id}", response_model=LessonRead)
async def update_lesson(
    lesson_id: UUID,
    update: LessonUpdate,
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    return await LessonService(db).update_lesson(lesson_id, update, teacher_id)

@router.delete("/{lesson_id}")
async def delete_lesson(
    lesson_id: UUID,
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    await LessonService(db).delete_lesson(lesson_id, teacher_id)
    return {"message": "Lesson deleted successfully"}

# gradebook/routers/subjects.py
from datetime import date
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.security import require_identity
from ..schemas.attendance import MonthGrid
from ..schemas.lesson import LessonRead
from ..schemas.subject import SubjectRead, SubjectUpdate
from ..services.grid_service import GridService
from ..services.lesson_service import LessonService
from ..services.subject_service import SubjectService

router = APIRouter(prefix="/api/v1/subjects", tags=["Subjects"])

@router.put("/{subject_id}", response_model=SubjectRead)
async def update_subject(
    subject_id: UUID,
    subject_data: SubjectUpdate,
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    return await SubjectService(db).update_subject(
        subject_id, subject_data.model_dump(exclude_unset=True, exclude_none=True), teacher_id
    )

@router.delete("/{subject_id}")
async def delete_subject(
    subject_id: UUID,
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    await SubjectService(db).delete_subject(subject_id, teacher_id)
    return {"message": "Subject deleted successfully"}

@router.get("/{subject_id}/lessons", response_model=List[LessonRead])
async def get_lessons_for_subject(
    subject_id: UUID,
    start: Optional[date] = Query(None),
    end: Optional[date] = Query(None),
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    return await LessonService(db).get_lessons_for_subject(subject_id, teacher_id, start, end)

@router.get("/{subject_id}/grid", response_model=MonthGrid)
async def get_month_grid(
    subject_id: UUID,
    year: int = Query(..., ge=1900, le=2100),
    month: int = Query(..., ge=1, le=12),
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    """Calendar cells of one month with their lesson state"""
    return await GridService(db).month_grid(subject_id, year, month, teacher_id)

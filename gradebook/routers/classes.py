# gradebook/routers/classes.py
from datetime import date
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.security import require_identity
from ..schemas.attendance import AttendanceSummary
from ..schemas.classroom import ClassCreate, ClassRead, ClassUpdate
from ..schemas.lesson import LessonRead
from ..schemas.message import MessageRead
from ..schemas.student import StudentCreate, StudentRead
from ..schemas.subject import SubjectCreate, SubjectRead
from ..services.attendance_service import AttendanceService
from ..services.class_service import ClassService
from ..services.lesson_service import LessonService
from ..services.message_service import MessageService
from ..services.student_service import StudentService
from ..services.subject_service import SubjectService

router = APIRouter(prefix="/api/v1/classes", tags=["Classes"])

@router.get("/", response_model=List[ClassRead])
async def get_classes(
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    """Get the caller's classes with their students and subjects"""
    return await ClassService(db).get_classes(teacher_id)

@router.post("/", response_model=ClassRead, status_code=201)
async def create_class(
    class_data: ClassCreate,
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    return await ClassService(db).create_class(class_data.name, teacher_id)

@router.put("/{class_id}", response_model=ClassRead)
async def update_class(
    class_id: UUID,
    class_data: ClassUpdate,
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    return await ClassService(db).update_class(class_id, class_data.name, teacher_id)

@router.delete("/{class_id}")
async def delete_class(
    class_id: UUID,
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    """Delete class with all its students, subjects, lessons and records"""
    await ClassService(db).delete_class(class_id, teacher_id)
    return {"message": "Class deleted successfully"}

# Roster

@router.get("/{class_id}/students", response_model=List[StudentRead])
async def get_students(
    class_id: UUID,
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    return await StudentService(db).get_students(class_id, teacher_id)

@router.post("/{class_id}/students", response_model=StudentRead, status_code=201)
async def create_student(
    class_id: UUID,
    student_data: StudentCreate,
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    return await StudentService(db).create_student(class_id, student_data.model_dump(), teacher_id)

# Subjects

@router.get("/{class_id}/subjects", response_model=List[SubjectRead])
async def get_subjects(
    class_id: UUID,
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    return await SubjectService(db).get_subjects(class_id, teacher_id)

@router.post("/{class_id}/subjects", response_model=SubjectRead, status_code=201)
async def create_subject(
    class_id: UUID,
    subject_data: SubjectCreate,
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    return await SubjectService(db).create_subject(class_id, subject_data.model_dump(), teacher_id)

# Lessons and analytics

@router.get("/{class_id}/lessons", response_model=List[LessonRead])
async def get_lessons_for_class(
    class_id: UUID,
    start: Optional[date] = Query(None),
    end: Optional[date] = Query(None),
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    return await LessonService(db).get_lessons_for_class(class_id, teacher_id, start, end)

@router.get("/{class_id}/attendance", response_model=AttendanceSummary)
async def get_attendance_summary(
    class_id: UUID,
    start: Optional[date] = Query(None),
    end: Optional[date] = Query(None),
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    """Attendance counts for the class, overall and per student"""
    return await AttendanceService(db).get_class_summary(class_id, teacher_id, start, end)

@router.get("/{class_id}/messages", response_model=List[MessageRead])
async def get_messages(
    class_id: UUID,
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    return await MessageService(db).get_messages(class_id, teacher_id)

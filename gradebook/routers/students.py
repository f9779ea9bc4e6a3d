# gradebook/routers/students.py
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.security import require_identity
from ..schemas.student import StudentRead, StudentUpdate
from ..services.student_service import StudentService

router = APIRouter(prefix="/api/v1/students", tags=["Students"])

@router.put("/{student_id}", response_model=StudentRead)
async def update_student(
    student_id: UUID,
    student_data: StudentUpdate,
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    return await StudentService(db).update_student(
        student_id, student_data.model_dump(exclude_unset=True, exclude_none=True), teacher_id
    )

@router.delete("/{student_id}")
async def delete_student(
    student_id: UUID,
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    await StudentService(db).delete_student(student_id, teacher_id)
    return {"message": "Student deleted successfully"}

# gradebook/routers/teacher.py
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.security import require_identity
from ..schemas.teacher import TeacherProfile, TeacherProfileUpdate
from ..services.teacher_service import TeacherService

router = APIRouter(prefix="/api/v1/teacher", tags=["Teacher Profile"])

@router.get("/profile", response_model=TeacherProfile)
async def get_teacher_profile(
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    return await TeacherService(db).get_profile(teacher_id)

@router.put("/profile", response_model=TeacherProfile)
async def update_teacher_profile(
    profile: TeacherProfileUpdate,
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    return await TeacherService(db).update_profile(teacher_id, profile.first_name, profile.last_name)

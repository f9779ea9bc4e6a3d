# gradebook/routers/auth.py
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.security import start_session, end_session
from ..schemas.teacher import LoginRequest, TeacherProfile
from ..services.teacher_service import TeacherService

router = APIRouter(prefix="/api/v1/auth", tags=["Authentication"])

@router.post("/login", response_model=TeacherProfile)
async def login(
    credentials: LoginRequest,
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    """Sign in and bind the teacher to the session cookie"""
    service = TeacherService(db)
    user = await service.authenticate(credentials.email, credentials.password)
    start_session(request, user.id)
    return user

@router.post("/logout")
async def logout(request: Request):
    end_session(request)
    return {"message": "Logged out successfully"}

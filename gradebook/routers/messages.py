# gradebook/routers/messages.py
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.security import require_identity
from ..schemas.message import MessageCreate, MessageRead
from ..services.message_service import MessageService

router = APIRouter(prefix="/api/v1/messages", tags=["Messages"])

@router.post("/", response_model=MessageRead, status_code=201)
async def create_message(
    message_data: MessageCreate,
    teacher_id: UUID = Depends(require_identity),
    db: AsyncSession = Depends(get_db)
):
    """Send a message to a student, or to the whole class when student_id is empty"""
    return await MessageService(db).create_message(message_data.model_dump(), teacher_id)

# gradebook/services/message_service.py
from typing import List
from uuid import UUID
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc

from .base_service import BaseService
from .access_service import AccessService
from ..core.exceptions import NotFoundOrUnauthorized, Unauthorized
from ..models import ClassModel, Message

logger = logging.getLogger(__name__)


class MessageService(BaseService[Message]):
    def __init__(self, db: AsyncSession):
        super().__init__(Message, db)
        self.access = AccessService(db)

    async def get_messages(self, class_id: UUID, teacher_id: UUID) -> List[Message]:
        """Messages of a class, newest first"""
        stmt = select(self.model).join(
            ClassModel, self.model.classroom_id == ClassModel.id
        ).where(
            self.model.classroom_id == class_id,
            ClassModel.teacher_id == teacher_id
        ).order_by(desc(self.model.timestamp))
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create_message(self, data: dict, teacher_id: UUID) -> Message:
        if data["sender_id"] != teacher_id:
            raise Unauthorized("Messages can only be sent as yourself")

        await self.access.owned_class(data["classroom_id"], teacher_id)
        if data.get("student_id") is not None:
            student = await self.access.owned_student(data["student_id"], teacher_id)
            if student.classroom_id != data["classroom_id"]:
                raise NotFoundOrUnauthorized("Student")

        message = await self.create(data)
        logger.info(f"Message {message.id} sent to class {message.classroom_id}")
        return message

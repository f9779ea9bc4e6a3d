# gradebook/services/teacher_service.py
from typing import Optional
from uuid import UUID
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from .base_service import BaseService
from ..core.exceptions import NotFoundOrUnauthorized, Unauthorized
from ..core.security import hash_password, verify_password
from ..models import User

logger = logging.getLogger(__name__)


class TeacherService(BaseService[User]):
    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(self.model).where(self.model.email == email.strip().lower())
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def authenticate(self, email: str, password: str) -> User:
        user = await self.get_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            logger.warning(f"Failed login for {email}")
            raise Unauthorized("Invalid credentials")
        return user

    async def register(self, email: str, password: str, first_name: str, last_name: str) -> User:
        return await self.create({
            "email": email.strip().lower(),
            "password_hash": hash_password(password),
            "first_name": first_name,
            "last_name": last_name,
            "name": f"{first_name} {last_name}",
        })

    async def get_profile(self, teacher_id: UUID) -> User:
        user = await self.get(teacher_id)
        if not user:
            raise NotFoundOrUnauthorized("Teacher")
        return user

    async def update_profile(self, teacher_id: UUID, first_name: str, last_name: str) -> User:
        user = await self.update(teacher_id, {
            "first_name": first_name,
            "last_name": last_name,
            "name": f"{first_name} {last_name}",
        })
        if not user:
            raise NotFoundOrUnauthorized("Teacher")
        return user

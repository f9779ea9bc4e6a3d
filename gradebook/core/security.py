# gradebook/core/security.py
"""Session identity resolution and password hashing."""
from typing import Optional
from uuid import UUID
import logging

from fastapi import Request
from passlib.context import CryptContext

from .exceptions import Unauthorized

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

SESSION_USER_KEY = "user_id"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    if not password_hash:
        return False
    return pwd_context.verify(password, password_hash)


def resolve_current_identity(request: Request) -> Optional[UUID]:
    """Return the signed-in teacher id from the session, or None."""
    raw = request.session.get(SESSION_USER_KEY)
    if not raw:
        return None
    try:
        return UUID(str(raw))
    except ValueError:
        logger.warning("Discarding malformed session identity")
        return None


async def require_identity(request: Request) -> UUID:
    """Dependency that rejects requests without a signed-in teacher."""
    teacher_id = resolve_current_identity(request)
    if teacher_id is None:
        raise Unauthorized()
    return teacher_id


def start_session(request: Request, user_id: UUID):
    request.session.clear()
    request.session[SESSION_USER_KEY] = str(user_id)


def end_session(request: Request):
    request.session.clear()

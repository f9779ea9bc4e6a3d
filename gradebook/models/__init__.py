# gradebook/models/__init__.py
"""Import all models here, if needed for Alembic migration."""
from .base import Base

from .user import User
from .classroom import ClassModel
from .student import Student
from .subject import Subject
from .lesson import Lesson, LessonRecord, LessonType, AttendanceStatus
from .message import Message

# This ensures all models are loaded when importing models

# gradebook/schemas/classroom.py
from typing import List
from uuid import UUID
from pydantic import BaseModel, Field

from .student import StudentRead
from .subject import SubjectRead

class ClassCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)

class ClassUpdate(ClassCreate):
    pass

class ClassRead(BaseModel):
    id: UUID
    name: str
    teacher_id: UUID
    students: List[StudentRead] = []
    subjects: List[SubjectRead] = []

    class Config:
        from_attributes = True

# gradebook/schemas/student.py
from typing import Optional
from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, Field

class StudentBase(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)

class StudentCreate(StudentBase):
    pass

class StudentUpdate(BaseModel):
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)

class StudentRead(StudentBase):
    id: UUID
    classroom_id: UUID
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

# gradebook/schemas/subject.py
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel, Field, field_validator


def _normalize_days(days: Optional[List[int]]) -> Optional[List[int]]:
    if days is None:
        return None
    for day in days:
        if day < 1 or day > 7:
            raise ValueError("lesson days must be ISO weekdays between 1 and 7")
    return sorted(set(days))


class SubjectBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    lesson_days: List[int] = Field(default_factory=list)

    @field_validator("lesson_days")
    @classmethod
    def validate_lesson_days(cls, value):
        return _normalize_days(value)

class SubjectCreate(SubjectBase):
    pass

class SubjectUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    lesson_days: Optional[List[int]] = None

    @field_validator("lesson_days")
    @classmethod
    def validate_lesson_days(cls, value):
        return _normalize_days(value)

class SubjectRead(SubjectBase):
    id: UUID
    class_id: UUID

    class Config:
        from_attributes = True

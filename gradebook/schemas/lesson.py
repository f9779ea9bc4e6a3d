# gradebook/schemas/lesson.py
from typing import List, Optional
from datetime import date as Date
from uuid import UUID
from pydantic import BaseModel, Field, field_validator, model_validator

from ..models.lesson import AttendanceStatus, LessonType


class LessonCreate(BaseModel):
    date: Date
    subject_id: UUID
    class_id: UUID


class LessonFieldsUpdate(BaseModel):
    """Scalar lesson changes; only the fields that were sent are applied."""
    date: Optional[Date] = None
    topic: Optional[str] = Field(default=None, max_length=255)
    homework: Optional[str] = None
    lesson_type: Optional[LessonType] = None
    max_score: Optional[int] = Field(default=None, ge=1)

    @model_validator(mode="after")
    def reject_null_required(self):
        for name in ("date", "topic", "homework", "lesson_type"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class LessonRecordPatch(BaseModel):
    id: UUID
    grade: Optional[int] = Field(default=None, ge=0)
    attendance: Optional[AttendanceStatus] = None
    comment: Optional[str] = None

    @field_validator("grade", mode="before")
    @classmethod
    def blank_grade_is_none(cls, value):
        # Grade inputs clear to an empty string
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("attendance")
    @classmethod
    def attendance_not_null(cls, value):
        if value is None:
            raise ValueError("attendance cannot be null")
        return value


class LessonUpdate(BaseModel):
    """Either lesson field changes, record patches, or both."""
    fields: Optional[LessonFieldsUpdate] = None
    records: Optional[List[LessonRecordPatch]] = None


class LessonRecordRead(BaseModel):
    id: UUID
    lesson_id: UUID
    student_id: UUID
    grade: Optional[int] = None
    attendance: AttendanceStatus
    comment: Optional[str] = None

    class Config:
        from_attributes = True


class LessonRead(BaseModel):
    id: UUID
    date: Date
    topic: str
    homework: str
    subject_id: UUID
    class_id: UUID
    lesson_type: LessonType
    max_score: Optional[int] = None
    records: List[LessonRecordRead] = []

    class Config:
        from_attributes = True

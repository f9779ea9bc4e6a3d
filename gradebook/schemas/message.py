# gradebook/schemas/message.py
from typing import Optional
from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, Field

class MessageCreate(BaseModel):
    sender_id: UUID
    classroom_id: UUID
    student_id: Optional[UUID] = None  # None broadcasts to the whole class
    text: str = Field(..., min_length=1, max_length=5000)

class MessageRead(BaseModel):
    id: UUID
    sender_id: UUID
    classroom_id: UUID
    student_id: Optional[UUID] = None
    text: str
    timestamp: datetime

    class Config:
        from_attributes = True

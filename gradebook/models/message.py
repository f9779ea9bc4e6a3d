# gradebook/models/message.py
from datetime import datetime, timezone
from sqlalchemy import Column, Text, DateTime, ForeignKey, Uuid, Index, func
from .base import Base


class Message(Base):
    __tablename__ = "messages"

    sender_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    classroom_id = Column(Uuid, ForeignKey("classes.id"), nullable=False, index=True)
    student_id = Column(Uuid, ForeignKey("students.id"), nullable=True, index=True)  # NULL means the whole class
    text = Column(Text, nullable=False)
    timestamp = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), server_default=func.now(), nullable=False)

    __table_args__ = (
        Index('idx_message_class_time', 'classroom_id', 'timestamp'),
    )

# gradebook/models/subject.py
from sqlalchemy import Column, String, ForeignKey, JSON, Uuid
from sqlalchemy.orm import relationship
from .base import Base


class Subject(Base):
    __tablename__ = "subjects"

    # Foreign Keys
    class_id = Column(Uuid, ForeignKey("classes.id"), nullable=False, index=True)

    name = Column(String(100), nullable=False)
    lesson_days = Column(JSON, nullable=False, default=list)  # ISO weekdays, Monday=1 .. Sunday=7

    # Relationships
    classroom = relationship("ClassModel", back_populates="subjects")

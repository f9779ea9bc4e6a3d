# gradebook/models/classroom.py
from sqlalchemy import Column, String, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from .base import Base


class ClassModel(Base):
    __tablename__ = "classes"

    # Foreign Keys
    teacher_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)

    name = Column(String(100), nullable=False)

    # Relationships
    teacher = relationship("User", back_populates="classes")
    students = relationship("Student", back_populates="classroom", order_by="Student.last_name")
    subjects = relationship("Subject", back_populates="classroom", order_by="Subject.name")

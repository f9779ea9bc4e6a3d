# gradebook/models/student.py
from sqlalchemy import Column, String, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from .base import Base


class Student(Base):
    __tablename__ = "students"

    # Foreign Keys
    classroom_id = Column(Uuid, ForeignKey("classes.id"), nullable=False, index=True)

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)

    # Relationships
    classroom = relationship("ClassModel", back_populates="students")

# gradebook/models/lesson.py
from sqlalchemy import Column, String, Integer, Text, Date, ForeignKey, Enum, Uuid, UniqueConstraint, Index
from .base import Base
import enum


class AttendanceStatus(enum.Enum):
    PRESENT = "present"
    ABSENT = "absent"
    EXCUSED = "excused"


class LessonType(enum.Enum):
    CLASSWORK = "classwork"
    INDEPENDENT = "independent"
    PROJECT = "project"
    SOR = "sor"
    SOCH = "soch"


class Lesson(Base):
    __tablename__ = "lessons"

    # Foreign Keys
    subject_id = Column(Uuid, ForeignKey("subjects.id"), nullable=False, index=True)
    class_id = Column(Uuid, ForeignKey("classes.id"), nullable=False, index=True)

    date = Column(Date, nullable=False)
    topic = Column(String(255), nullable=False, default="")
    homework = Column(Text, nullable=False, default="")
    lesson_type = Column(Enum(LessonType), default=LessonType.CLASSWORK, nullable=False)
    max_score = Column(Integer, nullable=True)  # only meaningful for non-classwork lessons

    __table_args__ = (
        UniqueConstraint("subject_id", "date", name="uq_lesson_subject_date"),
        Index("idx_lesson_class_date", "class_id", "date"),
    )


class LessonRecord(Base):
    __tablename__ = "lesson_records"

    # Foreign Keys
    lesson_id = Column(Uuid, ForeignKey("lessons.id"), nullable=False, index=True)
    student_id = Column(Uuid, ForeignKey("students.id"), nullable=False, index=True)

    grade = Column(Integer, nullable=True)
    attendance = Column(Enum(AttendanceStatus), default=AttendanceStatus.PRESENT, nullable=False)
    comment = Column(Text, nullable=True)

    __table_args__ = (
        UniqueConstraint("lesson_id", "student_id", name="uq_lesson_record_student"),
    )

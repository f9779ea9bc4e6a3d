# gradebook/services/attendance_service.py
from collections import Counter
from datetime import date
from typing import List, Optional, Sequence
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from .lesson_service import LessonService
from .student_service import StudentService
from ..models import AttendanceStatus, Student
from ..schemas.attendance import AttendanceSummary, StudentAttendance
from ..schemas.lesson import LessonRead


def short_name(student: Student) -> str:
    initial = f" {student.last_name[0]}." if student.last_name else ""
    return f"{student.first_name}{initial}"


def summarize_attendance(lessons: Sequence[LessonRead], students: Sequence[Student]) -> AttendanceSummary:
    """Count records per attendance status, overall and per student.

    Statuses that never occur are left out of the totals but always
    appear, as zero, in each student's row. Records of students missing
    from the roster only count towards the totals.
    """
    totals: Counter = Counter()
    by_student = {
        student.id: StudentAttendance(student_id=student.id, name=short_name(student))
        for student in students
    }

    for lesson in lessons:
        for record in lesson.records:
            status = record.attendance.value
            totals[status] += 1
            row = by_student.get(record.student_id)
            if row is not None:
                setattr(row, status, getattr(row, status) + 1)

    return AttendanceSummary(
        totals={status.value: totals[status.value] for status in AttendanceStatus if totals[status.value] > 0},
        by_student=list(by_student.values()),
    )


class AttendanceService:
    def __init__(self, db: AsyncSession):
        self.lessons = LessonService(db)
        self.students = StudentService(db)

    async def get_class_summary(
        self,
        class_id: UUID,
        teacher_id: UUID,
        start: Optional[date] = None,
        end: Optional[date] = None
    ) -> AttendanceSummary:
        await self.lessons.access.owned_class(class_id, teacher_id)
        roster: List[Student] = await self.students.get_students(class_id, teacher_id)
        lessons = await self.lessons.get_lessons_for_class(class_id, teacher_id, start, end)
        return summarize_attendance(lessons, roster)

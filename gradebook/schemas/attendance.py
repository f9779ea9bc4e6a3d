# gradebook/schemas/attendance.py
from typing import Dict, List, Optional
from datetime import date as Date
from uuid import UUID
from pydantic import BaseModel

from .lesson import LessonRead

class StudentAttendance(BaseModel):
    student_id: UUID
    name: str
    present: int = 0
    absent: int = 0
    excused: int = 0

class AttendanceSummary(BaseModel):
    totals: Dict[str, int]
    by_student: List[StudentAttendance]

class GridCell(BaseModel):
    date: Date
    weekday: int
    state: str
    lesson: Optional[LessonRead] = None

class MonthGrid(BaseModel):
    subject_id: UUID
    year: int
    month: int
    cells: List[GridCell]

# gradebook/services/grid_service.py
"""Monthly lesson grid for one subject."""
import calendar
from datetime import date
from typing import Dict, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from .lesson_service import LessonService
from ..core.exceptions import ValidationFailure
from ..models import Subject
from ..schemas.attendance import GridCell, MonthGrid
from ..schemas.lesson import LessonRead

EMPTY = "empty"
CREATABLE = "creatable"
POPULATED = "populated"


def cell_state(subject: Subject, day: date, lesson: Optional[LessonRead]) -> str:
    if lesson is not None:
        return POPULATED
    if day.isoweekday() in (subject.lesson_days or []):
        return CREATABLE
    return EMPTY


class GridService:
    def __init__(self, db: AsyncSession):
        self.lessons = LessonService(db)

    async def month_grid(self, subject_id: UUID, year: int, month: int, teacher_id: UUID) -> MonthGrid:
        if not 1 <= month <= 12:
            raise ValidationFailure("Month must be between 1 and 12", field="month")

        subject = await self.lessons.access.owned_subject(subject_id, teacher_id)
        last_day = calendar.monthrange(year, month)[1]
        start, end = date(year, month, 1), date(year, month, last_day)

        lessons = await self.lessons.get_lessons_for_subject(subject_id, teacher_id, start, end)
        by_date: Dict[date, LessonRead] = {lesson.date: lesson for lesson in lessons}

        cells = []
        for day_number in range(1, last_day + 1):
            day = date(year, month, day_number)
            lesson = by_date.get(day)
            cells.append(GridCell(
                date=day,
                weekday=day.isoweekday(),
                state=cell_state(subject, day, lesson),
                lesson=lesson,
            ))

        return MonthGrid(subject_id=subject_id, year=year, month=month, cells=cells)

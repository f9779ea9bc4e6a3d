# tests/test_attendance.py

from datetime import date
from uuid import uuid4

import pytest

from gradebook.core.exceptions import NotFoundOrUnauthorized, ValidationFailure
from gradebook.models import AttendanceStatus, LessonType, Student, Subject
from gradebook.schemas.lesson import LessonRead, LessonRecordPatch, LessonRecordRead, LessonUpdate
from gradebook.services.attendance_service import AttendanceService, summarize_attendance
from gradebook.services.grid_service import CREATABLE, EMPTY, POPULATED, GridService, cell_state
from gradebook.services.lesson_service import LessonService

from .conftest import MONDAY, NEXT_MONDAY, TUESDAY


def make_lesson(day, statuses_by_student):
    lesson_id = uuid4()
    return LessonRead(
        id=lesson_id,
        date=day,
        topic="t",
        homework="",
        subject_id=uuid4(),
        class_id=uuid4(),
        lesson_type=LessonType.CLASSWORK,
        records=[
            LessonRecordRead(id=uuid4(), lesson_id=lesson_id, student_id=student_id, attendance=status)
            for student_id, status in statuses_by_student
        ],
    )


@pytest.fixture
def roster():
    return [
        Student(id=uuid4(), first_name="Sasha", last_name="Belov"),
        Student(id=uuid4(), first_name="Masha", last_name="Orlova"),
    ]


def test_totals_are_sums_over_all_lessons(roster):
    sasha, masha = roster
    lessons = [
        make_lesson(MONDAY, [(sasha.id, AttendanceStatus.PRESENT), (masha.id, AttendanceStatus.ABSENT)]),
        make_lesson(TUESDAY, [(sasha.id, AttendanceStatus.EXCUSED), (masha.id, AttendanceStatus.ABSENT)]),
        make_lesson(NEXT_MONDAY, [(sasha.id, AttendanceStatus.PRESENT), (masha.id, AttendanceStatus.PRESENT)]),
    ]

    summary = summarize_attendance(lessons, roster)

    assert summary.totals == {"present": 3, "absent": 2, "excused": 1}
    rows = {row.student_id: row for row in summary.by_student}
    assert (rows[sasha.id].present, rows[sasha.id].absent, rows[sasha.id].excused) == (2, 0, 1)
    assert (rows[masha.id].present, rows[masha.id].absent, rows[masha.id].excused) == (1, 2, 0)


def test_zero_categories_are_omitted_from_totals_but_not_rows(roster):
    sasha, masha = roster
    lessons = [make_lesson(MONDAY, [(sasha.id, AttendanceStatus.PRESENT), (masha.id, AttendanceStatus.PRESENT)])]

    summary = summarize_attendance(lessons, roster)

    assert summary.totals == {"present": 2}
    for row in summary.by_student:
        assert row.absent == 0
        assert row.excused == 0


def test_rows_use_short_names_and_keep_roster_order(roster):
    summary = summarize_attendance([], roster)

    assert [row.name for row in summary.by_student] == ["Sasha B.", "Masha O."]
    assert summary.totals == {}


def test_records_of_unknown_students_count_only_in_totals(roster):
    stranger = uuid4()
    lessons = [make_lesson(MONDAY, [(stranger, AttendanceStatus.ABSENT)])]

    summary = summarize_attendance(lessons, roster)

    assert summary.totals == {"absent": 1}
    assert all(row.absent == 0 for row in summary.by_student)


async def test_class_summary_reflects_recorded_attendance(db, teacher, classroom, students, math):
    service = LessonService(db)
    lesson = await service.create_lesson(MONDAY, math.id, classroom.id, teacher.id)
    absent_record = next(r for r in lesson.records if r.student_id == students[1].id)
    await service.update_lesson(lesson.id, LessonUpdate(records=[
        LessonRecordPatch(id=absent_record.id, attendance="absent"),
    ]), teacher.id)

    summary = await AttendanceService(db).get_class_summary(classroom.id, teacher.id)

    assert summary.totals == {"present": 1, "absent": 1}


async def test_class_summary_of_foreign_class_fails(db, other_teacher, classroom):
    with pytest.raises(NotFoundOrUnauthorized):
        await AttendanceService(db).get_class_summary(classroom.id, other_teacher.id)


def test_cell_state_transitions():
    subject = Subject(name="Math", lesson_days=[1])

    assert cell_state(subject, TUESDAY, None) == EMPTY
    assert cell_state(subject, MONDAY, None) == CREATABLE
    assert cell_state(subject, MONDAY, make_lesson(MONDAY, [])) == POPULATED


async def test_month_grid_marks_every_day(db, teacher, classroom, students, math):
    lesson = await LessonService(db).create_lesson(MONDAY, math.id, classroom.id, teacher.id)

    grid = await GridService(db).month_grid(math.id, 2026, 10, teacher.id)

    assert len(grid.cells) == 31
    cells = {cell.date: cell for cell in grid.cells}
    assert cells[MONDAY].state == POPULATED
    assert cells[MONDAY].lesson.id == lesson.id
    assert len(cells[MONDAY].lesson.records) == 2
    assert cells[NEXT_MONDAY].state == CREATABLE
    assert cells[TUESDAY].state == EMPTY
    assert sum(1 for cell in grid.cells if cell.state == CREATABLE) == 3
    assert cells[date(2026, 10, 1)].weekday == 4


async def test_month_grid_rejects_bad_month(db, teacher, math):
    with pytest.raises(ValidationFailure):
        await GridService(db).month_grid(math.id, 2026, 13, teacher.id)

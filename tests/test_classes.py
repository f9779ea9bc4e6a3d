# tests/test_classes.py

from datetime import timedelta
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from gradebook.core.exceptions import NotFoundOrUnauthorized
from gradebook.models import ClassModel, Lesson, LessonRecord, Message, Student, Subject
from gradebook.services.class_service import ClassService
from gradebook.services.lesson_service import LessonService
from gradebook.services.message_service import MessageService
from gradebook.services.student_service import StudentService
from gradebook.services.subject_service import SubjectService

from .conftest import MONDAY


async def count(db, model, *criteria):
    return await db.scalar(select(func.count()).select_from(model).where(*criteria))


async def test_create_class_starts_empty(db, teacher):
    created = await ClassService(db).create_class("7A", teacher.id)

    assert created.name == "7A"
    assert created.teacher_id == teacher.id
    assert created.students == []
    assert created.subjects == []


async def test_get_classes_is_scoped_and_sorted(db, teacher, other_teacher):
    service = ClassService(db)
    await service.create_class("9B", teacher.id)
    await service.create_class("5A", teacher.id)
    await service.create_class("Foreign", other_teacher.id)

    classes = await service.get_classes(teacher.id)

    assert [c.name for c in classes] == ["5A", "9B"]


async def test_get_classes_includes_roster_and_subjects(db, teacher, classroom, students, math):
    [loaded] = await ClassService(db).get_classes(teacher.id)

    assert {s.id for s in loaded.students} == {s.id for s in students}
    assert [s.name for s in loaded.subjects] == ["Math"]


async def test_update_class_checks_owner(db, teacher, other_teacher, classroom):
    service = ClassService(db)

    renamed = await service.update_class(classroom.id, "10C", teacher.id)
    assert renamed.name == "10C"

    with pytest.raises(NotFoundOrUnauthorized):
        await service.update_class(classroom.id, "Stolen", other_teacher.id)


async def test_delete_class_removes_everything_beneath_it(db, session_factory, teacher, classroom, students, math):
    lessons = LessonService(db)
    for week in range(3):
        await lessons.create_lesson(MONDAY + timedelta(weeks=week), math.id, classroom.id, teacher.id)
    await MessageService(db).create_message({
        "sender_id": teacher.id,
        "classroom_id": classroom.id,
        "student_id": students[0].id,
        "text": "Bring your notebook",
    }, teacher.id)
    assert await count(db, LessonRecord) == 6

    await ClassService(db).delete_class(classroom.id, teacher.id)

    async with session_factory() as fresh:
        assert await count(fresh, LessonRecord) == 0
        assert await count(fresh, Lesson, Lesson.class_id == classroom.id) == 0
        assert await count(fresh, Subject, Subject.class_id == classroom.id) == 0
        assert await count(fresh, Student, Student.classroom_id == classroom.id) == 0
        assert await count(fresh, Message, Message.classroom_id == classroom.id) == 0
        assert await count(fresh, ClassModel, ClassModel.id == classroom.id) == 0


async def test_delete_class_leaves_other_classes_alone(db, teacher, classroom, students, math):
    service = ClassService(db)
    other = await service.create_class("11A", teacher.id)
    kept = await StudentService(db).create_student(other.id, {"first_name": "Ivan", "last_name": "Sokolov"}, teacher.id)

    await service.delete_class(classroom.id, teacher.id)

    assert await count(db, Student, Student.id == kept.id) == 1
    assert [c.id for c in await service.get_classes(teacher.id)] == [other.id]


async def test_foreign_delete_class_changes_nothing(db, teacher, other_teacher, classroom, students, math):
    await LessonService(db).create_lesson(MONDAY, math.id, classroom.id, teacher.id)

    with pytest.raises(NotFoundOrUnauthorized):
        await ClassService(db).delete_class(classroom.id, other_teacher.id)

    assert await count(db, ClassModel) == 1
    assert await count(db, LessonRecord) == 2


async def test_students_are_listed_by_last_then_first_name(db, teacher, classroom):
    service = StudentService(db)
    for first, last in [("Boris", "Zaitsev"), ("Alla", "Zaitseva"), ("Anton", "Zaitsev")]:
        await service.create_student(classroom.id, {"first_name": first, "last_name": last}, teacher.id)

    roster = await service.get_students(classroom.id, teacher.id)

    assert [(s.last_name, s.first_name) for s in roster] == [
        ("Zaitsev", "Anton"), ("Zaitsev", "Boris"), ("Zaitseva", "Alla"),
    ]


async def test_create_student_in_foreign_class_fails(db, other_teacher, classroom):
    with pytest.raises(NotFoundOrUnauthorized):
        await StudentService(db).create_student(classroom.id, {"first_name": "X", "last_name": "Y"}, other_teacher.id)


async def test_student_update_and_delete_verify_owner(db, teacher, other_teacher, classroom, students):
    service = StudentService(db)
    # a failed delete rolls back and expires every loaded row
    student_id, owner_id, intruder_id = students[0].id, teacher.id, other_teacher.id

    with pytest.raises(NotFoundOrUnauthorized):
        await service.update_student(student_id, {"first_name": "Hacked"}, intruder_id)
    with pytest.raises(NotFoundOrUnauthorized):
        await service.delete_student(student_id, intruder_id)

    updated = await service.update_student(student_id, {"first_name": "Alexander"}, owner_id)
    assert updated.first_name == "Alexander"
    assert updated.last_name == "Belov"


async def test_delete_student_removes_their_records_only(db, teacher, classroom, students, math):
    lesson = await LessonService(db).create_lesson(MONDAY, math.id, classroom.id, teacher.id)
    leaving, staying = students

    await StudentService(db).delete_student(leaving.id, teacher.id)

    refreshed = await LessonService(db).get_lesson(lesson.id, teacher.id)
    assert [r.student_id for r in refreshed.records] == [staying.id]
    assert await count(db, Student, Student.id == leaving.id) == 0


async def test_subjects_crud_verifies_owner(db, teacher, other_teacher, classroom, math):
    service = SubjectService(db)
    await service.create_subject(classroom.id, {"name": "Art", "lesson_days": [5]}, teacher.id)

    assert [s.name for s in await service.get_subjects(classroom.id, teacher.id)] == ["Art", "Math"]
    assert await service.get_subjects(classroom.id, other_teacher.id) == []

    with pytest.raises(NotFoundOrUnauthorized):
        await service.update_subject(math.id, {"name": "Algebra"}, other_teacher.id)
    with pytest.raises(NotFoundOrUnauthorized):
        await service.create_subject(classroom.id, {"name": "Music", "lesson_days": []}, other_teacher.id)

    updated = await service.update_subject(math.id, {"lesson_days": [1, 4]}, teacher.id)
    assert updated.lesson_days == [1, 4]
    assert updated.name == "Math"


async def test_delete_subject_removes_its_lessons(db, teacher, classroom, students, math):
    lessons = LessonService(db)
    await lessons.create_lesson(MONDAY, math.id, classroom.id, teacher.id)
    math_id, teacher_id = math.id, teacher.id

    with pytest.raises(NotFoundOrUnauthorized):
        await SubjectService(db).delete_subject(math_id, uuid4())

    await SubjectService(db).delete_subject(math_id, teacher_id)

    assert await count(db, Subject, Subject.id == math_id) == 0
    assert await count(db, Lesson) == 0
    assert await count(db, LessonRecord) == 0
    assert await count(db, Student, Student.classroom_id == classroom.id) == 2

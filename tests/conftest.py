# tests/conftest.py

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SESSION_SECRET_KEY", "test-secret")
os.environ.setdefault("LOG_LEVEL", "warning")

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gradebook.core.database import build_engine, get_db
from gradebook.core.security import require_identity
from gradebook.main import app
from gradebook.models import Base
from gradebook.services.class_service import ClassService
from gradebook.services.student_service import StudentService
from gradebook.services.subject_service import SubjectService
from gradebook.services.teacher_service import TeacherService

MONDAY = date(2026, 10, 19)
TUESDAY = date(2026, 10, 20)
NEXT_MONDAY = date(2026, 10, 26)
PASSWORD = "correct horse battery staple"


@pytest.fixture
async def engine():
    test_engine = build_engine("sqlite+aiosqlite://")
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession, autoflush=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def teacher(db):
    return await TeacherService(db).register("ivanova@school.test", PASSWORD, "Anna", "Ivanova")


@pytest.fixture
async def other_teacher(db):
    return await TeacherService(db).register("petrov@school.test", PASSWORD, "Oleg", "Petrov")


@pytest.fixture
async def classroom(db, teacher):
    return await ClassService(db).create_class("10B", teacher.id)


@pytest.fixture
async def students(db, teacher, classroom):
    service = StudentService(db)
    first = await service.create_student(classroom.id, {"first_name": "Sasha", "last_name": "Belov"}, teacher.id)
    second = await service.create_student(classroom.id, {"first_name": "Masha", "last_name": "Orlova"}, teacher.id)
    return [first, second]


@pytest.fixture
async def math(db, teacher, classroom):
    return await SubjectService(db).create_subject(
        classroom.id, {"name": "Math", "lesson_days": [1]}, teacher.id
    )


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def signed_in(client, teacher):
    """Client whose requests resolve to the teacher fixture"""
    app.dependency_overrides[require_identity] = lambda: teacher.id
    return client

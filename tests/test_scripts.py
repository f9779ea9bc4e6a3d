# tests/test_scripts.py

import importlib.util
from pathlib import Path

import pytest

from gradebook.services.teacher_service import TeacherService

from .conftest import PASSWORD

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "create_teacher.py"


@pytest.fixture
def create_teacher_script(session_factory, monkeypatch):
    spec = importlib.util.spec_from_file_location("create_teacher_script", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    disposals = []

    async def record_disposal():
        disposals.append(True)

    monkeypatch.setattr(module, "AsyncSessionLocal", session_factory)
    monkeypatch.setattr(module, "close_db_connections", record_disposal)
    module.disposals = disposals
    return module


async def test_create_teacher_registers_account(create_teacher_script, session_factory):
    created = await create_teacher_script.create_teacher("new@school.test", PASSWORD, "Nina", "Smirnova")

    assert created is True
    assert create_teacher_script.disposals == [True]
    async with session_factory() as db:
        assert await TeacherService(db).authenticate("new@school.test", PASSWORD) is not None


async def test_existing_teacher_still_closes_connections(create_teacher_script, teacher):
    created = await create_teacher_script.create_teacher("ivanova@school.test", PASSWORD, "Anna", "Ivanova")

    assert created is False
    assert create_teacher_script.disposals == [True]

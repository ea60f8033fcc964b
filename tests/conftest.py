from __future__ import annotations
from datetime import date, datetime

import pytest
from fastapi.testclient import TestClient

from app.database import Base, build_engine, make_session_factory
from app.deps import get_repository
from app.main import app
from app.models.discipline import Discipline
from app.models.faculty import Faculty
from app.models.group import Group
from app.models.room import Room
from app.models.schedule import Schedule
from app.models.study_course import StudyCourse
from app.models.teacher import Teacher
from app.models.update_info import UpdateInfo
from app.repositories.schedule_repository import ScheduleRepository


@pytest.fixture()
def session_factory(tmp_path):
    # 檔案型 sqlite：每個 thread 從 pool 拿自己的連線
    engine = build_engine(f"sqlite:///{tmp_path / 'schedule.db'}")
    Base.metadata.create_all(engine)
    factory = make_session_factory(engine)
    with factory() as db:
        db.add_all([
            Faculty(id=1, name="Институт арктических технологий"),
            Faculty(id=2, name="Естественно-технический институт"),
            StudyCourse(id=1, name="1 курс"),
            StudyCourse(id=2, name="2 курс"),
            Group(id=1, uid="IVT-21", name="ИВТ-21", fac_id=1, course_id=2),
            Group(id=2, uid="IVT-22", name="ИВТ-22", fac_id=1, course_id=2),
            Group(id=3, uid="BIO-11", name="БИО-11", fac_id=2, course_id=1),
            Discipline(id=1, disc="Математический анализ"),
            Discipline(id=2, disc="Программирование"),
            Room(id=1, room="А-101"),
            Room(id=2, room="Б-204"),
            Teacher(id=1, teacher="Иванов И.И."),
            Teacher(id=2, teacher="Петрова А.С."),
            UpdateInfo(id=1, update_date=datetime(2024, 2, 28, 18, 30)),
            UpdateInfo(id=2, update_date=datetime(2024, 3, 1, 9, 15)),
        ])
        db.add_all([
            Schedule(id=1, group_uid="IVT-21", pair_date=date(2024, 3, 1), pair=1, pair_type="Лекция", disc_id=1, room_id=1, teacher_id=1),
            Schedule(id=2, group_uid="IVT-21", pair_date=date(2024, 3, 1), pair=2, pair_type="Практика", disc_id=2, room_id=2, teacher_id=2),
            Schedule(id=3, group_uid="IVT-21", pair_date=date(2024, 3, 2), pair=1, pair_type="Лекция", disc_id=2, room_id=1, teacher_id=2),
            # IVT-22 自己的課（合班測試用）
            Schedule(id=4, group_uid="IVT-22", pair_date=date(2024, 3, 1), pair=3, pair_type="Лекция", disc_id=1, room_id=1, teacher_id=1),
            Schedule(id=5, group_uid="IVT-22", pair_date=date(2024, 3, 4), pair=2, pair_type="Практика", disc_id=1, room_id=2, teacher_id=1),
            # 壞資料：discipline 99 不存在
            Schedule(id=6, group_uid="BIO-11", pair_date=date(2024, 3, 1), pair=1, pair_type="Лекция", disc_id=99, room_id=1, teacher_id=1),
        ])
        db.commit()
    yield factory
    engine.dispose()


@pytest.fixture()
def repo(session_factory):
    return ScheduleRepository(session_factory)


@pytest.fixture()
def client(repo):
    app.dependency_overrides[get_repository] = lambda: repo
    # 不用 `with`：不觸發 lifespan（不連 MySQL）
    yield TestClient(app)
    app.dependency_overrides.clear()

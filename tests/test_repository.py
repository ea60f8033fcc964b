from datetime import date, datetime

import pytest
from sqlalchemy import exc as sa_exc

from app.errors import NotFoundError, TransientStoreError
from app.repositories.schedule_repository import ScheduleRepository


def test_reference_lists(repo):
    assert [f.name for f in repo.list_faculties()] == [
        "Институт арктических технологий",
        "Естественно-технический институт",
    ]
    assert [c.name for c in repo.list_courses()] == ["1 курс", "2 курс"]
    assert [g.uid for g in repo.list_groups(1, 2)] == ["IVT-21", "IVT-22"]
    assert repo.list_groups(2, 2) == []


def test_update_date_is_latest(repo):
    assert repo.get_update_date() == datetime(2024, 3, 1, 9, 15)


def test_fetch_range_is_ordered(repo):
    rows = repo.fetch_by_group_and_range("IVT-21", date(2024, 3, 1), date(2024, 3, 2))
    assert [r.id for r in rows] == [1, 2, 3]
    first = rows[0]
    assert first.group_identifier == "IVT-21"
    assert first.date == date(2024, 3, 1)
    assert (first.pair_slot, first.discipline_id, first.room_id, first.teacher_id) == (1, 1, 1, 1)


def test_fetch_by_date(repo):
    rows = repo.fetch_by_group_and_date("IVT-21", date(2024, 3, 2))
    assert [r.id for r in rows] == [3]


def test_merged_group_includes_both_without_duplicates(repo):
    rows = repo.fetch_by_group_and_date("IVT-21", date(2024, 3, 1), merged="IVT-22")
    assert sorted(r.id for r in rows) == [1, 2, 4]
    # 同一個 UID 當合班傳入，不會重複
    same = repo.fetch_by_group_and_date("IVT-21", date(2024, 3, 1), merged="IVT-21")
    assert [r.id for r in same] == [1, 2]


def test_available_dates_distinct_ascending(repo):
    assert repo.available_dates("IVT-21") == [date(2024, 3, 1), date(2024, 3, 2)]
    assert repo.available_dates("IVT-21", "IVT-22") == [date(2024, 3, 1), date(2024, 3, 2), date(2024, 3, 4)]
    assert repo.available_dates("NOPE") == []


def test_lookups(repo):
    assert repo.lookup_discipline(2) == "Программирование"
    assert repo.lookup_room(2) == "Б-204"
    assert repo.lookup_teacher(1) == "Иванов И.И."
    assert repo.find_discipline(99) is None


@pytest.mark.parametrize("method", ["lookup_discipline", "lookup_room", "lookup_teacher"])
def test_lookup_missing_raises_not_found(repo, method):
    with pytest.raises(NotFoundError) as info:
        getattr(repo, method)(99)
    assert info.value.context["lookup_id"] == 99


def test_driver_errors_become_transient():
    class BrokenSession:
        def query(self, *args):
            raise sa_exc.OperationalError("SELECT 1", {}, Exception("connection refused"))

        def close(self):
            pass

    repo = ScheduleRepository(BrokenSession)
    with pytest.raises(TransientStoreError):
        repo.list_faculties()

# app/repositories/schedule_repository.py
import logging
from contextlib import contextmanager
from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import exc as sa_exc
from sqlalchemy.orm import Session

from app.errors import NotFoundError, TransientStoreError
from app.models.discipline import Discipline
from app.models.faculty import Faculty
from app.models.group import Group
from app.models.room import Room
from app.models.schedule import Schedule
from app.models.study_course import StudyCourse
from app.models.teacher import Teacher
from app.models.update_info import UpdateInfo
from app.schemas.timetable import ScheduleEntry

logger = logging.getLogger("app.repository")


class ScheduleRepository:
    """
    課表資料存取層（唯讀）。
    每個查詢各自開一個短 session，查完即歸還連線；
    整個 repository 不持有連線，也不快取任何結果。
    """

    def __init__(self, session_factory):
        self._session_factory = session_factory

    @contextmanager
    def _session(self, operation: str):
        db: Session = self._session_factory()
        try:
            yield db
        except (sa_exc.OperationalError, sa_exc.InterfaceError, sa_exc.TimeoutError) as e:
            logger.warning("store unavailable during %s: %s", operation, e.__class__.__name__)
            raise TransientStoreError("Schedule store is unavailable", operation=operation) from e
        finally:
            db.close()

    # ===== 參考資料 =====

    def list_faculties(self) -> List[Faculty]:
        with self._session("list_faculties") as db:
            return db.query(Faculty).order_by(Faculty.id.asc()).all()

    def list_courses(self) -> List[StudyCourse]:
        with self._session("list_courses") as db:
            return db.query(StudyCourse).order_by(StudyCourse.id.asc()).all()

    def list_groups(self, fac_id: int, course_id: int) -> List[Group]:
        with self._session("list_groups") as db:
            return (
                db.query(Group)
                .filter(Group.fac_id == fac_id, Group.course_id == course_id)
                .order_by(Group.name.asc())
                .all()
            )

    def get_update_date(self) -> Optional[datetime]:
        with self._session("get_update_date") as db:
            row = db.query(UpdateInfo.update_date).order_by(UpdateInfo.update_date.desc()).first()
            return row[0] if row else None

    # ===== 課表 =====

    @staticmethod
    def _group_filter(group: str, merged: Optional[str] = None):
        # 合班：兩個 UID 任一符合；同一列只會回一次
        uids = [group]
        if merged and merged != group:
            uids.append(merged)
        if len(uids) == 1:
            return Schedule.group_uid == group
        return Schedule.group_uid.in_(uids)

    @staticmethod
    def _to_entry(row: Schedule) -> ScheduleEntry:
        return ScheduleEntry(
            id=row.id,
            group_identifier=row.group_uid,
            date=row.pair_date,
            pair_slot=row.pair,
            pair_type=row.pair_type,
            discipline_id=row.disc_id,
            room_id=row.room_id,
            teacher_id=row.teacher_id,
        )

    def available_dates(self, group: str, merged: Optional[str] = None) -> List[date]:
        with self._session("available_dates") as db:
            rows = (
                db.query(Schedule.pair_date)
                .filter(self._group_filter(group, merged))
                .distinct()
                .order_by(Schedule.pair_date.asc())
                .all()
            )
            return [r[0] for r in rows]

    def fetch_by_group_and_date(
        self, group: str, day: date, merged: Optional[str] = None
    ) -> List[ScheduleEntry]:
        return self.fetch_by_group_and_range(group, day, day, merged)

    def fetch_by_group_and_range(
        self, group: str, start: date, end: date, merged: Optional[str] = None
    ) -> List[ScheduleEntry]:
        with self._session("fetch_by_group_and_range") as db:
            rows = (
                db.query(Schedule)
                .filter(
                    self._group_filter(group, merged),
                    Schedule.pair_date >= start,
                    Schedule.pair_date <= end,
                )
                .order_by(Schedule.pair_date.asc(), Schedule.pair.asc(), Schedule.id.asc())
                .all()
            )
            return [self._to_entry(r) for r in rows]

    # ===== dimension lookup =====

    def _find_name(self, column, key: int) -> Optional[str]:
        with self._session(f"find_{column.key}") as db:
            row = db.query(column).filter(column.class_.id == key).first()
            return row[0] if row else None

    def find_discipline(self, discipline_id: int) -> Optional[str]:
        return self._find_name(Discipline.disc, discipline_id)

    def find_room(self, room_id: int) -> Optional[str]:
        return self._find_name(Room.room, room_id)

    def find_teacher(self, teacher_id: int) -> Optional[str]:
        return self._find_name(Teacher.teacher, teacher_id)

    def lookup_discipline(self, discipline_id: int) -> str:
        name = self.find_discipline(discipline_id)
        if name is None:
            raise NotFoundError("Discipline not found", lookup="discipline", lookup_id=discipline_id)
        return name

    def lookup_room(self, room_id: int) -> str:
        name = self.find_room(room_id)
        if name is None:
            raise NotFoundError("Room not found", lookup="room", lookup_id=room_id)
        return name

    def lookup_teacher(self, teacher_id: int) -> str:
        name = self.find_teacher(teacher_id)
        if name is None:
            raise NotFoundError("Teacher not found", lookup="teacher", lookup_id=teacher_id)
        return name

# app/deps.py
from zoneinfo import ZoneInfo

from fastapi import Depends, Request

from app.config import settings
from app.repositories.schedule_repository import ScheduleRepository
from app.services.timetable import TimetableAssembler


def get_repository(request: Request) -> ScheduleRepository:
    # lifespan 啟動時建立，整個 process 共用同一個 engine / pool
    return request.app.state.repository


def get_timezone() -> ZoneInfo:
    return ZoneInfo(settings.TIMEZONE)


def get_assembler(
    repository: ScheduleRepository = Depends(get_repository),
    tz: ZoneInfo = Depends(get_timezone),
) -> TimetableAssembler:
    return TimetableAssembler(
        repository,
        tz=tz,
        concurrency=settings.ENRICH_CONCURRENCY,
        timeout=settings.ASSEMBLY_TIMEOUT_SECONDS,
    )

# app/routers/schedule.py
from datetime import date
from typing import Optional
from zoneinfo import ZoneInfo

import logging

from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import StreamingResponse

from app.config import settings
from app.deps import get_assembler, get_repository, get_timezone
from app.repositories.schedule_repository import ScheduleRepository
from app.schemas.timetable import EnrichedEntry
from app.services.timetable import TimetableAssembler
from app.utils.dates import DateFormat, format_date, local_today
from app.utils.excel_export import make_filename, rows_to_xlsx_bytes, timetable_rows
from app.utils.validators import GROUP_UID_PATTERN, check_date_range

logger = logging.getLogger("app.schedule")

router = APIRouter(tags=["Schedule"])

GROUP_PATH = Path(..., pattern=GROUP_UID_PATTERN, description="group UID（UID_g）")
MERGED_QUERY = Query(None, pattern=GROUP_UID_PATTERN, description="合班的第二個 group UID")


@router.get("/schedule-dates/{group}", response_model=list[str])
def list_available_dates(
    group: str = GROUP_PATH,
    merged: Optional[str] = MERGED_QUERY,
    repo: ScheduleRepository = Depends(get_repository),
    tz: ZoneInfo = Depends(get_timezone),
):
    dates = repo.available_dates(group, merged)
    return [format_date(d, DateFormat.DATE_ONLY, tz) for d in dates]


@router.get("/schedule-current/{group}", response_model=list[EnrichedEntry])
def get_current_schedule(
    group: str = GROUP_PATH,
    merged: Optional[str] = MERGED_QUERY,
    repo: ScheduleRepository = Depends(get_repository),
    assembler: TimetableAssembler = Depends(get_assembler),
    tz: ZoneInfo = Depends(get_timezone),
):
    day = local_today(tz, settings.CURRENT_DAY_OFFSET)
    rows = repo.fetch_by_group_and_date(group, day, merged)
    return assembler.assemble(rows, DateFormat.ISO_DATETIME)


@router.get("/schedule/{group}/{start}/{end}", response_model=list[EnrichedEntry])
def get_schedule(
    start: date,
    end: date,
    group: str = GROUP_PATH,
    merged: Optional[str] = MERGED_QUERY,
    repo: ScheduleRepository = Depends(get_repository),
    assembler: TimetableAssembler = Depends(get_assembler),
):
    check_date_range(start, end)
    rows = repo.fetch_by_group_and_range(group, start, end, merged)
    return assembler.assemble(rows, DateFormat.ISO_DATETIME)


@router.get("/schedule-list/{group}/{start}/{end}", response_model=list[EnrichedEntry])
def get_schedule_list(
    start: date,
    end: date,
    group: str = GROUP_PATH,
    merged: Optional[str] = MERGED_QUERY,
    repo: ScheduleRepository = Depends(get_repository),
    assembler: TimetableAssembler = Depends(get_assembler),
):
    """同 /schedule，但日期是「1 марта (пятница)」格式，給列表畫面用"""
    check_date_range(start, end)
    rows = repo.fetch_by_group_and_range(group, start, end, merged)
    return assembler.assemble(rows, DateFormat.LOCALE_LONG)


@router.get("/schedule/{group}/{start}/{end}/export")
def export_schedule(
    start: date,
    end: date,
    group: str = GROUP_PATH,
    merged: Optional[str] = MERGED_QUERY,
    repo: ScheduleRepository = Depends(get_repository),
    assembler: TimetableAssembler = Depends(get_assembler),
):
    """
    匯出日期區間課表成 Excel（.xlsx）
    """
    check_date_range(start, end)
    rows = repo.fetch_by_group_and_range(group, start, end, merged)
    timetable = assembler.assemble(rows, DateFormat.LOCALE_LONG)

    xlsx_bytes = rows_to_xlsx_bytes(timetable_rows(timetable), sheet_name=group)
    filename = make_filename(f"schedule_{group}")
    logger.info("export %s %s..%s rows=%d", group, start, end, len(timetable))

    return StreamingResponse(
        iter([xlsx_bytes]),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

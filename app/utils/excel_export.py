from __future__ import annotations
from typing import List, Dict, Any
from io import BytesIO
from datetime import datetime

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.styles import Font, Alignment

from app.schemas.timetable import EnrichedEntry

SCHEDULE_HEADERS = ["Дата", "Пара", "Время", "Тип", "Дисциплина", "Аудитория", "Преподаватель"]


def timetable_rows(entries: List[EnrichedEntry]) -> List[Dict[str, Any]]:
    rows = []
    for e in entries:
        pair = e.pair_slot_display
        rows.append(
            dict(zip(
                SCHEDULE_HEADERS,
                [
                    # 同一天只在第一節寫日期
                    e.date if e.is_first_of_day else "",
                    pair.label,
                    f"{pair.start}-{pair.end}",
                    e.pair_type or "",
                    e.discipline_name,
                    e.room_name,
                    e.teacher_name,
                ],
            ))
        )
    return rows


def rows_to_xlsx_bytes(rows: List[Dict[str, Any]], sheet_name: str = "Schedule") -> bytes:
    """
    rows: list of dict, each dict is a row
    """
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name[:31]

    if not rows:
        ws.append(["Нет занятий"])
        buf = BytesIO()
        wb.save(buf)
        return buf.getvalue()

    headers = list(rows[0].keys())
    ws.append(headers)

    # header style
    header_font = Font(bold=True)
    for col_idx, _h in enumerate(headers, start=1):
        cell = ws.cell(row=1, column=col_idx)
        cell.font = header_font
        cell.alignment = Alignment(horizontal="center", vertical="center")

    # data
    for r in rows:
        ws.append([r.get(h) for h in headers])

    # autosize columns
    for col_idx, h in enumerate(headers, start=1):
        max_len = len(str(h))
        for row_idx in range(2, ws.max_row + 1):
            v = ws.cell(row=row_idx, column=col_idx).value
            if v is None:
                continue
            max_len = max(max_len, len(str(v)))
        ws.column_dimensions[get_column_letter(col_idx)].width = min(max_len + 2, 60)

    buf = BytesIO()
    wb.save(buf)
    return buf.getvalue()


def make_filename(prefix: str = "schedule") -> str:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{ts}.xlsx"

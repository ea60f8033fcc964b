from datetime import date, datetime, time, timedelta
from enum import Enum
from zoneinfo import ZoneInfo


class DateFormat(str, Enum):
    ISO_DATETIME = "iso_datetime"   # 2024-03-01T00:00:00+03:00
    LOCALE_LONG = "locale_long"     # 1 марта (пятница)
    DATE_ONLY = "date_only"         # 2024-03-01


MONTHS_GENITIVE = (
    "января", "февраля", "марта", "апреля", "мая", "июня",
    "июля", "августа", "сентября", "октября", "ноября", "декабря",
)

WEEKDAYS = (
    "понедельник", "вторник", "среда", "четверг", "пятница", "суббота", "воскресенье",
)


def calendar_day(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def to_local_datetime(value, tz: ZoneInfo) -> datetime:
    # DATE 欄位視為當地 00:00；naive datetime 視為當地時間
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=tz)
        return value.astimezone(tz)
    return datetime.combine(value, time.min, tzinfo=tz)


def format_date(value, mode: DateFormat, tz: ZoneInfo) -> str:
    if mode == DateFormat.ISO_DATETIME:
        return to_local_datetime(value, tz).isoformat(timespec="seconds")
    day = calendar_day(value)
    if mode == DateFormat.LOCALE_LONG:
        return f"{day.day} {MONTHS_GENITIVE[day.month - 1]} ({WEEKDAYS[day.weekday()]})"
    if mode == DateFormat.DATE_ONLY:
        return day.strftime("%Y-%m-%d")
    raise ValueError(f"unsupported date format: {mode!r}")


def local_today(tz: ZoneInfo, offset_days: int = 0, now: datetime | None = None) -> date:
    now = now or datetime.now(tz)
    return now.astimezone(tz).date() + timedelta(days=offset_days)

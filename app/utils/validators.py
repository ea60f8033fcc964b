from datetime import date

from app.errors import ValidationError

# UID_g：英數、底線、連字號
GROUP_UID_PATTERN = r"^[0-9A-Za-z_\-]{1,64}$"


def check_date_range(start: date, end: date) -> None:
    # 格式由 FastAPI 的 date 參數驗；這裡只管區間方向
    if start > end:
        raise ValidationError("Start date is after end date", start=start.isoformat(), end=end.isoformat())

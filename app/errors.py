# app/errors.py
class ScheduleError(Exception):
    """
    課表服務的錯誤基底。
    context 放 group / 日期區間 / lookup id 等，給 log 用，不回給前端。
    """

    def __init__(self, message: str, **context):
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self):
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v!r}" for k, v in sorted(self.context.items()))
        return f"{self.message} ({details})"


class NotFoundError(ScheduleError):
    """dimension id (discipline / room / teacher) 找不到對應資料列"""


class IntegrityError(ScheduleError):
    """原始課表資料指向不存在的 dimension row，或節次超出範圍"""


class ValidationError(ScheduleError):
    """path / query 參數格式錯誤"""


class TransientStoreError(ScheduleError):
    """資料庫連線失敗、pool 逾時或整體組裝逾時"""

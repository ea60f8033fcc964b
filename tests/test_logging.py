import logging

from app.config import settings
from app.logging_config import setup_logging


def test_app_namespace_uses_configured_level(monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL", "debug")
    monkeypatch.setattr(settings, "SQL_LOG_LEVEL", "error")
    try:
        setup_logging()
        assert logging.getLogger("app").level == logging.DEBUG
        assert logging.getLogger("app.timetable").getEffectiveLevel() == logging.DEBUG
        assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    finally:
        monkeypatch.undo()
        setup_logging()

    assert logging.getLogger("app").level == logging.getLevelName(settings.LOG_LEVEL.upper())

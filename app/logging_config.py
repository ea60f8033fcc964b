import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from app.config import settings


def setup_logging():
    """
    - Console + file (<LOG_DIR>/app.log)
    - Rotate to avoid infinite growth
    - LOG_LEVEL 只套用在 app.* ；第三方（SQLAlchemy engine/pool）用 SQL_LOG_LEVEL
    """
    level = settings.LOG_LEVEL.upper()

    # 放在 handler 檢查之前：重複呼叫也會套用最新設定
    logging.getLogger("app").setLevel(level)
    for name in ("sqlalchemy.engine", "sqlalchemy.pool"):
        logging.getLogger(name).setLevel(settings.SQL_LOG_LEVEL.upper())

    root = logging.getLogger()
    root.setLevel(min(logging.getLogger("app").level, logging.INFO))

    # Prevent duplicate handlers
    if root.handlers:
        return

    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    console = logging.StreamHandler()
    console.setFormatter(formatter)

    file_handler = RotatingFileHandler(
        log_dir / "app.log",
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)

    root.addHandler(console)
    root.addHandler(file_handler)

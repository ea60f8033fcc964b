from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()


def build_engine(url, pool_size: int = 5, pool_timeout: int = 10):
    """
    Engine 只在應用啟動時建立一次，關閉時 dispose。
    sqlite 不支援 pool 參數，其餘（MySQL）走 QueuePool。
    """
    if str(url).startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_size=pool_size,
        pool_timeout=pool_timeout,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


def make_session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)

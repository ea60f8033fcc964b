from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    # --- DB 設定 ---
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_NAME: str = "schedule"
    DATABASE_URL: Optional[str] = None

    DB_POOL_SIZE: int = 5
    DB_POOL_TIMEOUT: int = 10

    # --- 課表組裝 ---
    TIMEZONE: str = "Europe/Moscow"
    ENRICH_CONCURRENCY: int = 4
    ASSEMBLY_TIMEOUT_SECONDS: float = 15.0
    CURRENT_DAY_OFFSET: int = 0

    # --- 其他應用設定 ---
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"
    SQL_LOG_LEVEL: str = "WARNING"
    LOG_DIR: str = "logs"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    @property
    def database_url(self):
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            "mysql+pymysql",
            username=self.DB_USER,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
            query={"charset": "utf8mb4"},
        )


settings = Settings()

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── App ──────────────────────────────────────────────
    app_name: str = "EventRooms"
    app_version: str = "0.1.0"
    debug: bool = False
    api_key: str = "changeme"
    log_level: str = "INFO"

    # ── PostgreSQL ───────────────────────────────────────
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "eventrooms"
    postgres_password: str = "eventrooms"
    postgres_db: str = "eventrooms"
    postgres_pool_size: int = 10
    auto_create_tables: bool = False

    @property
    def postgres_dsn(self) -> str:
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    # ── Pagination ───────────────────────────────────────
    default_page_size: int = 10
    max_page_size: int = 100


settings = Settings()

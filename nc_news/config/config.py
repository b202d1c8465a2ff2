from functools import lru_cache

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class PostgresConfig(BaseModel):
    host: str = "localhost"
    user: str = "postgres"
    passwd: str = "postgres"
    port: int = 5432
    db: str = "nc_news"
    pool_size: int = 10
    # 쿼리 기본 타임아웃(ms). 커넥션 생성 시 statement_timeout으로 전달됨
    statement_timeout_ms: int = 5000
    echo: bool = False


class AppConfig(BaseModel):
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]


class Settings(BaseSettings):
    """
    기본 Configuration

    `POSTGRES__HOST=db` 처럼 `__` 구분자로 중첩 항목을 덮어쓸 수 있습니다.
    """

    postgres: PostgresConfig = PostgresConfig()
    app: AppConfig = AppConfig()

    model_config = SettingsConfigDict(
        env_file="nc_news/config/.env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )


@lru_cache
def get_settings():
    return Settings()


settings: Settings = get_settings()

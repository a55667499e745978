"""ProfRate backend – configuration via environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    # ── Database ──
    database_url: str = "sqlite:///./database.sqlite"
    seed_on_startup: bool = True

    # ── Rating scope ──
    # Reject a courseId that is not taught by the requested professor.
    enforce_course_scope: bool = False

    # ── HTTP ──
    cors_origins: list[str] = ["*"]

    # ── Observability ──
    log_level: str = "INFO"
    tracing_enabled: bool = False
    otlp_endpoint: str = "http://localhost:4317"
    service_name: str = "profrate-api"


@lru_cache()
def get_settings() -> Settings:
    return Settings()

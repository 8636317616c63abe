from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="APP_",
        extra="ignore",
        case_sensitive=False,
    )

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # API
    api_prefix: str = "/api/v1"
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8000",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:8000",
    ]

    cors_origin_regex: str | None = None
    trusted_hosts: list[str] = ["*"]
    root_path: str = ""

    # OpenAI (optional: without a key the action generator runs offline)
    openai_api_key: str | None = None
    action_model: str = "gpt-5-nano"
    action_model_reasoning: str = "low"

    # Product policy
    max_free_notes: int | None = 2  # None disables the free-tier ceiling
    seed_notes: bool = True

    @property
    def ai_configured(self) -> bool:
        return bool(self.openai_api_key and self.openai_api_key.strip())


settings = Settings()

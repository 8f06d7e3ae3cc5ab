import logging
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    atproto_service_url: str = Field(default="https://public.api.bsky.app", alias="ATPROTO_SERVICE_URL")
    http_timeout_seconds: float = Field(default=10.0, alias="HTTP_TIMEOUT_SECONDS")
    user_agent: str = Field(default="listfresh/0.1", alias="USER_AGENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @model_validator(mode="after")
    def validate_required_runtime(self) -> "Settings":
        if not self.atproto_service_url.strip():
            raise ValueError("ATPROTO_SERVICE_URL is required")
        if not self.atproto_service_url.startswith(("http://", "https://")):
            raise ValueError("ATPROTO_SERVICE_URL must be an http(s) URL")
        if self.http_timeout_seconds <= 0:
            raise ValueError("HTTP_TIMEOUT_SECONDS must be > 0")
        if not self.user_agent.strip():
            raise ValueError("USER_AGENT is required")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"LOG_LEVEL is not a logging level: {self.log_level}")
        self.atproto_service_url = self.atproto_service_url.rstrip("/")
        self.log_level = self.log_level.upper()
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)
    package_logger = logging.getLogger("listfresh")
    package_logger.setLevel(level)
    if not logging.getLogger().handlers and not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        package_logger.addHandler(handler)

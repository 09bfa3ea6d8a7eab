"""Settings for the chat view layer with observability configuration."""

from __future__ import annotations

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _env_field(default, *env_names: str):
    if env_names:
        alias = AliasChoices(*env_names) if len(env_names) > 1 else env_names[0]
        return Field(default=default, validation_alias=alias)
    return Field(default=default)


class Settings(BaseSettings):
    environment: str = _env_field("production", "ENV", "APP_ENV", "ENVIRONMENT")
    service_name: str = _env_field("chatview", "SERVICE_NAME")
    git_commit: str = _env_field("unknown", "GIT_COMMIT", "COMMIT_SHA", "SOURCE_VERSION")

    obs_enabled: bool = _env_field(True, "OBS_ENABLED")
    obs_log_level: str = _env_field("INFO", "LOG_LEVEL")
    obs_log_sampling_rate_info: float = _env_field(1.0, "LOG_SAMPLING_RATE_INFO")

    # Separator used when the other participants of a chat are shown on one line
    username_separator: str = _env_field(", ", "USERNAME_SEPARATOR")

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment helpers
    def is_prod(self) -> bool:
        return self.environment.lower() in ("prod", "production", "live")

    def is_dev(self) -> bool:
        return self.environment.lower() in ("dev", "development")

    @field_validator("obs_log_level", mode="before")
    def _normalise_log_level(cls, value):  # type: ignore[override]
        if value in (None, ""):
            return "INFO"
        return str(value).strip().upper()

    @field_validator("obs_log_sampling_rate_info")
    def _clamp_sampling_rate(cls, value: float) -> float:  # type: ignore[override]
        return max(0.0, min(1.0, float(value)))


settings = Settings()

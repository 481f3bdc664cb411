from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.value_objects.reproduction import ReproductiveParameters


class Settings(BaseSettings):
    log_level: str = "INFO"
    environment: str = "dev"
    # CORS
    cors_allow_origins: str = "*"
    # Reproduction
    voluntary_waiting_days: int = Field(default=50, ge=0)
    # Health plans
    due_soon_days: int = Field(default=7, ge=0)
    default_health_plan_id: str = "default-calf-plan"
    # Lactation
    lactation_standard_days: int = Field(default=305, gt=0)
    persistency_window_days: int = Field(default=10, gt=0)

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        if isinstance(self.cors_allow_origins, str):
            return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]
        return self.cors_allow_origins

    def reproductive_parameters(self) -> ReproductiveParameters:
        return ReproductiveParameters(voluntary_waiting_days=self.voluntary_waiting_days)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

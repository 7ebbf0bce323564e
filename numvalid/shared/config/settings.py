from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    LOG_LEVEL: str = Field(
        default="INFO", description="Logging level [DEBUG, INFO, WARNING, ERROR]"
    )

    JSON_LOGS: bool = Field(
        default=False,
        description="Should logs be in JSON format?",
    )

    DECIMAL_MAX_TOTAL_DIGITS: Optional[int] = Field(
        default=None,
        ge=1,
        description="Maximum number of significant digits (matcher default is 11)",
    )

    DECIMAL_MAX_DECIMAL_PLACES: Optional[int] = Field(
        default=None,
        ge=1,
        description="Maximum number of decimal places (needs DECIMAL_MAX_TOTAL_DIGITS)",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if value.upper() not in valid_levels:
            raise ValueError(
                f"Invalid LOG_LEVEL '{value}'. Must be one of {valid_levels}"
            )
        return value.upper()

    @model_validator(mode="after")
    def validate_decimal_limits(self) -> "Settings":
        if (
            self.DECIMAL_MAX_DECIMAL_PLACES is not None
            and self.DECIMAL_MAX_TOTAL_DIGITS is None
        ):
            raise ValueError(
                "DECIMAL_MAX_DECIMAL_PLACES can only be set "
                "together with DECIMAL_MAX_TOTAL_DIGITS"
            )
        return self


@lru_cache()
def get_settings() -> Settings:
    from numvalid.shared.logging import get_logger

    logger = get_logger(__name__)

    try:
        settings = Settings()
        logger.info("Settings loaded successfully")
        return settings

    except Exception as e:
        logger.error(f"Failed to load settings: {e}", exc_info=True)
        raise

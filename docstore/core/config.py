"""
Document Store Configuration
Settings loaded from environment variables (DOCSTORE_ prefix) or a .env file.
"""
import logging
from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError


class UpdatePolicy(str, Enum):
    """How save() treats an explicit id that is already stored"""
    REPLACE = "replace"  # Overwrite the whole record, created included
    PRESERVE_CREATED = "preserve_created"  # Take new fields, keep stored created


class LogFormat(str, Enum):
    """Log output format"""
    DEVELOP = "develop"
    JSON = "json"


class StoreSettings(BaseSettings):
    """Document store settings"""

    UPDATE_POLICY: UpdatePolicy = Field(
        default=UpdatePolicy.REPLACE,
        description="Policy for saving over an existing id"
    )
    CASE_SENSITIVE: bool = Field(
        default=True,
        description="Case-sensitive title prefix and content matching"
    )

    # Logging
    LOG_LEVEL: str = Field(default="WARNING", description="Level of the docstore logger")
    LOG_FORMAT: LogFormat = Field(default=LogFormat.DEVELOP, description="develop or json")

    @field_validator('UPDATE_POLICY', 'LOG_FORMAT', mode='before')
    @classmethod
    def normalize_enum_value(cls, v):
        """Accept enum values in any case"""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level name"""
        normalized = v.strip().upper()
        if normalized == "WARN":
            normalized = "WARNING"
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"Unknown log level: {v}")
        return normalized

    model_config = SettingsConfigDict(
        env_prefix="DOCSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> StoreSettings:
    """Get cached store settings"""
    try:
        return StoreSettings()
    except PydanticValidationError as e:
        raise ConfigurationError(
            "Invalid document store configuration",
            errors=e.errors(include_url=False),
            cause=e
        ) from e

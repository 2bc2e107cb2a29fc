"""Runtime settings for the seqsplice package."""

import os
import typing as tp

import annotated_types as at
from pydantic import BaseModel, Field, field_validator

__all__ = ["Settings", "DEFAULT_LOG_FORMAT", "DEFAULT_LOG_DATEFMT"]

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

LogLevel = tp.Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
NonEmptyStr = tp.Annotated[str, at.MinLen(1)]

# Spellings the logging module also accepts
_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class Settings(BaseModel):
    """Logging configuration, read from environment variables.

    Attributes:
        LOG_LEVEL: Level name applied to the package logger.
        LOG_FORMAT: ``logging.Formatter`` format string.
        LOG_DATEFMT: ``logging.Formatter`` date format string.
    """

    LOG_LEVEL: LogLevel = "INFO"
    LOG_FORMAT: NonEmptyStr = DEFAULT_LOG_FORMAT
    LOG_DATEFMT: NonEmptyStr = Field(default=DEFAULT_LOG_DATEFMT)

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, value: tp.Any) -> tp.Any:
        if isinstance(value, str):
            level = value.strip().upper()
            return _LEVEL_ALIASES.get(level, level)
        return value

    @classmethod
    def load(cls, environ: tp.Optional[tp.Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``).

        Unset variables fall back to the field defaults.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        environ = os.environ if environ is None else environ
        values = {
            name: environ[name] for name in cls.model_fields if name in environ
        }
        return cls(**values)

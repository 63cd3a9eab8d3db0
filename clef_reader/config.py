from __future__ import annotations

import logging
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    return int(raw) if raw else None


class ReaderConfig(BaseModel):
    """
    Runtime settings for the command-line tools.

    Notes:
    - every field can be overridden from the environment (CLEF_*)
    - the decoder itself takes no configuration; skip/abort is the caller's policy
    """
    model_config = ConfigDict(validate_default=True)

    encoding: str = Field(default_factory=lambda: os.getenv("CLEF_ENCODING", "utf-8"))
    on_error: str = Field(default_factory=lambda: os.getenv("CLEF_ON_ERROR", "abort"))
    log_level: str = Field(default_factory=lambda: os.getenv("CLEF_LOG_LEVEL", "WARNING"))
    limit: Optional[int] = Field(default_factory=lambda: _optional_int("CLEF_LIMIT"))

    @field_validator("on_error")
    @classmethod
    def _check_on_error(cls, value: str) -> str:
        value = value.lower()
        if value not in ("abort", "skip"):
            raise ValueError("on_error must be 'abort' or 'skip'")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level: {value}")
        return value


DEFAULT_CONFIG = ReaderConfig()


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=level.upper(), format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")

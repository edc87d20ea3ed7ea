"""Settings loaded from the environment (``REFCOMPLETE_*``) or a ``.env`` file."""

from __future__ import annotations

import logging
import sys
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .core.types import Options

LogLevel = Literal["debug", "info", "warning", "error", "critical"]

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Matching
    strip_remote_name: bool = True
    suggest_next_suffix: bool = True
    show_dialog: bool = False

    # Repository discovery starts here
    repository: str = "."

    # Logging
    log_level: LogLevel = "warning"
    log_file: str | None = Field(default=None)

    # Display
    show_banner: bool = True

    model_config = {
        "env_prefix": "REFCOMPLETE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip().lower()
            if value == "warn":
                return "warning"
        return value

    def to_options(self) -> Options:
        return Options(
            strip_remote_name=self.strip_remote_name,
            suggest_next_suffix=self.suggest_next_suffix,
            show_dialog=self.show_dialog,
        )


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach a single handler to the ``refcomplete`` logger."""
    logger = logging.getLogger("refcomplete")
    logger.setLevel(settings.log_level.upper())
    if not logger.handlers:
        if settings.log_file:
            handler: logging.Handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        else:
            handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger

"""Environment-backed settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

LOG_LEVEL_ENV_VAR = "DIFFVIEW_LOG_LEVEL"
INLINE_HIGHLIGHTS_ENV_VAR = "DIFFVIEW_INLINE_HIGHLIGHTS"
DEFAULT_LOG_LEVEL = "WARNING"


class DiffViewConfigError(ValueError):
    """Raised when an environment setting has an invalid value."""


@dataclass(frozen=True, slots=True)
class DiffViewSettings:
    """Resolved runtime settings passed explicitly to callers."""

    log_level: str = DEFAULT_LOG_LEVEL
    inline_highlights: bool = True


def load_settings() -> DiffViewSettings:
    """Read settings from the environment, loading ``.env`` without overriding."""
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    log_level = (os.getenv(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).strip().upper()
    if log_level not in logging.getLevelNamesMapping():
        raise DiffViewConfigError(
            f"{LOG_LEVEL_ENV_VAR} must be a logging level name, got '{log_level}'."
        )

    inline_highlights = os.getenv(INLINE_HIGHLIGHTS_ENV_VAR, "1").strip() != "0"
    return DiffViewSettings(log_level=log_level, inline_highlights=inline_highlights)

"""Project-level configuration and path helpers."""

import os
from pathlib import Path
from typing import Union

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "events.log"
DEFAULT_LOG_LEVEL = "INFO"

LOG_LEVEL_ENV_VARS = ("EVENTS_LOG_LEVEL", "LOG_LEVEL")
LOG_FILE_ENV_VAR = "EVENTS_LOG_FILE"


PathLike = Union[str, Path]


def load_env(env_file: PathLike | None = None) -> bool:
    """Load variables from a .env file without overriding the environment."""
    if env_file is None:
        env_file = PROJECT_ROOT / ".env"
    return load_dotenv(env_file, override=False)


def resolve_log_level(value: str | None = None) -> str:
    """Resolve the log level from an explicit value or the environment."""
    if not value:
        for name in LOG_LEVEL_ENV_VARS:
            value = os.getenv(name)
            if value:
                break
        else:
            value = DEFAULT_LOG_LEVEL

    return value.upper()


def resolve_log_path(value: PathLike | None = None) -> Path:
    """Resolve the log file location to an absolute path."""
    if not value:
        value = os.getenv(LOG_FILE_ENV_VAR)
    if not value:
        return DEFAULT_LOG_PATH

    candidate = Path(value)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate

"""Event representation and argument lists shared by producers and consumers."""

from .logging_config import get_logger, log_event, setup_logging
from .models import (
    A,
    Arg,
    Args,
    Clonable,
    Event,
    MemoClonable,
    clone_value,
    sort_args,
)

__all__ = [
    # Models
    "Event",
    "Arg",
    "Args",
    "A",
    "sort_args",
    "Clonable",
    "MemoClonable",
    "clone_value",
    # Logging
    "setup_logging",
    "get_logger",
    "log_event",
]

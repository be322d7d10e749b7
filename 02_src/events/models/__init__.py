"""Event and argument data models."""

from .args import A, Arg, Args, sort_args
from .clone import Clonable, MemoClonable, clone_value
from .event import Event

__all__ = [
    # Event
    "Event",
    # Args
    "Arg",
    "Args",
    "A",
    "sort_args",
    # Cloning
    "Clonable",
    "MemoClonable",
    "clone_value",
]

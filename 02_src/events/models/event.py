"""Event data model."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping

from .args import Args
from .clone import MemoClonable


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Event(MemoClonable):
    """
    A unique event generated by a program.

    Events carry context about how they were triggered and information to
    pass to handlers. They are not expected to change once emitted; use
    clone() to hand an independent copy to another consumer.
    """

    message: str = ""  # human-readable description
    source: str = ""  # where the event was generated
    args: Args = field(default_factory=Args)
    time: datetime = field(default_factory=_utc_now)
    debug: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.args, Args):
            return
        if isinstance(self.args, Mapping):
            self.args = Args.from_map(self.args)
        else:
            self.args = Args(self.args or ())

    def clone(self, memo: dict[int, Any] | None = None) -> "Event":
        """Deep copy of the event, sharing no mutable state with the original."""
        if memo is None:
            memo = {}
        copied = memo[id(self)] = Event(
            message=self.message,
            source=self.source,
            time=self.time,
            debug=self.debug,
        )
        copied.args = self.args.clone(memo)
        return copied

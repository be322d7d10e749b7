"""Deep-copy policy for argument values."""

from collections import Counter, OrderedDict, defaultdict, deque
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from ..logging_config import get_logger

logger = get_logger(__name__)

_IMMUTABLE_TYPES = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    Decimal,
    datetime,
    date,
    time,
    timedelta,
    Enum,
    frozenset,
    range,
)

_DICT_TYPES = (dict, OrderedDict, defaultdict, Counter)


@runtime_checkable
class Clonable(Protocol):
    """A value that knows how to produce an independent copy of itself."""

    def clone(self) -> Any:
        """Return a copy sharing no mutable state with self."""
        ...


class MemoClonable:
    """
    Base for values whose clone() takes part in a clone_value() walk.

    clone() receives the memo of the walk so values reachable more than once,
    including through cycles, are copied once.
    """

    def clone(self, memo: dict[int, Any] | None = None) -> Any:
        raise NotImplementedError


def clone_value(value: Any, memo: dict[int, Any] | None = None) -> Any:
    """
    Return a copy of value that shares no mutable state with it, when possible.

    Immutable values are returned as-is. Values with a callable clone() are
    cloned with it. Lists, dicts, sets, tuples and bytearrays are rebuilt with
    their items cloned recursively, as are OrderedDict, defaultdict, Counter,
    deque and named tuples. Other values with a callable copy() are copied
    with it, which for other container subclasses is usually shallow.
    Anything else is shared by reference, so independence is not guaranteed
    for opaque mutable payloads.

    Args:
        value: The value to copy.
        memo: Copies made so far, keyed by id() of the original. Used to
              reproduce shared and self-referencing values.

    Returns:
        The copied value
    """
    if isinstance(value, _IMMUTABLE_TYPES) or isinstance(value, type):
        return value

    if memo is None:
        memo = {}
    key = id(value)
    if key in memo:
        return memo[key]

    if isinstance(value, MemoClonable):
        return value.clone(memo)

    clone = getattr(value, "clone", None)
    if callable(clone):
        copied = memo[key] = clone()
        return copied

    kind = type(value)

    if kind is list:
        copied = memo[key] = []
        copied.extend(clone_value(item, memo) for item in value)
        return copied

    if kind in _DICT_TYPES:
        # copy() keeps the default_factory of a defaultdict
        copied = memo[key] = value.copy()
        for k, v in value.items():
            copied[k] = clone_value(v, memo)
        return copied

    if kind is deque:
        copied = memo[key] = deque(maxlen=value.maxlen)
        copied.extend(clone_value(item, memo) for item in value)
        return copied

    if kind is set:
        copied = memo[key] = set()
        copied.update(clone_value(item, memo) for item in value)
        return copied

    if kind is tuple or (issubclass(kind, tuple) and hasattr(kind, "_make")):
        items = [clone_value(item, memo) for item in value]
        copied = tuple(items) if kind is tuple else kind._make(items)
        # A copy may already be recorded by a cycle through an inner container
        return memo.setdefault(key, copied)

    if kind is bytearray:
        copied = memo[key] = bytearray(value)
        return copied

    copy = getattr(value, "copy", None)
    if callable(copy):
        copied = memo[key] = copy()
        return copied

    logger.debug("Sharing %s value by reference in clone", kind.__name__)
    return value

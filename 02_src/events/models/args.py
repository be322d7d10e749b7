"""Event argument models."""

from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Iterable, Mapping

from .clone import MemoClonable, clone_value


@dataclass
class Arg:
    """A single named event argument."""

    name: str
    value: Any = None


class Args(list, MemoClonable):
    """
    Ordered list of event arguments.

    Names do not have to be unique. get() returns the first argument with a
    given name while map() keeps the last one.

    Slicing, copy() and + return Args. Pairs are only converted to Arg by
    the constructor and +, not by append(), extend() or item assignment.
    """

    def __init__(self, args: Iterable[Arg | tuple[str, Any]] = ()):
        super().__init__(_as_arg(arg) for arg in args)

    def __repr__(self) -> str:
        return f"Args({list.__repr__(self)})"

    def __getitem__(self, index):
        item = list.__getitem__(self, index)
        return Args(item) if isinstance(index, slice) else item

    def __add__(self, other: Iterable[Arg | tuple[str, Any]]) -> "Args":
        return Args([*self, *Args(other)])

    def copy(self) -> "Args":
        """Shallow copy: the Arg entries are shared."""
        return Args(self)

    def get(self, name: str) -> tuple[Any, bool]:
        """Return the value of the first argument called name, and whether it was found."""
        for arg in self:
            if arg.name == name:
                return arg.value, True
        return None, False

    def map(self) -> dict[str, Any]:
        """
        Convert the argument list to a dict.

        When several arguments share a name the value of the last one ends up
        in the dict.
        """
        return {arg.name: arg.value for arg in self}

    def clone(self, memo: dict[int, Any] | None = None) -> "Args":
        """
        Deep copy of the argument list, see clone_value() for value handling.

        Values shared between arguments stay shared in the copy, and values
        referring back to this list refer to the copy.
        """
        if memo is None:
            memo = {}
        copied = memo[id(self)] = Args()
        copied.extend(Arg(arg.name, clone_value(arg.value, memo)) for arg in self)
        return copied

    @classmethod
    def from_map(cls, m: Mapping[str, Any]) -> "Args":
        """
        Construct an argument list from a mapping.

        The order of the returned arguments is unspecified, use sort_args()
        when a deterministic order is needed.
        """
        return cls(Arg(name, value) for name, value in m.items())


def _as_arg(arg: Arg | tuple[str, Any]) -> Arg:
    if isinstance(arg, Arg):
        return arg
    if isinstance(arg, (str, bytes)):
        raise TypeError(f"expected Arg or (name, value) pair, got {arg!r}")
    try:
        name, value = arg
    except (TypeError, ValueError):
        raise TypeError(f"expected Arg or (name, value) pair, got {arg!r}") from None
    return Arg(name, value)


def A(m: Mapping[str, Any]) -> Args:
    """Construct an argument list from a mapping."""
    return Args.from_map(m)


def sort_args(args: Args) -> None:
    """
    Sort a list of arguments by name, in place.

    This is not guaranteed to be a stable sort: arguments with equal names may
    not keep their original relative order.
    """
    args.sort(key=attrgetter("name"))

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import NamedTuple, Protocol

from ._results import Result

type TryPredicate[T, E] = Callable[[T], Result[bool, E]]
"""A predicate that may fail with an error of type `E` instead of producing a `bool`."""


class SizedReversible[T](Protocol):
    """Anything that knows its exact length and can be traversed from its end.

    Required by `try_rposition`, to report indices in the original forward order while scanning backwards.

    `list`, `tuple`, `range`, `str`, `collections.deque`, `dict` and its views, as well as any `collections.abc.Sequence`, satisfy it.
    At runtime, anything accepted by both `len()` and `reversed()` qualifies, which includes `tuple` and `str`.
    """

    def __len__(self) -> int: ...
    def __reversed__(self) -> Iterator[T]: ...


class Enumerated[T](NamedTuple):
    """Represents an item with its associated index in an enumeration.

    See `Iter.enumerate()` and `Seq.enumerate()` for details.
    """

    idx: int
    """The index of the item in the enumeration."""
    value: T
    """The value of the item."""

    def __repr__(self) -> str:
        return f"({self.idx}, {self.value.__repr__()})"

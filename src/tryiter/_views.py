"""Lazy views over sized sequences, backing the `Seq` adapters.

Each view is itself a `Sequence`, so it keeps both the exact length and the reverse traversal of its source.

Nothing is computed ahead of time: elements are pulled from the source (and transformed, for `Mapped`) only when indexed, each time they are indexed.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Iterator, Sequence
from typing import Any, overload

from ._types import Enumerated


class View[T](Sequence[T]):
    __slots__ = ()

    @abstractmethod
    def _get(self, index: int) -> T:
        """Return the element at **index**, already checked to be in `[0, len(self))`."""
        ...

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...
    def __getitem__(self, index: int | slice) -> T | Sequence[T]:
        length = len(self)
        match index:
            case slice():
                return Sliced(self, range(length)[index])
            case _:
                pos = index + length if index < 0 else index
                if not 0 <= pos < length:
                    msg = f"{self.__class__.__name__} index {index} out of range for length {length}"
                    raise IndexError(msg)
                return self._get(pos)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(map(repr, self))})"


class Mapped[T, R](View[R]):
    __slots__ = ("_data", "_func")

    def __init__(self, data: Sequence[T], func: Callable[[T], R]) -> None:
        self._data = data
        self._func = func

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[R]:
        return map(self._func, self._data)

    def _get(self, index: int) -> R:
        return self._func(self._data[index])


class Enumerate[T](View[Enumerated[T]]):
    __slots__ = ("_data",)

    def __init__(self, data: Sequence[T]) -> None:
        self._data = data

    def __len__(self) -> int:
        return len(self._data)

    def _get(self, index: int) -> Enumerated[T]:
        return Enumerated(index, self._data[index])


class Reversed[T](View[T]):
    __slots__ = ("_data",)

    def __init__(self, data: Sequence[T]) -> None:
        self._data = data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return reversed(self._data)

    def __reversed__(self) -> Iterator[T]:
        return iter(self._data)

    def _get(self, index: int) -> T:
        return self._data[len(self._data) - 1 - index]


class Sliced[T](View[T]):
    """Elements of a sequence at the positions given by a `range`.

    Backs `take`, `skip` and `step_by`.
    """

    __slots__ = ("_data", "_positions")

    def __init__(self, data: Sequence[T], positions: range) -> None:
        self._data = data
        self._positions = positions

    def __len__(self) -> int:
        return len(self._positions)

    def _get(self, index: int) -> T:
        return self._data[self._positions[index]]


class Zipped(View[tuple[Any, ...]]):
    """Tuples of same-index elements, truncated to the shortest sequence."""

    __slots__ = ("_datas",)

    def __init__(self, *datas: Sequence[Any]) -> None:
        self._datas = datas

    def __len__(self) -> int:
        return min((len(data) for data in self._datas), default=0)

    def _get(self, index: int) -> tuple[Any, ...]:
        return tuple(data[index] for data in self._datas)

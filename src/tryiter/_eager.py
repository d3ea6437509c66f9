from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, overload

import cytoolz as cz

from ._core import CommonBase, get_config
from ._lazy import Iter, _check_count, _check_step
from ._types import Enumerated
from ._views import Enumerate, Mapped, Reversed, Sliced, Zipped
from .traits import TryDoubleEndedIterator


class Seq[T](CommonBase[Sequence[T]], Sequence[T], TryDoubleEndedIterator[T]):
    """`Seq` represent a `Sequence` with a known length, which can be traversed from both ends.

    Implements the `Sequence` Protocol from `collections.abc`, so it can be used as a standard immutable sequence.

    On top of the forward fallible scans, it provides `try_rposition`, which searches from the end.

    Scanning a `Seq` never consumes it: each scan starts from a fresh traversal.

    Adapters keeping the exact length (`map`, `enumerate`, `rev`, `zip`, `step_by`, `take`, `skip`) return a new `Seq` over a lazy view, computing nothing until elements are accessed.

    Adapters losing it (`filter`, `chain`) return an `Iter`.

    If you already have a `Sequence` (`tuple`, `list`, `range`, `str`...), simply pass it to the constructor, without runtime checks.

    Args:
        data (Sequence[T]): The data to initialize the Seq with.

    Example:
    ```python
    >>> import tryiter as ti
    >>> logs = ti.Seq(["boot", "warn: disk", "ok", "warn: fan", "ok"])
    >>> logs.try_rposition(lambda line: ti.Ok(line.startswith("warn")))
    Ok(Some(3))
    >>> logs.try_position(lambda line: ti.Ok(line.startswith("warn")))
    Ok(Some(1))

    ```
    """

    _inner: Sequence[T]

    __slots__ = ()

    def __init__(self, data: Sequence[T]) -> None:
        self._inner = data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def __len__(self) -> int:
        return len(self._inner)

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._inner)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Seq[T]: ...
    def __getitem__(self, index: int | slice) -> T | Seq[T]:
        match index:
            case slice():
                return Seq(Sliced(self._inner, range(len(self._inner))[index]))
            case _:
                return self._inner[index]

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Seq[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Seq[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Seq[U]:
        """Create a `Seq` from an `Iterable` or unpacked values.

        Prefer using the standard constructor, as this method involves extra checks and conversions steps.

        Args:
            data (Iterable[U] | U): Iterable to convert into a sequence, or a single value.
            *more_data (U): Unpacked items to include in the sequence, if **data** is not an Iterable.

        Returns:
            Seq[U]: A new Seq instance containing the provided data.

        Examples:
        ```python
        >>> import tryiter as ti
        >>> ti.Seq.from_(1, 2, 3)
        Seq(1, 2, 3)
        >>> ti.Seq.from_(x * 2 for x in range(3))
        Seq(0, 2, 4)

        ```
        """
        converted = data if cz.itertoolz.isiterable(data) else (data, *more_data)
        return Seq(converted if isinstance(converted, Sequence) else tuple(converted))

    @staticmethod
    def empty() -> Seq[Any]:
        """Create an empty `Seq`.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Seq.empty().try_rposition(lambda x: ti.Err("never called"))
        Ok(NONE)

        ```
        """
        return Seq(())

    @staticmethod
    def once[U](value: U) -> Seq[U]:
        """Create a `Seq` holding **value** only.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Seq.once("x").try_rposition(lambda x: ti.Ok(x == "x"))
        Ok(Some(0))

        ```
        """
        return Seq((value,))

    def iter(self) -> Iter[T]:
        """Get a lazy, forward-only `Iter` over the `Seq`.

        Example:
        ```python
        >>> import tryiter as ti
        >>> it = ti.Seq([1, 2, 3]).iter()
        >>> it.try_any(lambda x: ti.Ok(x == 1))
        Ok(True)
        >>> it.collect()
        Seq(2, 3)

        ```
        """
        return Iter(self._inner)

    def map[R](self, func: Callable[[T], R]) -> Seq[R]:
        """Apply **func** to each element, lazily, keeping the exact length.

        Note:
            **func** is called each time an element is accessed.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Seq(["a", "bb", "c"]).map(len).try_rposition(lambda n: ti.Ok(n > 1))
        Ok(Some(1))

        ```
        """
        return Seq(Mapped(self._inner, func))

    def enumerate(self) -> Seq[Enumerated[T]]:
        """Return a `Seq` of `Enumerated(idx, value)` pairs, starting at 0.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Seq("ab").enumerate()
        Seq((0, 'a'), (1, 'b'))

        ```
        """
        return Seq(Enumerate(self._inner))

    def rev(self) -> Seq[T]:
        """Return a `Seq` over the same elements in reverse order, without copying them.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Seq([1, 2, 3]).rev()
        Seq(3, 2, 1)
        >>> ti.Seq([1, 2, 3]).rev().try_rposition(lambda x: ti.Ok(x > 1))
        Ok(Some(1))

        ```
        """
        return Seq(Reversed(self._inner))

    def zip(self, *others: Sequence[Any]) -> Seq[tuple[Any, ...]]:
        """Return a `Seq` of tuples of same-index elements, truncated to the shortest sequence.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Seq("abc").zip([1, 2]).try_rposition(lambda p: ti.Ok(p[0] == "a"))
        Ok(Some(0))

        ```
        """
        return Seq(Zipped(self._inner, *others))

    def step_by(self, step: int) -> Seq[T]:
        """Return a `Seq` of every **step**-th element, starting with the first one.

        Raises:
            ValueError: If **step** is not strictly positive.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Seq(range(10)).step_by(4)
        Seq(0, 4, 8)

        ```
        """
        _check_step(step)
        return Seq(Sliced(self._inner, range(0, len(self._inner), step)))

    def take(self, n: int) -> Seq[T]:
        """Return a `Seq` of at most the first **n** elements.

        Raises:
            ValueError: If **n** is negative.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Seq("abcdef").take(3)
        Seq('a', 'b', 'c')

        ```
        """
        _check_count("take", n)
        return Seq(Sliced(self._inner, range(min(n, len(self._inner)))))

    def skip(self, n: int) -> Seq[T]:
        """Return a `Seq` without the first **n** elements.

        Raises:
            ValueError: If **n** is negative.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Seq("abcdef").skip(4)
        Seq('e', 'f')

        ```
        """
        _check_count("skip", n)
        return Seq(Sliced(self._inner, range(min(n, len(self._inner)), len(self._inner))))

    def filter(self, func: Callable[[T], bool]) -> Iter[T]:
        """Keep only the elements for which **func** returns `True`.

        The number of remaining elements is unknown until they are all tested, so this returns a forward-only `Iter`.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Seq(range(6)).filter(lambda x: x % 2 == 1).collect()
        Seq(1, 3, 5)

        ```
        """
        return self.iter().filter(func)

    def chain(self, *others: Iterable[T]) -> Iter[T]:
        """Concatenate zero or more iterables after this one, returning a forward-only `Iter`.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Seq([1]).chain([2], (3,)).collect()
        Seq(1, 2, 3)

        ```
        """
        return self.iter().chain(*others)

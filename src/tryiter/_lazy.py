from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from functools import partial
from typing import TYPE_CHECKING, Any, overload

import cytoolz as cz
import more_itertools as mit

from ._core import CommonBase, get_config
from ._results import NONE, Option, Some
from ._types import Enumerated
from .traits import TryIterator

if TYPE_CHECKING:
    from ._eager import Seq

_EXHAUSTED = object()


def _check_count(name: str, n: int) -> None:
    if n < 0:
        msg = f"`{name}` expects a non-negative count, got {n}"
        raise ValueError(msg)


def _check_step(step: int) -> None:
    if step <= 0:
        msg = f"`step_by` expects a strictly positive step, got {step}"
        raise ValueError(msg)


class Iter[T](CommonBase[Iterator[T]], Iterator[T], TryIterator[T]):
    """A lazy, single-pass, forward-only `Iterator` wrapper.

    Every adapter returns a new `Iter` over the underlying iterator, and nothing is computed until elements are pulled.

    The fallible scans (`try_all`, `try_any`, `try_position`, `try_find`) pull elements from the `Iter` itself: once a scan stops, the `Iter` resumes right after the last examined element.

    `Iter` can't be searched from its end, since it has no known length. Use `Iter.collect()` to get a `Seq` first.

    Args:
        data (Iterable[T]): Any iterable, which will be iterated over.

    Example:
    ```python
    >>> import tryiter as ti
    >>> it = ti.Iter(range(6))
    >>> it.try_any(lambda x: ti.Ok(x >= 2))
    Ok(True)
    >>> it.next()
    Some(3)
    >>> it.collect()
    Seq(4, 5)

    ```
    """

    _inner: Iterator[T]

    __slots__ = ()

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return next(self._inner)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def _iter[U](self, factory: Callable[[Iterator[T]], Iterable[U]]) -> Iter[U]:
        return Iter(factory(self._inner))

    @staticmethod
    def empty() -> Iter[Any]:
        """Create an `Iter` yielding nothing.

        Returns:
            Iter[Any]: An exhausted iterator.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Iter.empty().next()
        NONE

        ```
        """
        return Iter(())

    @staticmethod
    def once[U](value: U) -> Iter[U]:
        """Create an `Iter` yielding **value** exactly once.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Iter.once(42).try_position(lambda x: ti.Ok(x == 42))
        Ok(Some(0))

        ```
        """
        return Iter((value,))

    def next(self) -> Option[T]:
        """Return the next element in the iterator, wrapped in an `Option`.

        Returns:
            Option[T]: `Some[T]`, or `NONE` if the iterator is exhausted.

        Example:
        ```python
        >>> import tryiter as ti
        >>> it = ti.Iter([1, None])
        >>> it.next()
        Some(1)
        >>> it.next()
        Some(None)
        >>> it.next()
        NONE

        ```
        """
        item = next(self._inner, _EXHAUSTED)
        if item is _EXHAUSTED:
            return NONE
        return Some(item)

    def collect(self) -> Seq[T]:
        """Consume the iterator into a `Seq`.

        This is the way to get an exact length and reverse traversal from a lazy source, as required by `try_rposition`.

        Returns:
            Seq[T]: A `Seq` over a tuple of the remaining elements.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Iter(x for x in "abca").collect().try_rposition(lambda c: ti.Ok(c == "a"))
        Ok(Some(3))

        ```
        """
        from ._eager import Seq

        return Seq(tuple(self._inner))

    def length(self) -> int:
        """Return the number of remaining elements, consuming the iterator.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Iter(range(5)).filter(lambda x: x % 2 == 0).length()
        3

        ```
        """
        return cz.itertoolz.count(self._inner)

    def map[R](self, func: Callable[[T], R]) -> Iter[R]:
        """Apply **func** to each element, lazily.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Iter(["1", "2", "x"]).map(str.isdigit).try_all(ti.Ok)
        Ok(False)

        ```
        """
        return self._iter(partial(map, func))

    def filter(self, func: Callable[[T], bool]) -> Iter[T]:
        """Keep only the elements for which **func** returns `True`.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Iter(range(10)).filter(lambda x: x % 3 == 0).try_position(lambda x: ti.Ok(x > 5))
        Ok(Some(2))

        ```
        """
        return self._iter(partial(filter, func))

    def chain(self, *others: Iterable[T]) -> Iter[T]:
        """Concatenate zero or more iterables after this one, any of which may be infinite.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Iter([1, 2]).chain([3], itertools.count(4)).try_position(lambda x: ti.Ok(x == 10))
        Ok(Some(9))

        ```
        """

        def _chain(data: Iterator[T]) -> Iterator[T]:
            return cz.itertoolz.concat((data, *others))

        return self._iter(_chain)

    @overload
    def zip[T1](self, other: Iterable[T1], /) -> Iter[tuple[T, T1]]: ...
    @overload
    def zip(self, *others: Iterable[Any]) -> Iter[tuple[Any, ...]]: ...
    def zip(self, *others: Iterable[Any]) -> Iter[tuple[Any, ...]]:
        """Yield tuples of same-position elements, stopping at the shortest iterable.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Iter("abc").zip([1, 2, 3]).try_find(lambda p: ti.Ok(p[1] > 1))
        Ok(Some(('b', 2)))

        ```
        """

        def _zip(data: Iterator[T]) -> Iterator[tuple[Any, ...]]:
            return zip(data, *others, strict=False)

        return self._iter(_zip)

    def enumerate(self) -> Iter[Enumerated[T]]:
        """Return an `Iter` of `Enumerated(idx, value)` pairs, starting at 0.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Iter(["a", "b"]).enumerate().collect()
        Seq((0, 'a'), (1, 'b'))

        ```
        """
        return self._iter(enumerate).map(lambda x: Enumerated(*x))

    def step_by(self, step: int) -> Iter[T]:
        """Yield every **step**-th element, starting with the first one.

        Raises:
            ValueError: If **step** is not strictly positive.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Iter(range(10)).step_by(3).collect()
        Seq(0, 3, 6, 9)

        ```
        """
        _check_step(step)
        return self._iter(lambda data: itertools.islice(data, 0, None, step))

    def take(self, n: int) -> Iter[T]:
        """Yield at most the first **n** elements.

        Raises:
            ValueError: If **n** is negative.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Iter(itertools.count()).take(3).try_all(lambda x: ti.Ok(x < 3))
        Ok(True)

        ```
        """
        _check_count("take", n)
        return self._iter(lambda data: itertools.islice(data, n))

    def skip(self, n: int) -> Iter[T]:
        """Skip the first **n** elements, lazily.

        Raises:
            ValueError: If **n** is negative.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Iter("abcd").skip(2).collect()
        Seq('c', 'd')

        ```
        """
        _check_count("skip", n)
        return self._iter(lambda data: itertools.islice(data, n, None))

    def rev(self) -> Iter[T]:
        """Return an `Iter` over the remaining elements in reverse order.

        Note:
            Since an `Iterator` can't be traversed from its end, this must consume all the remaining elements first.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Iter([1, 2, 3]).rev().collect()
        Seq(3, 2, 1)

        ```
        """
        return self._iter(mit.always_reversible)

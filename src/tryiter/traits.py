"""Public mixins traits granting the fallible scans to internal tryiter types, and custom user implementations.

`TryIterator` only depends on `__iter__`, and `TryDoubleEndedIterator` on `__iter__`, `__len__` and `__reversed__`, so they can be safely added to any already existing class providing these methods.

Example:
```python
>>> from collections import deque
>>> import tryiter as ti
>>> from tryiter import traits
>>> class Tasks(deque[str], traits.TryDoubleEndedIterator[str]):
...     pass
>>>
>>> def is_done(task: str) -> ti.Result[bool, str]:
...     return ti.Ok(task.endswith("!")) if task else ti.Err("empty task")
>>> tasks = Tasks(["write!", "test", "ship!", "rest"])
>>> tasks.try_rposition(is_done)
Ok(Some(2))
>>> tasks.try_all(is_done)
Ok(False)
>>> Tasks(["write!", ""]).try_any(is_done)
Ok(True)
>>> Tasks(["", "write!"]).try_any(is_done)
Err('empty task')

```
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from . import _scan

if TYPE_CHECKING:
    from ._results import Option, Result
    from ._types import TryPredicate

__all__ = ["TryDoubleEndedIterator", "TryIterator"]


class TryIterator[T](Iterable[T]):
    """Fallible scans for anything that can be iterated forward.

    If `__iter__` returns the instance itself (or the same underlying iterator on each call), the scans advance it by exactly the number of elements examined.
    """

    __slots__ = ()

    def try_all[E](self, predicate: TryPredicate[T, E]) -> Result[bool, E]:
        """Tests if every element matches a fallible **predicate**, stopping at the first `Ok(False)` or `Err`.

        See `tryiter.try_all()` for details.

        Args:
            predicate (TryPredicate[T, E]): Function returning `Ok(bool)`, or `Err(E)` on failure.

        Returns:
            Result[bool, E]: `Ok(True)` if all elements match (or there is none), `Ok(False)`, or the first `Err`.

        Example:
        ```python
        >>> import tryiter as ti
        >>> def positive(x: int) -> ti.Result[bool, str]:
        ...     return ti.Ok(x > 0) if x != 0 else ti.Err("zero")
        >>> ti.Iter([1, 2, 3]).try_all(positive)
        Ok(True)
        >>> ti.Iter([1, 0, -1]).try_all(positive)
        Err('zero')
        >>> ti.Iter([1, -1, 0]).try_all(positive)
        Ok(False)

        ```
        """
        return _scan.try_all(self, predicate)

    def try_any[E](self, predicate: TryPredicate[T, E]) -> Result[bool, E]:
        """Tests if any element matches a fallible **predicate**, stopping at the first `Ok(True)` or `Err`.

        See `tryiter.try_any()` for details.

        Args:
            predicate (TryPredicate[T, E]): Function returning `Ok(bool)`, or `Err(E)` on failure.

        Returns:
            Result[bool, E]: `Ok(True)` at the first match, `Ok(False)` if none matched (or there is none), or the first `Err`.

        Example:
        ```python
        >>> import tryiter as ti
        >>> def negative(x: int) -> ti.Result[bool, str]:
        ...     return ti.Ok(x < 0) if x != 0 else ti.Err("zero")
        >>> ti.Iter([1, -2, 0]).try_any(negative)
        Ok(True)
        >>> ti.Iter([1, 0, -2]).try_any(negative)
        Err('zero')
        >>> ti.Iter[int].empty().try_any(negative)
        Ok(False)

        ```
        """
        return _scan.try_any(self, predicate)

    def try_position[E](self, predicate: TryPredicate[T, E]) -> Result[Option[int], E]:
        """Searches for the index of the first element matching a fallible **predicate**.

        See `tryiter.try_position()` for details.

        Args:
            predicate (TryPredicate[T, E]): Function returning `Ok(bool)`, or `Err(E)` on failure.

        Returns:
            Result[Option[int], E]: `Ok(Some(index))`, `Ok(NONE)` if none matched, or the first `Err`.

        Example:
        ```python
        >>> import tryiter as ti
        >>> it = ti.Iter(["a", "b", "c", "d"])
        >>> it.try_position(lambda s: ti.Ok(s == "b"))
        Ok(Some(1))
        >>> # the iterator was advanced past "b"
        >>> it.try_position(lambda s: ti.Ok(s == "d"))
        Ok(Some(1))

        ```
        """
        return _scan.try_position(self, predicate)

    def try_find[E](self, predicate: TryPredicate[T, E]) -> Result[Option[T], E]:
        """Searches for the first element matching a fallible **predicate**.

        See `tryiter.try_find()` for details.

        Args:
            predicate (TryPredicate[T, E]): Function returning `Ok(bool)`, or `Err(E)` on failure.

        Returns:
            Result[Option[T], E]: `Ok(Some(element))`, `Ok(NONE)` if none matched, or the first `Err`.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Iter(["x", "yy", "zzz"]).try_find(lambda s: ti.Ok(len(s) > 1))
        Ok(Some('yy'))

        ```
        """
        return _scan.try_find(self, predicate)


class TryDoubleEndedIterator[T](TryIterator[T]):
    """Fallible scans for anything that can also be traversed from its end and knows its exact length.

    Adds `try_rposition` to the `TryIterator` scans.

    Subclasses must implement `__len__` and `__reversed__`, or inherit them (e.g. from `collections.abc.Sequence`).
    """

    __slots__ = ()

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def __reversed__(self) -> Iterator[T]: ...

    def try_rposition[E](self, predicate: TryPredicate[T, E]) -> Result[Option[int], E]:
        """Searches for the index of the last element matching a fallible **predicate**.

        Elements are examined from the last to the first, and the index returned counts from the start.

        See `tryiter.try_rposition()` for details.

        Args:
            predicate (TryPredicate[T, E]): Function returning `Ok(bool)`, or `Err(E)` on failure.

        Returns:
            Result[Option[int], E]: `Ok(Some(index))`, `Ok(NONE)` if none matched, or the first `Err` met going backwards.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Seq("abab").try_rposition(lambda c: ti.Ok(c == "a"))
        Ok(Some(2))
        >>> ti.Seq("abab").try_rposition(lambda c: ti.Ok(c == "z"))
        Ok(NONE)

        ```
        """
        return _scan.try_rposition(self, predicate)

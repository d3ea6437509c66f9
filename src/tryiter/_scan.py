"""Fallible, short-circuiting scans over any iterable.

Every function here takes a predicate returning `Result[bool, E]` instead of a plain `bool`.

The first `Err` returned by the predicate stops the scan and is returned as is: no further element is pulled from the iterable, and the error value is never inspected nor wrapped.

When **data** is an `Iterator`, it is advanced by exactly the number of elements examined, and can still be used afterwards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._results import NONE, Err, Ok, Option, Result, Some

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._types import SizedReversible, TryPredicate


def _not_a_result(outcome: object) -> TypeError:
    msg = f"fallible predicates must return `Ok` or `Err`, got {outcome!r}"
    return TypeError(msg)


def try_all[T, E](data: Iterable[T], predicate: TryPredicate[T, E]) -> Result[bool, E]:
    """Tests if every element of **data** matches a fallible **predicate**.

    Stops at the first `Ok(False)` or `Err`.

    An empty iterable returns `Ok(True)`, without calling **predicate**.

    Args:
        data (Iterable[T]): The elements to scan, in order.
        predicate (TryPredicate[T, E]): Function returning `Ok(bool)`, or `Err(E)` on failure.

    Returns:
        Result[bool, E]: `Ok(True)` if all elements match, `Ok(False)` at the first one that does not, or the first `Err`.

    Example:
    ```python
    >>> import tryiter as ti
    >>> def is_foo(x: str | int) -> ti.Result[bool, int]:
    ...     return ti.Err(x) if isinstance(x, int) else ti.Ok(x == "foo")
    >>> ti.try_all(["foo", "foo", "foo"], is_foo)
    Ok(True)
    >>> ti.try_all(["foo", 4444, "foo"], is_foo)
    Err(4444)
    >>> ti.try_all(["foo", "bar", 4444], is_foo)
    Ok(False)
    >>> ti.try_all([], is_foo)
    Ok(True)

    ```
    """
    for item in data:
        match predicate(item):
            case Ok(matched):
                if not matched:
                    return Ok(False)
            case Err(error):
                return Err(error)
            case outcome:
                raise _not_a_result(outcome)
    return Ok(True)


def try_any[T, E](data: Iterable[T], predicate: TryPredicate[T, E]) -> Result[bool, E]:
    """Tests if any element of **data** matches a fallible **predicate**.

    Stops at the first `Ok(True)` or `Err`.

    An empty iterable returns `Ok(False)`, without calling **predicate**.

    Args:
        data (Iterable[T]): The elements to scan, in order.
        predicate (TryPredicate[T, E]): Function returning `Ok(bool)`, or `Err(E)` on failure.

    Returns:
        Result[bool, E]: `Ok(True)` at the first match, `Ok(False)` if none matched, or the first `Err`.

    Example:
    ```python
    >>> import tryiter as ti
    >>> def is_bar(x: str | int) -> ti.Result[bool, int]:
    ...     return ti.Err(x) if isinstance(x, int) else ti.Ok(x == "bar")
    >>> ti.try_any(["foo", "ayy", "bar"], is_bar)
    Ok(True)
    >>> ti.try_any(["foo", 4444, "bar"], is_bar)
    Err(4444)
    >>> ti.try_any(["bar", 4444], is_bar)
    Ok(True)
    >>> ti.try_any([], is_bar)
    Ok(False)

    ```
    """
    for item in data:
        match predicate(item):
            case Ok(matched):
                if matched:
                    return Ok(True)
            case Err(error):
                return Err(error)
            case outcome:
                raise _not_a_result(outcome)
    return Ok(False)


def try_position[T, E](
    data: Iterable[T], predicate: TryPredicate[T, E]
) -> Result[Option[int], E]:
    """Searches for the index of the first element of **data** matching a fallible **predicate**.

    Indices start at 0 and count every examined element, whatever the predicate returned for it.

    Args:
        data (Iterable[T]): The elements to scan, in order.
        predicate (TryPredicate[T, E]): Function returning `Ok(bool)`, or `Err(E)` on failure.

    Returns:
        Result[Option[int], E]: `Ok(Some(index))` at the first match, `Ok(NONE)` if none matched, or the first `Err`.

    Example:
    ```python
    >>> import tryiter as ti
    >>> def is_bar(x: str | int) -> ti.Result[bool, int]:
    ...     return ti.Err(x) if isinstance(x, int) else ti.Ok(x == "bar")
    >>> ti.try_position(["foo", "ayy", "bar"], is_bar)
    Ok(Some(2))
    >>> ti.try_position(["foo", 8888, "bar"], is_bar)
    Err(8888)
    >>> ti.try_position(["foo", "ayy"], is_bar)
    Ok(NONE)

    ```
    """
    for idx, item in enumerate(data):
        match predicate(item):
            case Ok(matched):
                if matched:
                    return Ok(Some(idx))
            case Err(error):
                return Err(error)
            case outcome:
                raise _not_a_result(outcome)
    return Ok(NONE)


def try_rposition[T, E](
    data: SizedReversible[T], predicate: TryPredicate[T, E]
) -> Result[Option[int], E]:
    """Searches for the index of the last element of **data** matching a fallible **predicate**.

    **data** is scanned from its end, but the returned index counts from its start.

    **data** must support both `len()` and `reversed()`, so that indices are computed from the known length, without materializing anything.

    Collect a lazy `Iterator` first (e.g. with `Iter.collect()`) to search it from the end.

    Args:
        data (SizedReversible[T]): The elements to scan, from last to first.
        predicate (TryPredicate[T, E]): Function returning `Ok(bool)`, or `Err(E)` on failure.

    Returns:
        Result[Option[int], E]: `Ok(Some(index))` at the last match, `Ok(NONE)` if none matched, or the first `Err` met while going backwards.

    Raises:
        TypeError: If **data** has no length or can't be reversed. **predicate** is never called in that case.

    Example:
    ```python
    >>> import tryiter as ti
    >>> def is_foo(x: str | int) -> ti.Result[bool, int]:
    ...     return ti.Err(x) if isinstance(x, int) else ti.Ok(x == "foo")
    >>> ti.try_rposition(["foo", "ayy", "bar"], is_foo)
    Ok(Some(0))
    >>> ti.try_rposition(["foo", "ayy", "foo"], is_foo)
    Ok(Some(2))
    >>> # going backwards, 9999 is met before "foo"
    >>> ti.try_rposition(["foo", 9999, "bar"], is_foo)
    Err(9999)
    >>> ti.try_rposition(iter(["foo"]), is_foo)
    Traceback (most recent call last):
        ...
    TypeError: try_rposition requires an iterable supporting both len() and reversed(), got list_iterator

    ```
    """
    try:
        length = len(data)
        backwards = reversed(data)
    except TypeError as e:
        msg = f"try_rposition requires an iterable supporting both len() and reversed(), got {type(data).__name__}"
        raise TypeError(msg) from e

    for idx, item in zip(range(length - 1, -1, -1), backwards, strict=False):
        match predicate(item):
            case Ok(matched):
                if matched:
                    return Ok(Some(idx))
            case Err(error):
                return Err(error)
            case outcome:
                raise _not_a_result(outcome)
    return Ok(NONE)


def try_find[T, E](data: Iterable[T], predicate: TryPredicate[T, E]) -> Result[Option[T], E]:
    """Searches for the first element of **data** matching a fallible **predicate**.

    Args:
        data (Iterable[T]): The elements to scan, in order.
        predicate (TryPredicate[T, E]): Function returning `Ok(bool)`, or `Err(E)` on failure.

    Returns:
        Result[Option[T], E]: `Ok(Some(element))` at the first match, `Ok(NONE)` if none matched, or the first `Err`.

    Example:
    ```python
    >>> import tryiter as ti
    >>> def is_even(s: str) -> ti.Result[bool, str]:
    ...     return ti.Ok(int(s) % 2 == 0) if s.isdigit() else ti.Err(f"not a number: {s!r}")
    >>> ti.try_find(["1", "3", "4", "5"], is_even)
    Ok(Some('4'))
    >>> ti.try_find(["1", "3", "x", "4"], is_even)
    Err("not a number: 'x'")
    >>> ti.try_find(["1", "3"], is_even)
    Ok(NONE)

    ```
    """
    for item in data:
        match predicate(item):
            case Ok(matched):
                if matched:
                    return Ok(Some(item))
            case Err(error):
                return Err(error)
            case outcome:
                raise _not_a_result(outcome)
    return Ok(NONE)

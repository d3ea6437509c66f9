from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Never, TypeIs, cast

from ._option import NONE, Option, Some


class ResultUnwrapError(RuntimeError): ...


class Result[T, E](ABC):
    """Outcome of a fallible computation, either `Ok(value)` or `Err(error)`.

    This is what a fallible predicate returns for each element, and what every fallible scan returns.

    The error type `E` is chosen by the caller and is never inspected.
    """

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Ok."""
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Err."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained Ok value, or raises ResultUnwrapError if the result is Err.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Ok(2).unwrap()
        2
        >>> ti.Err("boom").unwrap()
        Traceback (most recent call last):
            ...
        tryiter._results._result.ResultUnwrapError: called `unwrap` on Err: 'boom'

        ```
        """
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """Returns the contained Err value, or raises ResultUnwrapError if the result is Ok."""
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained Ok value, or raises ResultUnwrapError with **msg** if the result is Err.

        Args:
            msg (str): The message to display if the result is Err.

        Returns:
            T: The contained Ok value.

        Raises:
            ResultUnwrapError: If the result is Err, with the provided message and error.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Err[bool, int](4444).expect("scan failed")
        Traceback (most recent call last):
            ...
        tryiter._results._result.ResultUnwrapError: scan failed: 4444

        ```
        """
        if self.is_ok():
            return self.unwrap()
        msg = f"{msg}: {self.unwrap_err()}"
        raise ResultUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained Ok value or **default**.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Ok(True).unwrap_or(False)
        True
        >>> ti.Err("io").unwrap_or(False)
        False

        ```
        """
        return self.unwrap() if self.is_ok() else default

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """Maps a Result[T, E] to Result[U, E] by applying **f** to a contained Ok value, leaving Err untouched.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Ok(2).map(lambda x: x * 2)
        Ok(4)
        >>> ti.Err("nope").map(lambda x: x * 2)
        Err('nope')

        ```
        """
        if self.is_ok():
            return Ok(f(self.unwrap()))
        return cast(Result[U, E], self)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """Maps a Result[T, E] to Result[T, F] by applying **f** to a contained Err value, leaving Ok untouched.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Err(404).map_err(str)
        Err('404')

        ```
        """
        if self.is_err():
            return Err(f(self.unwrap_err()))
        return cast(Result[T, F], self)

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Calls **f** with the Ok value, otherwise returns the Err untouched.

        Example:
        ```python
        >>> import tryiter as ti
        >>> def half(x: int) -> ti.Result[int, str]:
        ...     return ti.Ok(x // 2) if x % 2 == 0 else ti.Err(f"{x} is odd")
        >>> ti.Ok(8).and_then(half).and_then(half)
        Ok(2)
        >>> ti.Ok(6).and_then(half).and_then(half)
        Err('3 is odd')

        ```
        """
        if self.is_ok():
            return f(self.unwrap())
        return cast(Result[U, E], self)

    def ok(self) -> Option[T]:
        """Converts the Result into an Option, mapping Ok(v) to Some(v) and Err(e) to NONE.

        Example:
        ```python
        >>> import tryiter as ti
        >>> ti.Ok(1).ok()
        Some(1)
        >>> ti.Err(1).ok()
        NONE

        ```
        """
        if self.is_ok():
            return Some(self.unwrap())
        return NONE

    def err(self) -> Option[E]:
        """Converts the Result into an Option, mapping Err(e) to Some(e) and Ok(v) to NONE."""
        if self.is_err():
            return Some(self.unwrap_err())
        return NONE


@dataclass(slots=True, repr=False)
class Ok[T, E](Result[T, E]):
    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        raise ResultUnwrapError("called `unwrap_err` on Ok")


@dataclass(slots=True, repr=False)
class Err[T, E](Result[T, E]):
    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        msg = f"called `unwrap` on Err: {self.error!r}"
        raise ResultUnwrapError(msg)

    def unwrap_err(self) -> E:
        return self.error

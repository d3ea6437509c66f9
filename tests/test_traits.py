"""Tests for granting the fallible scans to custom classes."""

from collections.abc import Iterator, Sequence

import pytest

import tryiter as ti
from tryiter import traits


class Countdown(traits.TryIterator[int]):
    """Forward-only source, consumed by the scans."""

    def __init__(self, start: int) -> None:
        self.current = start

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if self.current <= 0:
            raise StopIteration
        self.current -= 1
        return self.current + 1


class Ring(Sequence[str], traits.TryDoubleEndedIterator[str]):
    """Sized, reversible source, inheriting `__reversed__` from `Sequence`."""

    def __init__(self, *names: str) -> None:
        self._names = names

    def __len__(self) -> int:
        return len(self._names)

    def __getitem__(self, index: int) -> str:  # type: ignore[override]
        return self._names[index]


def _threshold(limit: int):  # noqa: ANN202
    def _predicate(x: int) -> ti.Result[bool, str]:
        if x == 0:
            return ti.Err("zero")
        return ti.Ok(x <= limit)

    return _predicate


def test_forward_trait_consumes() -> None:
    """Test a custom iterator is advanced by exactly the examined elements."""
    countdown = Countdown(10)
    assert countdown.try_position(_threshold(7)) == ti.Ok(ti.Some(3))
    assert countdown.current == 6
    assert countdown.try_all(_threshold(6)) == ti.Ok(True)
    assert countdown.current == 0
    assert countdown.try_any(_threshold(100)) == ti.Ok(False)


def test_forward_trait_find() -> None:
    """Test try_find on a custom iterator."""
    assert Countdown(5).try_find(lambda x: ti.Ok(x % 2 == 0)) == ti.Ok(ti.Some(4))


def test_double_ended_trait() -> None:
    """Test try_rposition on a custom sequence."""
    ring = Ring("ada", "bob", "ada", "cy")
    assert ring.try_rposition(lambda s: ti.Ok(s == "ada")) == ti.Ok(ti.Some(2))
    assert ring.try_position(lambda s: ti.Ok(s == "ada")) == ti.Ok(ti.Some(0))
    assert Ring().try_rposition(lambda _: ti.Err("never")) == ti.Ok(ti.NONE)


def test_double_ended_trait_requires_len() -> None:
    """Test the double-ended trait can't be used without an exact length."""

    class NoLen(traits.TryDoubleEndedIterator[int]):
        def __iter__(self) -> Iterator[int]:
            return iter(())

    with pytest.raises(TypeError):
        NoLen()  # type: ignore[abstract]

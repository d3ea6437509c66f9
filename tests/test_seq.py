"""Tests for `Seq`, its reverse search and capability-preserving adapters."""

import pytest

import tryiter as ti


def _is(target: str):  # noqa: ANN202
    def _predicate(x: str | int) -> ti.Result[bool, int]:
        if isinstance(x, int):
            return ti.Err(x)
        return ti.Ok(x == target)

    return _predicate


def test_try_rposition() -> None:
    """Test reverse search on Seq."""
    assert ti.Seq(["foo", "ayy", "bar"]).try_rposition(_is("foo")) == ti.Ok(ti.Some(0))
    assert ti.Seq(["foo", 9999, "bar"]).try_rposition(_is("foo")) == ti.Err(9999)
    assert ti.Seq(["foo", 9999, "bar"]).try_rposition(_is("bar")) == ti.Ok(ti.Some(2))


def test_scanning_does_not_consume() -> None:
    """Test a Seq can be scanned repeatedly."""
    seq = ti.Seq(("a", "b", "c"))
    assert seq.try_position(_is("b")) == ti.Ok(ti.Some(1))
    assert seq.try_position(_is("b")) == ti.Ok(ti.Some(1))
    assert seq.try_all(lambda x: ti.Ok(x in "abc")) == ti.Ok(True)
    assert len(seq) == 3


def test_map_keeps_reverse_search_lazy() -> None:
    """Test mapped Seq is searched backwards, computing only visited elements."""
    computed: list[int] = []

    def _double(x: int) -> int:
        computed.append(x)
        return x * 2

    seq = ti.Seq(range(10)).map(_double)
    assert seq.try_rposition(lambda x: ti.Ok(x < 14)) == ti.Ok(ti.Some(6))
    assert computed == [9, 8, 7, 6]


def test_enumerate_indices() -> None:
    """Test enumerated pairs keep indices from the start while searching backwards."""
    pairs = ti.Seq("abcab").enumerate()
    assert pairs.try_rposition(lambda p: ti.Ok(p.value == "a")) == ti.Ok(ti.Some(3))
    assert pairs[-1] == ti.Enumerated(4, "b")


def test_rev() -> None:
    """Test reverse search on a reversed Seq reports indices of the reversed order."""
    rev = ti.Seq(["x", "a", "y", "a", "z"]).rev()
    assert list(rev) == ["z", "a", "y", "a", "x"]
    assert rev.try_rposition(_is("a")) == ti.Ok(ti.Some(3))
    assert rev.try_position(_is("a")) == ti.Ok(ti.Some(1))
    assert rev[0] == "z"


def test_zip_truncates() -> None:
    """Test zipped Seq length is the shortest one, from both ends."""
    zipped = ti.Seq("abcd").zip([1, 2, 3])
    assert len(zipped) == 3
    assert list(reversed(zipped)) == [("c", 3), ("b", 2), ("a", 1)]
    assert zipped.try_rposition(lambda p: ti.Ok(p[0] == "a")) == ti.Ok(ti.Some(0))


def test_bounded_adapters() -> None:
    """Test take, skip and step_by keep exact lengths and original-order indices."""
    seq = ti.Seq(range(10))
    assert list(seq.take(3)) == [0, 1, 2]
    assert list(seq.take(30)) == list(range(10))
    assert list(seq.skip(7)) == [7, 8, 9]
    assert list(seq.skip(30)) == []
    assert list(seq.step_by(3)) == [0, 3, 6, 9]
    assert seq.step_by(3).try_rposition(lambda x: ti.Ok(x < 5)) == ti.Ok(ti.Some(1))
    assert seq.skip(2).take(5).try_rposition(lambda x: ti.Ok(x % 2 == 0)) == ti.Ok(
        ti.Some(4)
    )


@pytest.mark.parametrize(
    ("method", "arg"), [("step_by", 0), ("take", -1), ("skip", -1)]
)
def test_invalid_counts(method: str, arg: int) -> None:
    """Test invalid adapter arguments are rejected."""
    with pytest.raises(ValueError, match="expects"):
        getattr(ti.Seq(range(3)), method)(arg)


def test_length_losing_adapters_return_iter() -> None:
    """Test filter and chain drop to a forward-only Iter."""
    seq = ti.Seq([1, 2, 3])
    assert isinstance(seq.filter(lambda x: x > 1), ti.Iter)
    assert isinstance(seq.chain([4]), ti.Iter)
    assert seq.chain([4]).try_position(lambda x: ti.Ok(x == 4)) == ti.Ok(ti.Some(3))


def test_once_and_empty() -> None:
    """Test single-element and empty Seq."""
    assert ti.Seq.once("foo").try_rposition(_is("foo")) == ti.Ok(ti.Some(0))
    assert ti.Seq.once(5).try_rposition(_is("foo")) == ti.Err(5)
    assert ti.Seq.empty().try_rposition(_is("foo")) == ti.Ok(ti.NONE)
    assert ti.Seq.empty().try_all(_is("foo")) == ti.Ok(True)


def test_sequence_protocol() -> None:
    """Test Seq behaves as a standard sequence."""
    seq = ti.Seq.from_(x for x in "abc")
    assert seq.inner() == ("a", "b", "c")
    assert seq[1] == "b"
    assert "c" in seq
    assert seq.index("c") == 2
    assert list(seq[1:]) == ["b", "c"]
    assert seq[::-1].try_position(_is("a")) == ti.Ok(ti.Some(2))
    with pytest.raises(IndexError):
        seq.map(str.upper)[3]


def test_iter_from_seq_is_consumed() -> None:
    """Test Seq.iter() gives a forward Iter advanced by scans."""
    seq = ti.Seq([1, 2, 3, 4])
    it = seq.iter()
    assert it.try_any(lambda x: ti.Ok(x == 2)) == ti.Ok(True)
    assert list(it) == [3, 4]
    assert list(seq) == [1, 2, 3, 4]


def test_repr_truncation() -> None:
    """Test Seq representation honours the configured item limit."""
    from tryiter._core import get_config

    cfg = get_config()
    assert repr(ti.Seq([1, 2])) == "Seq(1, 2)"
    cfg.max_repr_items = 2
    try:
        assert repr(ti.Seq(range(5)).map(str)) == "Seq('0', '1', ...)"
    finally:
        cfg.reset()
    assert cfg.max_repr_items == 20

from collections.abc import Iterable, Iterator, Sized
from itertools import islice
from typing import Any


def iter_repr(data: Iterable[Any], max_items: int) -> str:
    if isinstance(data, Iterator) or not isinstance(data, Sized):
        return data.__repr__()
    shown = ", ".join(repr(item) for item in islice(data, max_items))
    suffix = ", ..." if len(data) > max_items else ""
    return shown + suffix

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ._format import iter_repr

_DEFAULT_MAX_REPR_ITEMS = 20


@dataclass(slots=True)
class Config:
    """Process-wide display settings for the `Iter` and `Seq` wrappers.

    Only representations are affected, never the behavior of the scans.

    Example:
    ```python
    >>> import tryiter as ti
    >>> from tryiter._core import get_config
    >>> cfg = get_config()
    >>> cfg.max_repr_items = 3
    >>> ti.Seq(range(10))
    Seq(0, 1, 2, ...)
    >>> cfg.reset()
    >>> ti.Seq(range(3))
    Seq(0, 1, 2)

    ```
    """

    max_repr_items: int = _DEFAULT_MAX_REPR_ITEMS
    """Number of elements shown in a `Seq` representation before truncating."""

    def iter_repr(self, data: Iterable[Any]) -> str:
        """Format **data** for a wrapper representation.

        Lazy iterators are shown as is, since formatting them would consume them.
        """
        return iter_repr(data, self.max_repr_items)

    def reset(self) -> None:
        """Restore the default settings."""
        self.max_repr_items = _DEFAULT_MAX_REPR_ITEMS


_CONFIG = Config()


def get_config() -> Config:
    return _CONFIG

"""Fallible, short-circuiting variants of `all`, `any`, and position searches.

The predicates return a `Result[bool, E]` instead of a `bool`: the first `Err` stops the scan and is handed back untouched.

Example:
```python
>>> import tryiter as ti
>>> def parse_flag(raw: str) -> ti.Result[bool, str]:
...     match raw:
...         case "yes":
...             return ti.Ok(True)
...         case "no":
...             return ti.Ok(False)
...         case _:
...             return ti.Err(f"invalid flag: {raw!r}")
>>> ti.try_all(["yes", "yes"], parse_flag)
Ok(True)
>>> ti.try_any(["no", "maybe", "yes"], parse_flag)
Err("invalid flag: 'maybe'")
>>> ti.Seq(["yes", "no", "yes", "no"]).try_rposition(parse_flag)
Ok(Some(2))

```
"""

from . import traits
from ._eager import Seq
from ._lazy import Iter
from ._results import (
    NONE,
    Err,
    NoneOption,
    Ok,
    Option,
    OptionUnwrapError,
    Result,
    ResultUnwrapError,
    Some,
)
from ._scan import try_all, try_any, try_find, try_position, try_rposition
from ._types import Enumerated, SizedReversible, TryPredicate

__all__ = [
    "NONE",
    "Enumerated",
    "Err",
    "Iter",
    "NoneOption",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Result",
    "ResultUnwrapError",
    "Seq",
    "SizedReversible",
    "Some",
    "TryPredicate",
    "traits",
    "try_all",
    "try_any",
    "try_find",
    "try_position",
    "try_rposition",
]

"""Compact rendering of values for failure messages.

Sequences render as ``[a,b]`` and mappings as ``{"k":v}`` without spaces,
strings are JSON-quoted, and any other value uses its repr, so a custom
__repr__ controls how a value appears in a report.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping

__all__ = ["Formatter", "stringify"]

type Formatter = Callable[[object], str]


def stringify(value: object) -> str:
    """Render value for a failure message."""
    match value:
        case str():
            return json.dumps(value)
        case list() | tuple():
            return "[" + ",".join(stringify(item) for item in value) + "]"
        case Mapping():
            entries = (f"{stringify(key)}:{stringify(item)}" for key, item in value.items())
            return "{" + ",".join(entries) + "}"
        case _:
            return repr(value)

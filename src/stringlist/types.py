"""Defines shared types for StringList."""

from collections.abc import Callable, Sequence
from enum import Enum

__all__ = ["NOT_FOUND", "FilterFunc", "ReplacementSyntax"]

NOT_FOUND = -1
"""Sentinel returned by lookups when no item matches."""

FilterFunc = Callable[[int, Sequence[str]], tuple[bool, str]]
"""
Signature of the callable accepted by `StringList.filter`.

The callable receives the current index and a read-only view of the full,
unfiltered sequence. It returns `(keep, value)`; `value` is appended to the
result when `keep` is true and may differ from the original item.
"""


class ReplacementSyntax(str, Enum):
    """The template syntax accepted by `StringList.replace_all_filter`."""

    PYTHON = "python"
    """Native `regex` templates: `\\1`, `\\g<1>`, `\\g<name>`."""

    DOLLAR = "dollar"
    """Dollar templates: `$1`, `${1}`, `$name`, `${name}` and `$$` for a literal dollar."""

"""
The StringList container.

StringList keeps its items in a plain Python list and layers convenience
operations on top: comprehension-style filtering, regex search and replace,
and simple sequence queries.

Cost notes:
- insert() and remove() shift every item after the affected slot, O(n).
- remove_unordered() moves the last item into the freed slot, O(1) once the
  item is found. Prefer it whenever item order does not matter.

The container has no internal locking. Wrap it in your own lock if several
threads mutate the same instance.
"""

import logging
from collections.abc import Iterable, Iterator

import regex

from .config import PatternSettings
from .errors import IndexRangeError, ReplacementTemplateError
from .patterns import build_replacement, compile_pattern, replace_all, resolve_flags
from .types import NOT_FOUND, FilterFunc

logger = logging.getLogger(__name__)

__all__ = ["StringList"]


def _require_str(value: object) -> str:
    if not isinstance(value, str):
        msg = f"StringList items must be str, not {type(value).__name__}"
        raise TypeError(msg)
    return value


class StringList:
    """
    An ordered, mutable list of strings with convenience operations.

    Attributes:
        items: The underlying list. Order is significant and duplicates are allowed.
        settings: Regex options used by match_filter() and replace_all_filter().
            Settings are not part of equality.

    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: Iterable[str] | None = None, *, settings: PatternSettings | None = None) -> None:
        """
        Create a list, empty unless initial items are given.

        Args:
            items: Optional initial values, copied in iteration order.
            settings: Regex options for the pattern filters. Defaults to PatternSettings().

        Raises:
            TypeError: If any initial value is not a str.

        """
        self.items: list[str] = [_require_str(item) for item in items] if items is not None else []
        self.settings = settings if settings is not None else PatternSettings()

    @classmethod
    def new(cls) -> "StringList":
        """Return a new empty list."""
        return cls()

    # --- Access ---

    def to_string(self) -> str:
        """Render the list as `["a","b"]`; an empty list renders as `[]`."""
        return "[" + ",".join(f'"{item}"' for item in self.items) + "]"

    def copy(self) -> "StringList":
        """Return an independent copy holding the same items in the same order."""
        duplicate = StringList(settings=self.settings)
        duplicate.items = list(self.items)
        return duplicate

    # --- Mutation ---

    def append(self, value: str) -> None:
        """Add a value to the end of the list."""
        self.items.append(_require_str(value))

    def extend(self, values: Iterable[str]) -> None:
        """Append each value in iteration order."""
        for value in values:
            self.append(value)

    def insert(self, value: str, index: int) -> None:
        """
        Insert a value so that it ends up at the given position.

        Items from `index` onwards move one place later. An index equal to the
        length appends. Negative indices are not counted from the end.

        Raises:
            IndexRangeError: If `index` is below 0 or above the length. The list
                is left untouched.

        """
        length = len(self.items)
        if index < 0 or index > length:
            logger.warning("Rejected insert of '%s' at index %d (length %d)", value, index, length)
            raise IndexRangeError(index, length)
        self.items.insert(index, _require_str(value))

    def remove(self, value: str) -> None:
        """Remove the first occurrence of a value, keeping the order of the rest. Absent values are ignored."""
        index = self.index_of(value)
        if index == NOT_FOUND:
            return
        del self.items[index]

    def remove_unordered(self, value: str) -> None:
        """
        Remove the first occurrence of a value by moving the last item into its slot.

        The order of the remaining items is not preserved. Absent values are ignored.
        """
        index = self.index_of(value)
        if index == NOT_FOUND:
            return
        last = self.items.pop()
        if index < len(self.items):
            self.items[index] = last

    def sort(self) -> None:
        """Sort the items in ascending code point order, in place."""
        self.items.sort()

    # --- Querying ---

    def index_of(self, value: str) -> int:
        """Return the index of the first item equal to `value`, or -1 if there is none."""
        for i, item in enumerate(self.items):
            if item == value:
                return i
        return NOT_FOUND

    def contains(self, value: str) -> bool:
        """Return True if any item equals `value`."""
        return self.index_of(value) != NOT_FOUND

    def is_equal(self, other: "StringList") -> bool:
        """Return True if both lists hold equal items at every position."""
        if len(self.items) != len(other.items):
            return False
        return all(a == b for a, b in zip(self.items, other.items, strict=True))

    def is_empty(self) -> bool:
        """Return True if the list holds no items."""
        return len(self.items) == 0

    def join(self, separator: str) -> str:
        """Concatenate the items with `separator` between consecutive items."""
        return separator.join(self.items)

    # --- Filtering ---

    def filter(self, func: FilterFunc) -> "StringList":
        """
        Build a new list by passing every index through a caller-supplied function.

        Works like a list comprehension that can filter and transform at once.
        `func` is called exactly once per index, in ascending order, with the
        index and a read-only snapshot of the original items. It returns
        `(keep, value)`; `value` is appended to the result when `keep` is true.

        Args:
            func: The filter function, see FilterFunc.

        Returns:
            A new StringList. This list is not modified.

        """
        snapshot = tuple(self.items)
        result = StringList(settings=self.settings)
        for i in range(len(snapshot)):
            keep, value = func(i, snapshot)
            if keep:
                result.append(value)
        logger.debug("filter kept %d of %d items", len(result.items), len(snapshot))
        return result

    def match_filter(self, pattern: str) -> "StringList":
        """
        Return a new list of the items in which `pattern` matches anywhere.

        Raises:
            PatternCompileError: If the pattern cannot be compiled.

        """
        compiled = compile_pattern(pattern, resolve_flags(self.settings))
        result = StringList(settings=self.settings)
        result.items = [item for item in self.items if compiled.search(item) is not None]
        logger.debug("match_filter '%s' kept %d of %d items", pattern, len(result.items), len(self.items))
        return result

    def replace_all_filter(self, pattern: str, replacement: str) -> "StringList":
        """
        Return a new list where every match of `pattern` in each item is replaced.

        The result has the same length as this list; items without a match are
        copied unchanged. The replacement may reference capture groups using the
        syntax selected by `settings.replacement_syntax`.
        An empty match directly after the previous match is not replaced, so
        `a*` over "baaac" with "-" gives "-b-c-".

        Raises:
            PatternCompileError: If the pattern cannot be compiled.
            ReplacementTemplateError: If a native template references a group
                the engine cannot resolve.

        """
        compiled = compile_pattern(pattern, resolve_flags(self.settings))
        repl = build_replacement(replacement, self.settings.replacement_syntax)
        try:
            replaced = [replace_all(compiled, repl, item) for item in self.items]
        except (regex.error, IndexError) as e:
            logger.warning("Invalid replacement template '%s' for pattern '%s': %s", replacement, pattern, e)
            raise ReplacementTemplateError(pattern, replacement, str(e)) from e

        result = StringList(settings=self.settings)
        result.items = replaced
        return result

    # --- Python protocols ---

    def __len__(self) -> int:
        """Return the number of items."""
        return len(self.items)

    def __iter__(self) -> Iterator[str]:
        """Iterate over the items in order."""
        return iter(self.items)

    def __getitem__(self, index: int | slice) -> "str | StringList":
        """Return one item, or a new StringList for a slice."""
        if isinstance(index, slice):
            result = StringList(settings=self.settings)
            result.items = self.items[index]
            return result
        return self.items[index]

    def __contains__(self, value: object) -> bool:
        """Support the `in` operator."""
        return isinstance(value, str) and self.contains(value)

    def __eq__(self, other: object) -> bool:
        """Compare element-wise with another StringList."""
        if not isinstance(other, StringList):
            return NotImplemented
        return self.is_equal(other)

    def __str__(self) -> str:
        """Return the same rendering as to_string()."""
        return self.to_string()

    def __repr__(self) -> str:
        """Return a developer-facing representation."""
        if self.settings == PatternSettings():
            return f"StringList({self.items!r})"
        return f"StringList({self.items!r}, settings={self.settings!r})"

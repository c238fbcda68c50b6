"""
Regular expression helpers for StringList.

All pattern work goes through the third-party `regex` engine. This module keeps
the seams to that engine in one place:

- compile_pattern(): Memoized compilation that reports bad syntax as PatternCompileError
- resolve_flags(): Translate PatternSettings into engine flags
- build_replacement(): Turn a replacement string into a template or an expansion callable
- replace_all(): Replace every match in a text, skipping empty matches that touch the previous match

Dollar templates (`$1`, `${name}`, `$$`) are expanded by a callable
rather than being rewritten into the engine's backslash syntax, so references
to missing or unmatched groups expand to an empty string instead of raising.

Usage example:
    >>> compiled = compile_pattern(r"(\\w+)@(\\w+)")
    >>> compiled.sub(build_replacement("$2 at $1", ReplacementSyntax.DOLLAR), "me@home")
    'home at me'
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

import regex

from .errors import PatternCompileError
from .types import ReplacementSyntax

if TYPE_CHECKING:
    from .config import PatternSettings

logger = logging.getLogger(__name__)

__all__ = [
    "GroupRef",
    "build_replacement",
    "clear_pattern_cache",
    "compile_pattern",
    "expand_dollar_template",
    "parse_dollar_template",
    "replace_all",
    "resolve_flags",
]

# Number of distinct (pattern, flags) pairs kept compiled
_PATTERN_CACHE_SIZE = 256


@dataclass(frozen=True)
class GroupRef:
    """A reference to a capture group inside a replacement template, by number or by name."""

    key: int | str


TemplatePart = str | GroupRef


def resolve_flags(settings: PatternSettings | None) -> int:
    """Return the `regex` flag bitmask described by the given settings."""
    if settings is None:
        return 0

    flags = 0
    if settings.ignore_case:
        flags |= regex.IGNORECASE
    if settings.multiline:
        flags |= regex.MULTILINE
    if settings.dotall:
        flags |= regex.DOTALL
    if settings.ascii_only:
        flags |= regex.ASCII
    return flags


@lru_cache(maxsize=_PATTERN_CACHE_SIZE)
def _compile_cached(pattern: str, flags: int) -> regex.Pattern:
    logger.debug("Compiling pattern '%s' with flags %d", pattern, flags)
    return regex.compile(pattern, flags)


def compile_pattern(pattern: str, flags: int = 0) -> regex.Pattern:
    """
    Compile a pattern with the `regex` engine, reusing earlier compilations.

    Args:
        pattern: The regular expression source.
        flags: A `regex` flag bitmask, usually from resolve_flags().

    Returns:
        The compiled pattern.

    Raises:
        PatternCompileError: If the engine rejects the pattern. The engine's
            `regex.error` is chained as the cause.

    """
    try:
        return _compile_cached(pattern, flags)
    except regex.error as e:
        logger.warning("Invalid regex pattern '%s': %s", pattern, e)
        raise PatternCompileError(pattern, str(e)) from e


def clear_pattern_cache() -> None:
    """Drop every memoized compiled pattern."""
    _compile_cached.cache_clear()


def _is_name_char(char: str) -> bool:
    return char == "_" or char.isalpha() or char.isdecimal()


def _extract_reference(template: str, start: int) -> tuple[GroupRef, int] | None:
    """
    Read a group reference that begins right after a `$`.

    Returns the reference and the index just past it, or None when the text
    after the `$` is not a well-formed reference.
    """
    pos = start
    braced = pos < len(template) and template[pos] == "{"
    if braced:
        pos += 1

    name_start = pos
    while pos < len(template) and _is_name_char(template[pos]):
        pos += 1
    name = template[name_start:pos]
    if not name:
        return None

    if braced:
        if pos >= len(template) or template[pos] != "}":
            return None
        pos += 1

    key: int | str = int(name) if name.isdecimal() and name.isascii() else name
    return GroupRef(key), pos


@lru_cache(maxsize=_PATTERN_CACHE_SIZE)
def parse_dollar_template(template: str) -> tuple[TemplatePart, ...]:
    """
    Split a dollar template into literal text and group references.

    `$$` yields a literal dollar sign. A `$` that does not introduce a
    well-formed reference (for example `$` at the end, `$-` or an unclosed
    `${1`) is kept as literal text.

    Args:
        template: The replacement template, e.g. `"${1}-$name"`.

    Returns:
        A tuple of literal strings and GroupRef objects, in template order.

    """
    parts: list[TemplatePart] = []
    literal: list[str] = []
    pos = 0
    while True:
        dollar = template.find("$", pos)
        if dollar < 0:
            literal.append(template[pos:])
            break
        literal.append(template[pos:dollar])
        pos = dollar + 1

        if pos < len(template) and template[pos] == "$":
            literal.append("$")
            pos += 1
            continue

        extracted = _extract_reference(template, pos)
        if extracted is None:
            literal.append("$")
            continue

        ref, pos = extracted
        if literal:
            parts.append("".join(literal))
            literal = []
        parts.append(ref)

    tail = "".join(literal)
    if tail:
        parts.append(tail)
    return tuple(part for part in parts if part != "")


def _group_text(match: regex.Match, key: int | str) -> str:
    if isinstance(key, int):
        if key > match.re.groups:
            return ""
    elif key not in match.re.groupindex:
        return ""
    return match.group(key) or ""


def expand_dollar_template(template: str) -> Callable[[regex.Match], str]:
    """
    Build a substitution callable that expands a dollar template for each match.

    References to groups that do not exist, or that did not participate in
    the match, expand to an empty string.
    """
    parts = parse_dollar_template(template)

    def _expand(match: regex.Match) -> str:
        return "".join(part if isinstance(part, str) else _group_text(match, part.key) for part in parts)

    return _expand


def build_replacement(replacement: str, syntax: ReplacementSyntax) -> str | Callable[[regex.Match], str]:
    """Return the replacement argument for `Pattern.sub` in the requested template syntax."""
    if syntax == ReplacementSyntax.DOLLAR:
        return expand_dollar_template(replacement)
    return replacement


def replace_all(compiled: regex.Pattern, replacement: str | Callable[[regex.Match], str], text: str) -> str:
    """
    Replace every non-overlapping match of `compiled` in `text`.

    An empty match that ends where the previous accepted match ended is
    ignored, so `a*` over "baaac" with "-" gives "-b-c-" rather than the
    "-b--c-" that `Pattern.sub` produces.

    Args:
        compiled: The compiled pattern.
        replacement: A native template or a callable from build_replacement().
        text: The text to rewrite.

    Raises:
        regex.error: If a native template references a group the pattern lacks.
            Only raised when at least one match is expanded.

    """
    pieces: list[str] = []
    copied_up_to = 0
    last_end: int | None = None
    for match in compiled.finditer(text):
        start, end = match.span()
        if last_end is not None and end <= last_end:
            continue
        pieces.append(text[copied_up_to:start])
        pieces.append(replacement(match) if callable(replacement) else match.expand(replacement))
        copied_up_to = end
        last_end = end

    if last_end is None:
        return text
    pieces.append(text[copied_up_to:])
    return "".join(pieces)

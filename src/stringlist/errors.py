"""Exceptions raised by StringList operations."""

__all__ = ["IndexRangeError", "PatternCompileError", "ReplacementTemplateError", "StringListError"]


class StringListError(Exception):
    """Base class for all errors raised by the stringlist package."""


class IndexRangeError(StringListError, IndexError):
    """
    Raised when an index falls outside the bounds accepted by an operation.

    Attributes:
        index: The rejected index.
        length: The length of the list at the time of the call.

    """

    def __init__(self, index: int, length: int) -> None:
        """Build the error message from the rejected index and the list length."""
        self.index = index
        self.length = length
        super().__init__(f"index {index} out of range for list of length {length} (valid range: 0..{length})")


class PatternCompileError(StringListError, ValueError):
    """
    Raised when a regular expression cannot be compiled.

    The underlying `regex.error` is chained as `__cause__` and its message is
    repeated verbatim after the offending pattern.

    Attributes:
        pattern: The pattern that failed to compile.

    """

    def __init__(self, pattern: str, reason: str) -> None:
        """Store the offending pattern alongside the engine's message."""
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid regex pattern '{pattern}': {reason}")


class ReplacementTemplateError(PatternCompileError):
    """
    Raised when a native replacement template is rejected during substitution.

    This happens for references the engine cannot resolve, such as `\\3` with
    only two groups. Dollar templates never raise this error.

    Attributes:
        pattern: The pattern the template was applied with.
        template: The rejected replacement template.

    """

    def __init__(self, pattern: str, template: str, reason: str) -> None:
        """Store the template next to the pattern and the engine's message."""
        self.template = template
        super().__init__(pattern, reason)

    def __str__(self) -> str:
        """Name the template rather than the pattern."""
        return f"Invalid replacement template '{self.template}' for pattern '{self.pattern}': {self.reason}"

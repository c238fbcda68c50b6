"""StringList: an ordered list of strings with filtering and regex conveniences."""

import importlib.metadata

from .config import PatternSettings, load_config
from .errors import IndexRangeError, PatternCompileError, ReplacementTemplateError, StringListError
from .string_list import StringList
from .types import NOT_FOUND, FilterFunc, ReplacementSyntax


def _get_version() -> str:
    """
    Retrieve the package version from metadata.

    Returns:
        The version string, or a development version if not installed.

    """
    try:
        return importlib.metadata.version("StringList")
    except importlib.metadata.PackageNotFoundError:
        # Fallback for when the package is not installed, e.g., in a development environment
        return "0.0.0-dev"


__version__ = _get_version()

__all__ = [
    "NOT_FOUND",
    "FilterFunc",
    "IndexRangeError",
    "PatternCompileError",
    "PatternSettings",
    "ReplacementSyntax",
    "ReplacementTemplateError",
    "StringList",
    "StringListError",
    "__version__",
    "load_config",
]

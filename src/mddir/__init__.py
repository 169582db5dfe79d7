"""Directory tree rendering utilities.

This package renders a directory structure either as an indented console
listing or as a JSON document, with configurable ignore/include/exclude
name filtering and optional size annotations.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("mddir")
except PackageNotFoundError:
    __version__ = "unknown"

from mddir.config.options import build_effective_options  # noqa: E402
from mddir.mddir import Tree, generate_tree, resolve_root  # noqa: E402
from mddir.size_formatter import format_size  # noqa: E402

__all__ = [
    "Tree",
    "build_effective_options",
    "format_size",
    "generate_tree",
    "resolve_root",
]

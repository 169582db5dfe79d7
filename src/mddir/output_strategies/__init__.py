"""Output strategies rendering a directory tree to a text sink."""

from .base_strategy import OutputStrategy
from .console_strategy import ConsoleTreeRenderer
from .json_strategy import JSONDocumentRenderer

__all__ = [
    "ConsoleTreeRenderer",
    "JSONDocumentRenderer",
    "OutputStrategy",
]

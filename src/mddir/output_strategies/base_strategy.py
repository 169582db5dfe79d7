"""Output strategy base class defining how a tree is rendered to a sink.

Each concrete strategy receives a text sink at construction and renders the tree
rooted at a path by driving a :class:`~mddir.file_system_tree.tree_builder.TreeBuilder`.
The console strategy is called back by the builder once per visited entry while the
walk is in progress; the JSON strategy asks the builder for the finished node
structure and serializes it in a single pass.
"""

import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, TextIO

from mddir.types import PathType

if TYPE_CHECKING:
    from mddir.file_system_tree.tree_builder import TreeBuilder


class OutputStrategy(ABC):
    """Abstract base class for tree output formats.

    Attributes:
        sink: Text stream the output is written to. Defaults to the standard output
            stream current at construction time.

    Example:
        >>> import io
        >>> class NamesOnly(OutputStrategy):
        ...     def render(self, builder, path):
        ...         for node in builder.build_tree_data(path):
        ...             self.write_line(node.name)
        >>> sink = io.StringIO()
        >>> NamesOnly(sink).write_line("hello")
        >>> sink.getvalue()
        'hello\\n'
    """

    def __init__(self, sink: Optional[TextIO] = None) -> None:
        self.sink = sink if sink is not None else sys.stdout

    def write_line(self, line: str = "") -> None:
        """Write one line of output followed by a newline."""
        self.sink.write(line + "\n")

    @abstractmethod
    def render(self, builder: "TreeBuilder", path: PathType) -> None:
        """Render the tree rooted at path to the sink.

        Args:
            builder: Tree builder configured with the effective options.
            path: Root directory to render.
        """
        pass

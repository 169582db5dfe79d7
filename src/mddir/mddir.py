"""Directory tree rendering facade.

This module ties the configuration merge, the tree builder and the output strategies
together behind the :class:`Tree` class and the :func:`generate_tree` shortcut.
"""

import io
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, TextIO

from mddir.config.options import EffectiveOptions, build_effective_options
from mddir.exceptions import InvalidRootError, UnsupportedFormatError
from mddir.file_system_tree.accessor import FileSystemAccessor
from mddir.file_system_tree.tree_builder import TreeBuilder
from mddir.file_system_tree.tree_node import TreeNode
from mddir.output_strategies.base_strategy import OutputStrategy
from mddir.output_strategies.console_strategy import ConsoleTreeRenderer
from mddir.output_strategies.json_strategy import JSONDocumentRenderer
from mddir.types import OutputFormat, PathType

logger = logging.getLogger(__name__)

STRATEGIES = {
    OutputFormat.CONSOLE: ConsoleTreeRenderer,
    OutputFormat.JSON: JSONDocumentRenderer,
}


def resolve_root(root_path: Optional[PathType] = None) -> Path:
    """Resolve the root directory of a run.

    Args:
        root_path: Directory to render. None or an empty string means the current
            working directory.

    Returns:
        The root path, as given when one was supplied.

    Raises:
        InvalidRootError: If the path does not exist.
    """
    root = Path(root_path) if root_path else Path.cwd()
    if not root.exists():
        raise InvalidRootError(str(root))
    return root


def get_output_strategy(output_format: Any, sink: Optional[TextIO] = None) -> OutputStrategy:
    """Create the output strategy for a format name.

    Args:
        output_format: ``"console"``, ``"json"`` (alias ``"document"``) or an OutputFormat.
        sink: Text stream to write to. Defaults to standard output.

    Raises:
        UnsupportedFormatError: If the format is not supported.
    """
    try:
        fmt = OutputFormat(output_format)
    except ValueError:
        raise UnsupportedFormatError(str(output_format)) from None
    return STRATEGIES[fmt](sink)


class Tree:
    """Directory tree generator for one root and one effective option set.

    The options are merged once, at construction: built-in defaults, then the config
    document (``.ignore.json`` unless ``configFilePath`` says otherwise), then the
    ``options`` mapping given here.

    Attributes:
        root_path (Path): Directory being rendered.
        options (EffectiveOptions): The merged, immutable options.
        builder (TreeBuilder): Traversal engine configured with the options.

    Example:
        >>> tree = Tree("src", {"buildOptions": {"maxDepth": 1}})  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        src/
        │
        ├── mddir/
        │   ├── __init__.py
        │   └── ...
        │
        └── ...
    """

    def __init__(
        self,
        root_path: Optional[PathType] = None,
        options: Optional[Mapping[str, Any]] = None,
        *,
        accessor: Optional[FileSystemAccessor] = None,
    ) -> None:
        """Initialize a Tree.

        Args:
            root_path: Directory to render. Defaults to the current working directory.
            options: Caller overrides, merged with the highest precedence.
            accessor: Filesystem accessor to use. Defaults to the real filesystem.

        Raises:
            InvalidRootError: If root_path does not exist.
            ValueError: If the merged build options are invalid.
        """
        self.root_path = resolve_root(root_path)
        self.options: EffectiveOptions = build_effective_options(self.root_path, options)
        self.builder = TreeBuilder(self.options, accessor=accessor)

    def generate_tree_data(self) -> List[TreeNode]:
        """Build the structured tree; a single-element list holding the root node."""
        return self.builder.build_tree_data(self.root_path)

    def generate_tree_dicts(self) -> List[Dict[str, Any]]:
        """Build the structured tree as plain document data."""
        return [node.to_dict() for node in self.generate_tree_data()]

    def generate_tree_console(self, sink: Optional[TextIO] = None) -> None:
        """Write the console tree to sink (standard output by default)."""
        ConsoleTreeRenderer(sink).render(self.builder, self.root_path)

    def generate(self, sink: Optional[TextIO] = None) -> None:
        """Render the tree in the configured output format.

        Raises:
            UnsupportedFormatError: If the configured output format is not supported.
        """
        strategy = get_output_strategy(self.options.build.output_format, sink)
        logger.debug("Rendering %s as %s", self.root_path, self.options.build.output_format)
        strategy.render(self.builder, self.root_path)

    def get_tree_representation(self) -> str:
        """Return the rendered output in the configured format as a string."""
        buffer = io.StringIO()
        self.generate(buffer)
        return buffer.getvalue()


def generate_tree(
    root_path: Optional[PathType] = None,
    options: Optional[Mapping[str, Any]] = None,
    sink: Optional[TextIO] = None,
) -> None:
    """Render the tree rooted at root_path in one call.

    Args:
        root_path: Directory to render. Defaults to the current working directory.
        options: Caller overrides for the configuration merge.
        sink: Text stream to write to. Defaults to standard output.
    """
    Tree(root_path, options).generate(sink)

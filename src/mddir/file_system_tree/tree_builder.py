"""Recursive traversal that classifies directory entries and builds or renders the tree.

Both entry points share the same walk: entries are listed in code point order, each
name is checked against the ignore rules, ignored entries are skipped or kept as
non-recursed placeholders, and visited directories are descended into until the
configured maximum depth is exceeded.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from mddir.config.options import EffectiveOptions
from mddir.exclusion_rules.base_rules import BaseExclusionRules
from mddir.exclusion_rules.name_rules import IgnoreNameRules
from mddir.file_system_tree.accessor import DirectoryEntry, FileSystemAccessor
from mddir.file_system_tree.tree_node import TreeNode
from mddir.size_formatter import format_size
from mddir.types import PathType

if TYPE_CHECKING:
    from mddir.output_strategies.console_strategy import ConsoleTreeRenderer

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Traversal engine producing structured tree data or live console output.

    Depth counts directory levels below the root: the root's own entries are listed
    at depth 0 and a call whose depth exceeds ``max_depth`` produces nothing. Depth 0
    is therefore always listed.

    Failures confined to one path (an entry that vanished between listing and stat,
    an unreadable directory) are logged as warnings and only suppress that path's
    output; siblings are still processed.

    Attributes:
        options (EffectiveOptions): The effective options of this run.
        accessor (FileSystemAccessor): Filesystem primitives.
        rules (BaseExclusionRules): Classifier deciding which names are ignored.

    Example:
        >>> from mddir.config.options import EffectiveOptions
        >>> builder = TreeBuilder(EffectiveOptions(root_label="src"))
        >>> builder.build_tree_data("/definitely/not/here")
        []
    """

    def __init__(
        self,
        options: EffectiveOptions,
        accessor: Optional[FileSystemAccessor] = None,
        rules: Optional[BaseExclusionRules] = None,
    ) -> None:
        self.options = options
        self.accessor = accessor or FileSystemAccessor()
        self.rules = rules or IgnoreNameRules.from_options(options)

    @property
    def max_depth(self) -> int:
        return self.options.build.max_depth

    def build_tree_data(self, path: PathType, depth: int = 0) -> List[TreeNode]:
        """Build the structured tree rooted at path.

        Args:
            path: Directory to describe.
            depth: Depth of path's entries; 0 for the root call.

        Returns:
            A single-element list wrapping the node for path, or an empty list if the
            path does not exist or depth exceeds ``max_depth``.
        """
        root_path = Path(path)
        if not self.accessor.exists(root_path) or depth > self.max_depth:
            return []

        root = TreeNode(root_path.name or str(root_path), is_dir=True)
        self._add_children(root, root_path, depth)
        return [root]

    def _add_children(self, node: TreeNode, path: Path, depth: int) -> None:
        if depth > self.max_depth:
            return
        try:
            names = self.accessor.list_sorted(path)
        except OSError as e:
            logger.warning("Cannot list directory %s: %s", path, e)
            return

        for name in names:
            try:
                self._build_child(node, path, name, depth)
            except OSError as e:
                logger.warning("Skipping %s: %s", path / name, e)

    def _build_child(self, parent: TreeNode, path: Path, name: str, depth: int) -> None:
        build = self.options.build

        if self.rules.exclude(name):
            if not build.keep_ignored_entries:
                return
            entry = self.accessor.entry(path, name)
            size = self._size_label(entry) if build.show_ignored_size else None
            TreeNode(name, parent=parent, is_dir=entry.is_dir, size_label=size, is_placeholder=True)
            return

        entry = self.accessor.entry(path, name)
        size = self._size_label(entry) if build.show_file_size else None
        node = TreeNode(name, parent=parent, is_dir=entry.is_dir, size_label=size)
        if entry.is_dir:
            self._add_children(node, entry.path, depth + 1)

    def render_console(self, renderer: "ConsoleTreeRenderer", path: PathType, depth: int = 0) -> None:
        """Walk the tree rooted at path, emitting lines through renderer as it goes.

        Args:
            renderer: Console renderer receiving the line events.
            path: Directory to render.
            depth: Depth of path's entries; 0 for the root call.
        """
        current = Path(path)
        if depth > self.max_depth:
            return
        if not self.accessor.exists(current):
            logger.error("Path '%s' does not exist", current)
            return
        try:
            names = self.accessor.list_sorted(current)
        except OSError as e:
            logger.error("Cannot list directory %s: %s", current, e)
            return

        if depth == 0 and self.options.root_label:
            renderer.write_root(self.options.root_label)

        build = self.options.build
        for name in names:
            ignored = self.rules.exclude(name)
            if ignored and not build.keep_ignored_entries:
                continue

            try:
                entry = self.accessor.entry(current, name)
            except OSError as e:
                logger.warning("Skipping %s: %s", current / name, e)
                continue

            if ignored:
                size = self._size_label(entry) if build.show_ignored_size else None
                renderer.write_ignored(entry.name, depth, entry.is_dir, size)
                continue

            size = self._size_label(entry) if build.show_file_size else None
            if entry.is_dir:
                renderer.write_directory_start(entry.name, depth, size)
                self.render_console(renderer, entry.path, depth + 1)
                renderer.write_directory_end(depth)
            else:
                renderer.write_file(entry.name, depth, size)

        if depth == 0:
            renderer.write_end()

    def _size_label(self, entry: DirectoryEntry) -> Optional[str]:
        try:
            num_bytes = self.accessor.dir_size(entry.path) if entry.is_dir else entry.size
        except OSError as e:
            logger.warning("Cannot compute size of %s: %s", entry.path, e)
            return None
        return format_size(num_bytes)

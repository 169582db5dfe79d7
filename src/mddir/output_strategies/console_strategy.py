"""Console output strategy producing an indented textual tree."""

from typing import TYPE_CHECKING, Optional

from mddir.types import PathType

from .base_strategy import OutputStrategy

if TYPE_CHECKING:
    from mddir.file_system_tree.tree_builder import TreeBuilder

INDENT = "│   "
BRANCH = "├── "
ELLIPSIS = "└── ..."
SIZE_SEPARATOR = "    "


class ConsoleTreeRenderer(OutputStrategy):
    """Output strategy writing the tree as indented lines while it is walked.

    Every entry line is indented by one ``"│   "`` marker per depth level. A
    directory's content is followed by a closing ellipsis line and a separator line;
    an ignored directory kept as a placeholder gets only the ellipsis line. The whole
    listing opens with the root label and closes with a final ellipsis.

    Example:
        >>> import io
        >>> sink = io.StringIO()
        >>> renderer = ConsoleTreeRenderer(sink)
        >>> renderer.write_root("project")
        >>> renderer.write_directory_start("src", 0)
        >>> renderer.write_file("a.txt", 1, "5 B")
        >>> renderer.write_directory_end(0)
        >>> renderer.write_end()
        >>> print(sink.getvalue(), end="")
        project/
        │
        ├── src/
        │   ├── a.txt    5 B
        │   └── ...
        │
        └── ...
    """

    def render(self, builder: "TreeBuilder", path: PathType) -> None:
        builder.render_console(self, path)

    @staticmethod
    def _entry_line(name: str, depth: int, size: Optional[str]) -> str:
        line = f"{INDENT * depth}{BRANCH}{name}"
        if size:
            line += f"{SIZE_SEPARATOR}{size}"
        return line

    def write_root(self, label: str) -> None:
        self.write_line(f"{label}/")
        self.write_line("│")

    def write_file(self, name: str, depth: int, size: Optional[str] = None) -> None:
        self.write_line(self._entry_line(name, depth, size))

    def write_directory_start(self, name: str, depth: int, size: Optional[str] = None) -> None:
        self.write_line(self._entry_line(f"{name}/", depth, size))

    def write_directory_end(self, depth: int) -> None:
        self.write_line(f"{INDENT * depth}│   {ELLIPSIS}")
        self.write_line(f"{INDENT * depth}│")

    def write_ignored(self, name: str, depth: int, is_dir: bool, size: Optional[str] = None) -> None:
        """Write the placeholder for an ignored entry; directories are not descended into."""
        if is_dir:
            self.write_line(self._entry_line(f"{name}/", depth, size))
            self.write_line(f"{INDENT * depth}│   {ELLIPSIS}")
        else:
            self.write_line(self._entry_line(name, depth, size))

    def write_end(self) -> None:
        self.write_line(ELLIPSIS)

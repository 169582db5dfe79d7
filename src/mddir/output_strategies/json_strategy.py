"""JSON output strategy serializing the structured tree as a document."""

import json
from typing import TYPE_CHECKING, Optional, Sequence, TextIO

from mddir.file_system_tree.tree_node import TreeNode
from mddir.types import PathType

from .base_strategy import OutputStrategy

if TYPE_CHECKING:
    from mddir.file_system_tree.tree_builder import TreeBuilder


class JSONDocumentRenderer(OutputStrategy):
    """Output strategy that writes the tree as a pretty-printed JSON document.

    The document is a list holding the root node (or nothing, if the root could not
    be listed). Each node is an object with ``name`` and ``isDir``, a ``size`` when
    one was attached, and a ``children`` list for directories:

    [
      {
        "name": "project",
        "isDir": true,
        "children": [
          {"name": "a.txt", "isDir": false, "size": "5 B"}
        ]
      }
    ]

    Attributes:
        indent: Indentation width passed to the JSON encoder.

    Example:
        >>> from mddir.file_system_tree.tree_node import TreeNode
        >>> root = TreeNode("project", is_dir=True)
        >>> _ = TreeNode("a.txt", parent=root)
        >>> print(JSONDocumentRenderer(indent=None).format_document([root]))
        [{"name": "project", "isDir": true, "children": [{"name": "a.txt", "isDir": false}]}]
    """

    def __init__(self, sink: Optional[TextIO] = None, indent: Optional[int] = 2) -> None:
        super().__init__(sink)
        self.indent = indent

    def format_document(self, nodes: Sequence[TreeNode]) -> str:
        """Serialize root nodes to a JSON string."""
        return json.dumps([node.to_dict() for node in nodes], indent=self.indent, ensure_ascii=False)

    def render(self, builder: "TreeBuilder", path: PathType) -> None:
        self.write_line(self.format_document(builder.build_tree_data(path)))

"""Node representation for entries in the structured tree output."""

from typing import Any, Optional

from anytree import Node


class TreeNode(Node):  # type: ignore
    """Node class representing a file or directory in the structured tree.

    Extends anytree.Node with a directory flag, an optional human-readable size
    label and a placeholder flag for ignored entries kept by name only. Each node
    belongs to exactly one parent.

    Attributes:
        name (str): The base name of the file or directory.
        parent (Optional[TreeNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory.
        size_label (Optional[str]): Formatted size, or None when sizes are not shown.
        is_placeholder (bool): True for an ignored entry that was not descended into.
        children (tuple[TreeNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = TreeNode("root", is_dir=True)
        >>> child = TreeNode("a.txt", parent=root, size_label="5 B")
        >>> [node.name for node in root.children]
        ['a.txt']
        >>> child.to_dict()
        {'name': 'a.txt', 'isDir': False, 'size': '5 B'}
    """

    def __init__(
        self,
        name: str,
        parent: Optional["TreeNode"] = None,
        is_dir: bool = False,
        size_label: Optional[str] = None,
        is_placeholder: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir
        self.size_label = size_label
        self.is_placeholder = is_placeholder

    def to_dict(self) -> dict:
        """Convert this node and its descendants to plain document data.

        Directories carry a ``children`` list (possibly empty); files and
        placeholders do not. ``size`` only appears when a label was attached.
        """
        data: dict = {"name": self.name, "isDir": self.is_dir}
        if self.size_label is not None:
            data["size"] = self.size_label
        if self.is_dir and not self.is_placeholder:
            data["children"] = [child.to_dict() for child in self.children]
        return data

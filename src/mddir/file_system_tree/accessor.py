"""Filesystem primitives used by the tree builder."""

import os
from pathlib import Path
from typing import List, NamedTuple

from mddir.exceptions import PathNotFoundError
from mddir.types import PathType


class EntryStat(NamedTuple):
    """The metadata the tree builder needs about one filesystem entry."""

    is_dir: bool
    size: int


class DirectoryEntry(NamedTuple):
    """One filesystem item under consideration during a traversal step.

    Attributes:
        name (str): Base name of the entry.
        path (Path): Full path of the entry.
        is_dir (bool): True if the entry is (or links to) a directory.
        size (int): Size in bytes as reported by stat, not aggregated.
    """

    name: str
    path: Path
    is_dir: bool
    size: int


class FileSystemAccessor:
    """Stateless access to directory listings and entry metadata.

    Symbolic links are followed, so a link to a directory reports as a directory and
    a dangling link reports as missing. Lookups of paths that do not exist raise
    PathNotFoundError; other access failures propagate as the underlying OSError.

    Example:
        >>> accessor = FileSystemAccessor()
        >>> accessor.exists("/definitely/not/here")
        False
    """

    def exists(self, path: PathType) -> bool:
        """Return True if path exists and is accessible."""
        return os.access(path, os.F_OK)

    def list_sorted(self, path: PathType) -> List[str]:
        """List the entry names of a directory in ascending code point order.

        Raises:
            PathNotFoundError: If the directory does not exist.
            OSError: If the directory cannot be read.
        """
        try:
            return sorted(os.listdir(path))
        except FileNotFoundError as e:
            raise PathNotFoundError(str(path)) from e

    def stat(self, path: PathType) -> EntryStat:
        """Return the directory flag and byte size of a path.

        Raises:
            PathNotFoundError: If the path does not exist.
            OSError: If the path cannot be stat-ed.
        """
        try:
            stat_info = os.stat(path)
        except FileNotFoundError as e:
            raise PathNotFoundError(str(path)) from e
        return EntryStat(is_dir=os.path.isdir(path), size=stat_info.st_size)

    def entry(self, parent: PathType, name: str) -> DirectoryEntry:
        """Stat the entry ``name`` inside ``parent``."""
        full_path = Path(parent) / name
        stat_info = self.stat(full_path)
        return DirectoryEntry(name, full_path, stat_info.is_dir, stat_info.size)

    def dir_size(self, path: PathType) -> int:
        """Return the total size in bytes of everything below path.

        Every descendant counts, regardless of any filtering applied to the rendered
        view. For a file, this is simply its own size.

        Raises:
            PathNotFoundError: If the path or a descendant vanishes during the walk.
            OSError: If any descendant cannot be read.
        """
        stat_info = self.stat(path)
        if not stat_info.is_dir:
            return stat_info.size
        return sum(self.dir_size(Path(path) / name) for name in self.list_sorted(path))

from enum import Enum
from os import PathLike
from typing import Optional, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class OutputFormat(str, Enum):
    """Enumeration of the supported render modes.

    Attributes:
        CONSOLE: Indented textual tree written line by line.
        JSON: Pretty-printed JSON document of the tree nodes. The name
            ``"document"`` is accepted as an alias.
    """

    CONSOLE = "console"
    JSON = "json"

    @classmethod
    def _missing_(cls, value: object) -> Optional["OutputFormat"]:
        if isinstance(value, str) and value.lower() == "document":
            return cls.JSON
        return None

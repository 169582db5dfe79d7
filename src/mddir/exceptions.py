class ConfigLoadError(Exception):
    """
    Exception raised when a configuration document exists but cannot be used.

    The file may be unreadable, contain invalid JSON/YAML, or hold something other
    than a mapping at its top level. The configuration merger treats this error as
    non-fatal: it logs the message and carries on without that layer.

    Attributes:
        path (str): Path of the offending configuration file.
        reason (str): Short description of what went wrong.

    Example:
        >>> error = ConfigLoadError(".ignore.json", "Expecting value: line 1 column 1 (char 0)")
        >>> str(error)
        'Failed to load config file .ignore.json: Expecting value: line 1 column 1 (char 0)'
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load config file {path}: {reason}")


class PathNotFoundError(FileNotFoundError):
    """
    Exception raised when a path disappears or cannot be accessed during traversal.

    Raised by the filesystem accessor. The tree builder catches it per subtree so
    that sibling entries are still processed.

    Example:
        >>> error = PathNotFoundError("/tmp/gone")
        >>> str(error)
        "Path '/tmp/gone' does not exist or is not accessible"
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Path '{path}' does not exist or is not accessible")


class UnsupportedFormatError(ValueError):
    """
    Exception raised when a render is requested in an unknown output format.

    Example:
        >>> error = UnsupportedFormatError("xml")
        >>> str(error)
        "Unsupported output format: 'xml' (expected one of: console, json)"
    """

    def __init__(self, output_format: str) -> None:
        self.output_format = output_format
        super().__init__(f"Unsupported output format: '{output_format}' (expected one of: console, json)")


class InvalidRootError(Exception):
    """
    Exception raised when the root directory to render does not exist.

    Example:
        >>> error = InvalidRootError("/no/such/dir")
        >>> str(error)
        "Root directory '/no/such/dir' does not exist"
    """

    def __init__(self, root: str) -> None:
        self.root = root
        super().__init__(f"Root directory '{root}' does not exist")

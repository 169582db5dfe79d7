from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry classification rules.

    The tree builder asks a rules object, for every directory entry it lists, whether
    the entry's name is ignored. Ignored entries are either skipped or shown as
    non-recursed placeholders; every other entry is visited.

    Example:
        >>> class TmpRules(BaseExclusionRules):
        ...     def exclude(self, name: str) -> bool:
        ...         return name.endswith('.tmp')
        >>> rules = TmpRules()
        >>> rules.exclude("build.tmp")
        True
        >>> rules.exclude("main.py")
        False
    """

    @abstractmethod
    def exclude(self, name: str) -> bool:
        """
        Determine whether an entry name is ignored.

        Args:
            name (str): The base name of a file or directory, without any parent path.

        Returns:
            bool: True if the entry is ignored, False if it should be visited.
        """
        pass

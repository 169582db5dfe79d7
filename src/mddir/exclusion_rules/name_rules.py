"""Exact-name ignore rules derived from the effective options."""

from typing import AbstractSet, Iterable, Optional

from mddir.config.options import EffectiveOptions

from .base_rules import BaseExclusionRules


class IgnoreNameRules(BaseExclusionRules):
    """Classifies entries by exact, case-sensitive name membership.

    A name is ignored when it is in the ignore set and in neither the include nor
    the exclude set. Both override sets are plain subtractions from the ignore set,
    so a name listed in all three is visited.

    Attributes:
        ignore_names (frozenset[str]): Effective ignore set after subtraction.

    Example:
        >>> rules = IgnoreNameRules(["node_modules", "dist"], include_names=["dist"])
        >>> rules.exclude("node_modules")
        True
        >>> rules.exclude("dist")
        False
        >>> rules.exclude("Node_Modules")
        False
    """

    def __init__(
        self,
        ignore_names: Iterable[str],
        include_names: Optional[Iterable[str]] = None,
        exclude_names: Optional[Iterable[str]] = None,
    ) -> None:
        overrides = frozenset(include_names or ()) | frozenset(exclude_names or ())
        self.ignore_names: AbstractSet[str] = frozenset(ignore_names) - overrides

    @classmethod
    def from_options(cls, options: EffectiveOptions) -> "IgnoreNameRules":
        """Create rules from an effective option set."""
        return cls(options.ignore_names, options.include_names, options.exclude_names)

    def exclude(self, name: str) -> bool:
        return name in self.ignore_names

"""Rules for classifying directory entries as ignored or visited."""

from .base_rules import BaseExclusionRules
from .name_rules import IgnoreNameRules

__all__ = [
    "BaseExclusionRules",
    "IgnoreNameRules",
]

"""Layered configuration: defaults, config documents and caller overrides."""

from .loader import load_config_document
from .options import BuildOptions, EffectiveOptions, build_effective_options, merge_names

__all__ = [
    "BuildOptions",
    "EffectiveOptions",
    "build_effective_options",
    "load_config_document",
    "merge_names",
]

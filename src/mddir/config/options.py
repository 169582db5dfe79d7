"""Effective option set and the layered configuration merge that produces it.

Three layers are merged in fixed order, lowest precedence first:

1. Built-in defaults (:mod:`mddir.config.defaults`).
2. An external JSON or YAML config document, if one exists at the configured path.
3. Caller-supplied overrides (the CLI ``--options`` object or the ``overrides`` argument).

Name-set fields (ignore/include/exclude) are appended to or replaced by each layer,
as controlled by that layer's ``appendIgnore``/``appendInclude``/``appendExclude``
build options. Build options are shallow-merged key by key. Finally, the exclude and
include sets are subtracted from the ignore set.
"""

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Union

from mddir.config.defaults import (
    DEFAULT_BUILD_OPTIONS,
    DEFAULT_CONFIG_FILE_PATH,
    DEFAULT_EXCLUDE_NAMES,
    DEFAULT_IGNORE_NAMES,
    DEFAULT_INCLUDE_NAMES,
)
from mddir.config.loader import load_config_document
from mddir.exceptions import ConfigLoadError
from mddir.types import OutputFormat, PathType

logger = logging.getLogger(__name__)

NAME_SETS = ("ignore", "include", "exclude")

# Top-level keys accepted in config documents and overrides
SECTION_ALIASES = {
    "ignore": "ignore",
    "ignoreDirs": "ignore",
    "ignore_names": "ignore",
    "include": "include",
    "includeDirs": "include",
    "include_names": "include",
    "exclude": "exclude",
    "excludeDirs": "exclude",
    "exclude_names": "exclude",
    "build": "build",
    "buildOptions": "build",
    "build_options": "build",
    "projectName": "root_label",
    "rootLabel": "root_label",
    "root_label": "root_label",
    "configFilePath": "config_file_path",
    "config_file_path": "config_file_path",
}

BUILD_OPTION_ALIASES = {
    "keepIgnoredName": "keep_ignored_entries",
    "keepIgnoredEntries": "keep_ignored_entries",
    "maxDepth": "max_depth",
    "outputFormat": "output_format",
    "showFileSize": "show_file_size",
    "showIgnoredFileSize": "show_ignored_size",
    "showIgnoredSize": "show_ignored_size",
    "appendIgnore": "append_ignore",
    "appendInclude": "append_include",
    "appendExclude": "append_exclude",
}
BUILD_OPTION_ALIASES.update({name: name for name in DEFAULT_BUILD_OPTIONS})


BOOLEAN_BUILD_OPTIONS = (
    "keep_ignored_entries",
    "show_file_size",
    "show_ignored_size",
    "append_ignore",
    "append_include",
    "append_exclude",
)


def build_option_error(name: str, value: Any) -> Optional[str]:
    """Return why value is not acceptable for the build option name, or None if it is.

    Example:
        >>> build_option_error("max_depth", 3) is None
        True
        >>> build_option_error("max_depth", "3")
        "max_depth must be a non-negative integer, got '3'"
    """
    if name == "max_depth":
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            return f"max_depth must be a non-negative integer, got {value!r}"
    elif name == "output_format":
        if not isinstance(value, str):
            return f"output_format must be a string, got {value!r}"
    elif name in BOOLEAN_BUILD_OPTIONS and not isinstance(value, bool):
        return f"{name} must be a boolean, got {value!r}"
    return None


@dataclass(frozen=True)
class BuildOptions:
    """Options controlling how a tree is built and rendered.

    Attributes:
        keep_ignored_entries: Show ignored entries as non-recursed placeholders.
        max_depth: Deepest level that is listed; the root's children are level 0.
        output_format: ``"console"`` or ``"json"``. Validated when rendering.
        show_file_size: Annotate visited files and directories with their size.
        show_ignored_size: Annotate ignored placeholders with their size.
        append_ignore: Whether the layer that set this appends to the ignore set.
        append_include: Whether the layer that set this appends to the include set.
        append_exclude: Whether the layer that set this appends to the exclude set.
    """

    keep_ignored_entries: bool = False
    max_depth: int = 5
    output_format: Union[str, OutputFormat] = "console"
    show_file_size: bool = False
    show_ignored_size: bool = False
    append_ignore: bool = True
    append_include: bool = True
    append_exclude: bool = True

    def __post_init__(self) -> None:
        for option in fields(self):
            error = build_option_error(option.name, getattr(self, option.name))
            if error:
                raise ValueError(error)


@dataclass(frozen=True)
class EffectiveOptions:
    """The fully merged, immutable configuration for one traversal run.

    The ignore set never shares a name with the include or exclude sets: both are
    subtracted from it on construction, so a name present in all three is visited.

    Attributes:
        root_label: Label printed on the first line of console output.
        ignore_names: Entry names skipped during rendering.
        include_names: Names forced out of the ignore set.
        exclude_names: Names removed from the ignore set.
        config_file_path: Path the config document was looked up at, or None.
        build: The build options.
    """

    root_label: str
    ignore_names: FrozenSet[str] = frozenset(DEFAULT_IGNORE_NAMES)
    include_names: FrozenSet[str] = frozenset(DEFAULT_INCLUDE_NAMES)
    exclude_names: FrozenSet[str] = frozenset(DEFAULT_EXCLUDE_NAMES)
    config_file_path: Optional[str] = DEFAULT_CONFIG_FILE_PATH
    build: BuildOptions = field(default_factory=BuildOptions)

    def __post_init__(self) -> None:
        include = frozenset(self.include_names)
        exclude = frozenset(self.exclude_names)
        object.__setattr__(self, "include_names", include)
        object.__setattr__(self, "exclude_names", exclude)
        object.__setattr__(self, "ignore_names", frozenset(self.ignore_names) - exclude - include)


def merge_names(current: Sequence[str], new: Optional[Iterable[str]], append: bool = True) -> List[str]:
    """Combine an accumulated name list with the value supplied by a new layer.

    Args:
        current: Names accumulated from lower-precedence layers.
        new: Names supplied by the merging layer, or None if it supplies none.
        append: Union the two when True; let the new value win outright when False.

    Returns:
        De-duplicated list of names, first occurrence order preserved.

    Example:
        >>> merge_names(["a", "b"], ["c"])
        ['a', 'b', 'c']
        >>> merge_names(["a", "b"], ["c"], append=False)
        ['c']
        >>> merge_names(["a", "b"], None)
        ['a', 'b']
    """
    if new is None:
        return list(current)
    merged = [*current, *new] if append else list(new)
    return list(dict.fromkeys(merged))


def _as_names(value: Any, source: str, key: str) -> Optional[List[str]]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set, frozenset)) and all(isinstance(item, str) for item in value):
        return list(value)
    logger.warning("Ignoring '%s' from %s: expected a list of names, got %r", key, source, value)
    return None


def normalize_layer(raw: Mapping[str, Any], source: str) -> Dict[str, Any]:
    """Translate a raw configuration mapping into canonical keys.

    Accepts both the JSON-style keys (``ignore``, ``exclude``, ``buildOptions``) and
    the YAML-style ones (``ignoreDirs``, ``includeDirs``, ``excludeDirs``, ``build``).
    Build option keys are translated from camelCase to field names. Unknown keys are
    dropped; values of the wrong shape are logged and dropped.

    Args:
        raw: The mapping as parsed from a document or supplied by the caller.
        source: Description of where the mapping came from, used in log messages.

    Returns:
        A mapping with keys among ``ignore``, ``include``, ``exclude``, ``build``,
        ``root_label`` and ``config_file_path``.
    """
    layer: Dict[str, Any] = {}
    for key, value in raw.items():
        section = SECTION_ALIASES.get(key)
        if section is None:
            logger.debug("Ignoring unknown key '%s' from %s", key, source)
            continue

        if section in NAME_SETS:
            names = _as_names(value, source, key)
            if names is not None:
                layer[section] = merge_names(layer.get(section, []), names)
        elif section == "build":
            if not isinstance(value, Mapping):
                logger.warning("Ignoring '%s' from %s: expected a mapping, got %r", key, source, value)
                continue
            build = layer.setdefault("build", {})
            for option, option_value in value.items():
                field_name = BUILD_OPTION_ALIASES.get(option)
                if field_name is None:
                    logger.debug("Ignoring unknown build option '%s' from %s", option, source)
                    continue
                build[field_name] = option_value
        elif section == "config_file_path" and not isinstance(value, (str, os.PathLike, type(None))):
            logger.warning("Ignoring '%s' from %s: expected a path, got %r", key, source, value)
        else:
            layer[section] = value
    return layer


def _discard_invalid_build_options(layer: Dict[str, Any], source: str) -> None:
    build = layer.get("build", {})
    for name, value in list(build.items()):
        error = build_option_error(name, value)
        if error:
            logger.warning("Ignoring build option from %s: %s", source, error)
            del build[name]


def _apply_layer(state: Dict[str, Any], layer: Mapping[str, Any]) -> None:
    build_layer = layer.get("build", {})
    for section in NAME_SETS:
        if section in layer:
            append = build_layer.get(f"append_{section}", True)
            state[section] = merge_names(state[section], layer[section], append=bool(append))
    state["build"].update(build_layer)
    if "root_label" in layer:
        state["root_label"] = layer["root_label"]


def default_root_label(root_path: PathType) -> str:
    """Return the label used for a root directory when none is configured."""
    resolved = Path(root_path).resolve()
    return resolved.name or str(resolved)


def build_effective_options(
    root_path: PathType,
    overrides: Optional[Mapping[str, Any]] = None,
) -> EffectiveOptions:
    """Merge defaults, the config document and overrides into effective options.

    The config document is looked up at the override layer's ``configFilePath`` when
    given (``None`` or an empty string disables the lookup), otherwise at
    ``.ignore.json``. A missing document is skipped silently; an unparsable one is
    logged as a warning and contributes nothing. Build option values of the wrong
    type in the document are logged and dropped one by one.

    Args:
        root_path: Root directory being rendered, used for the default root label.
        overrides: Caller-supplied configuration, highest precedence.

    Returns:
        The immutable effective options.

    Raises:
        ValueError: If the override layer holds invalid build option values.

    Example:
        >>> options = build_effective_options(".", {"configFilePath": None, "ignore": ["out"]})
        >>> "out" in options.ignore_names and "node_modules" in options.ignore_names
        True
        >>> options = build_effective_options(
        ...     ".", {"configFilePath": None, "ignore": ["out"], "buildOptions": {"appendIgnore": False}}
        ... )
        >>> sorted(options.ignore_names)
        ['out']
    """
    override_layer = normalize_layer(overrides or {}, "overrides")

    state: Dict[str, Any] = {
        "ignore": list(DEFAULT_IGNORE_NAMES),
        "include": list(DEFAULT_INCLUDE_NAMES),
        "exclude": list(DEFAULT_EXCLUDE_NAMES),
        "build": dict(DEFAULT_BUILD_OPTIONS),
        "root_label": default_root_label(root_path),
    }

    config_file_path = override_layer.get("config_file_path", DEFAULT_CONFIG_FILE_PATH)
    if config_file_path:
        try:
            document = load_config_document(config_file_path)
        except ConfigLoadError as e:
            logger.warning("%s", e)
            document = None
        if document:
            config_layer = normalize_layer(document, str(config_file_path))
            _discard_invalid_build_options(config_layer, str(config_file_path))
            _apply_layer(state, config_layer)

    _apply_layer(state, override_layer)

    return EffectiveOptions(
        root_label=str(state["root_label"]),
        ignore_names=frozenset(state["ignore"]),
        include_names=frozenset(state["include"]),
        exclude_names=frozenset(state["exclude"]),
        config_file_path=str(config_file_path) if config_file_path else None,
        build=BuildOptions(**state["build"]),
    )

"""Loading of external configuration documents (JSON or YAML)."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from mddir.exceptions import ConfigLoadError
from mddir.types import PathType

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def load_config_document(path: PathType) -> Optional[Dict[str, Any]]:
    """Read a configuration document from disk.

    The parser is selected from the file suffix: ``.yaml``/``.yml`` files are read
    with PyYAML, everything else is read as JSON.

    Args:
        path: Location of the configuration file.

    Returns:
        The parsed mapping, or None if no file exists at path. An empty YAML
        document yields an empty mapping.

    Raises:
        ConfigLoadError: If the file cannot be read or parsed, or if its top level
            is not a mapping.
    """
    config_path = Path(path)
    if not config_path.is_file():
        logger.debug("No config file at %s", config_path)
        return None

    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(str(config_path), str(e)) from e

    try:
        if config_path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigLoadError(str(config_path), str(e)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(str(config_path), f"expected a mapping, got {type(data).__name__}")

    logger.debug("Loaded config file %s", config_path)
    return data

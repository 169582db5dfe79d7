"""Command-line argument parsing for mddir.

This module defines the command-line interface for mddir,
handling argument parsing and translation into configuration overrides.
"""

import argparse
import copy
from pathlib import Path
from typing import Any, Dict

import json5

from mddir import __version__


def parse_options(value: str) -> Dict[str, Any]:
    """Parse the ``--options`` value into a configuration mapping.

    The value is read as JSON5, so unquoted keys and single-quoted strings are
    accepted alongside plain JSON.

    Args:
        value: A JSON5 object, e.g. ``'{buildOptions: {maxDepth: 2}}'``.

    Returns:
        The parsed mapping.

    Raises:
        argparse.ArgumentTypeError: If the value is not valid JSON5 or not an object.
    """
    try:
        data = json5.loads(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid JSON options: {e}")
    if not isinstance(data, dict):
        raise argparse.ArgumentTypeError(f"options must be a JSON object, got {type(data).__name__}")
    return data


def non_negative_int(value: str) -> int:
    """Argparse type accepting integers >= 0."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with mddir's options.
    """
    description = """
    mddir: Print the structure of a project directory as a tree.

    Entries whose names are in the ignore set (node_modules, .git, build, dist, ...)
    are left out, or shown as placeholders without their contents. Configuration is
    merged from built-in defaults, a config file (.ignore.json by default, JSON or
    YAML) and the --options object, in that order.
    """

    epilog = """
    Examples:
      # Render the current directory
      mddir

      # Render another directory
      mddir -r /path/to/project

      # Render as a JSON document
      mddir -r /path/to/project -f json

      # Keep ignored entries as placeholders and show sizes
      mddir -o '{buildOptions: {keepIgnoredName: true, showFileSize: true}}'

      # Ignore only the given names instead of the defaults
      mddir -o '{"ignore": ["target"], "buildOptions": {"appendIgnore": false}}'

      # Read the configuration from a YAML file
      mddir -c mddir.yaml

      # Display version information and exit
      mddir -V
    """

    parser = argparse.ArgumentParser(
        prog="mddir",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"mddir {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        metavar="PATH",
        help="Root directory to render (default: the current working directory).",
    )
    parser.add_argument(
        "-o",
        "--options",
        type=parse_options,
        metavar="JSON",
        help=(
            "Configuration overrides as a JSON5 object, with the keys ignore, include, exclude, "
            "projectName, configFilePath and buildOptions."
        ),
    )
    parser.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        help="Config file to read (.json, .yaml or .yml). Overrides configFilePath in --options.",
    )
    parser.add_argument(
        "-f",
        "--format",
        metavar="FORMAT",
        help="Output format: console or json. Overrides buildOptions.outputFormat in --options.",
    )
    parser.add_argument(
        "-d",
        "--max-depth",
        type=non_negative_int,
        metavar="N",
        help="Maximum depth to descend to. Overrides buildOptions.maxDepth in --options.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug diagnostics to stderr.",
    )

    return parser


def build_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Combine ``--options`` with the shortcut flags into one override mapping.

    Args:
        args: Parsed command-line arguments.

    Returns:
        The override mapping for the configuration merge. The parsed ``--options``
        value is left unmodified.
    """
    overrides: Dict[str, Any] = copy.deepcopy(args.options) if args.options else {}

    if args.config is not None:
        overrides["configFilePath"] = args.config

    build_updates: Dict[str, Any] = {}
    if args.format is not None:
        build_updates["outputFormat"] = args.format
    if args.max_depth is not None:
        build_updates["maxDepth"] = args.max_depth

    if build_updates:
        # Both spellings are accepted; fold shortcut flags into whichever one is in use
        key = "build" if "build" in overrides and "buildOptions" not in overrides else "buildOptions"
        existing = overrides.get(key)
        build = dict(existing) if isinstance(existing, dict) else {}
        build.update(build_updates)
        overrides[key] = build

    return overrides

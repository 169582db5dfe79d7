"""Command-line interface for mddir.

This module provides the command-line entry point, which renders the directory tree
of a root path to standard output either as an indented console listing or as a JSON
document.

Exit Codes:
    0: Successful completion, including runs where an unexpected error during
       generation was reported on stderr
    1: The root directory does not exist, or the output format is not supported
    2: Command-line syntax error (including an invalid --options object)
    141: Broken pipe while writing output (e.g. piping into `head`)

Example:
    # Render the current directory
    $ mddir

    # Render a project as JSON, three levels deep
    $ mddir -r /path/to/project -f json -d 3

    # Display version information
    $ mddir --version
"""

import logging
import os
import sys

from mddir.cli.argparser import build_overrides, create_parser
from mddir.exceptions import InvalidRootError, UnsupportedFormatError
from mddir.mddir import generate_tree, resolve_root


def configure_logging(verbose: bool = False) -> None:
    """Send library diagnostics to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> None:
    """Main entry point for the mddir command-line interface.

    Parses the arguments, resolves the root directory and renders the tree. A missing
    root directory or an unsupported output format ends the process with exit code 1.
    Any other failure during generation is reported on stderr without changing the
    exit code.
    """
    parser = create_parser()
    args = parser.parse_args()
    configure_logging(args.verbose)

    overrides = build_overrides(args)

    try:
        root = resolve_root(args.root)
    except InvalidRootError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        generate_tree(root, overrides)
        sys.stdout.flush()
    except UnsupportedFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except BrokenPipeError:
        # Redirect stdout to the null device so the interpreter's final flush stays quiet
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except Exception as e:
        print(f"An error occurred: {e}", file=sys.stderr)


if __name__ == "__main__":
    main()

"""Built-in defaults, the lowest-precedence configuration layer."""

DEFAULT_CONFIG_FILE_PATH = ".ignore.json"

DEFAULT_IGNORE_NAMES = (
    "node_modules",
    ".idea",
    ".git",
    ".vscode",
    "build",
    "dist",
    "__tests__",
    "temp",
)

DEFAULT_INCLUDE_NAMES: tuple = ()

DEFAULT_EXCLUDE_NAMES: tuple = ()

# Keyed by BuildOptions field name
DEFAULT_BUILD_OPTIONS = {
    "keep_ignored_entries": False,
    "max_depth": 5,
    "output_format": "console",
    "show_file_size": False,
    "show_ignored_size": False,
    "append_ignore": True,
    "append_include": True,
    "append_exclude": True,
}

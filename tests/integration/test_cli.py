"""Integration tests for the command-line interface.

This integration test suite runs the CLI in a subprocess and covers:
- Default console rendering and ignore handling
- JSON output
- Config files in the working directory and passed with -c
- Exit codes for a missing root, an unsupported format and invalid options
- Version information
"""

import json
import subprocess
import sys
import tempfile
from pathlib import Path

import pytest

# Skip all tests in this module if not running with --run-cli-tests
# This prevents these slow tests from running during normal test runs
pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


@pytest.fixture
def temp_project():
    """Create a temporary project directory with test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        base_dir = Path(tmpdir) / "demo"
        base_dir.mkdir()

        (base_dir / "src").mkdir()
        (base_dir / "src" / "utils").mkdir()
        (base_dir / "docs").mkdir()
        (base_dir / "node_modules").mkdir()
        (base_dir / "build").mkdir()

        (base_dir / "src" / "main.py").write_text("def main():\n    print('Hello')\n")
        (base_dir / "src" / "utils" / "helpers.py").write_text("def helper():\n    pass\n")
        (base_dir / "docs" / "README.md").write_text("# Test Project\nDescription.\n")
        (base_dir / "package.json").write_text('{"name": "test"}\n')
        (base_dir / "build" / "output.min.js").write_text("console.log('test')\n")
        (base_dir / "node_modules" / "module.js").write_text("export default {}\n")

        yield base_dir


def run_cli(args, cwd=None, timeout=10):
    """Run the mddir CLI with the given arguments."""
    cmd = [sys.executable, "-m", "mddir.cli.main"] + args
    return subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True, cwd=cwd, timeout=timeout)


def test_cli_default_console(temp_project):
    result = run_cli([], cwd=temp_project)

    assert result.returncode == 0
    assert result.stdout.startswith("demo/\n│\n")
    assert "├── docs/" in result.stdout
    assert "│   ├── main.py" in result.stdout
    assert "│   │   ├── helpers.py" in result.stdout
    assert result.stdout.endswith("└── ...\n")
    # Ignored by default
    assert "node_modules" not in result.stdout
    assert "output.min.js" not in result.stdout


def test_cli_root_flag(temp_project):
    result = run_cli(["-r", str(temp_project / "src")], cwd=temp_project.parent)

    assert result.returncode == 0
    assert result.stdout.startswith("src/\n│\n├── main.py\n")


def test_cli_json_output(temp_project):
    result = run_cli(["-r", str(temp_project), "-o", '{"buildOptions": {"outputFormat": "json"}}'])

    assert result.returncode == 0
    document = json.loads(result.stdout)
    assert document[0]["name"] == "demo"
    assert [child["name"] for child in document[0]["children"]] == ["docs", "package.json", "src"]


def test_cli_config_file_in_working_directory(temp_project):
    (temp_project / ".ignore.json").write_text(
        json.dumps({"ignore": ["docs"], "exclude": ["build"], "buildOptions": {"keepIgnoredName": True}})
    )

    result = run_cli([], cwd=temp_project)

    assert result.returncode == 0
    assert "├── build/\n│   ├── output.min.js\n" in result.stdout
    assert "├── docs/\n│   └── ...\n" in result.stdout
    assert "README.md" not in result.stdout


def test_cli_yaml_config_flag(temp_project):
    config_file = temp_project / "mddir.yml"
    config_file.write_text("ignoreDirs: [src]\nbuild:\n  appendIgnore: false\n  maxDepth: 0\n")

    result = run_cli(["-r", str(temp_project), "-c", str(config_file)])

    assert result.returncode == 0
    # The config layer replaced the default ignore set, so node_modules is visited
    assert "├── node_modules/\n│   └── ...\n" in result.stdout
    assert "├── src/" not in result.stdout


def test_cli_malformed_config_is_not_fatal(temp_project):
    (temp_project / ".ignore.json").write_text("{broken")

    result = run_cli([], cwd=temp_project)

    assert result.returncode == 0
    assert "Failed to load config file" in result.stderr
    assert result.stdout.startswith("demo/\n")


def test_cli_missing_root(temp_project):
    result = run_cli(["-r", str(temp_project / "missing")])

    assert result.returncode == 1
    assert "does not exist" in result.stderr
    assert result.stdout == ""


def test_cli_unsupported_format(temp_project):
    result = run_cli(["-r", str(temp_project), "-f", "xml"])

    assert result.returncode == 1
    assert "Unsupported output format" in result.stderr


def test_cli_invalid_options(temp_project):
    result = run_cli(["-r", str(temp_project), "-o", "[1, 2]"])

    assert result.returncode == 2
    assert "must be a JSON object" in result.stderr


def test_cli_version():
    result = run_cli(["--version"])

    assert result.returncode == 0
    assert result.stdout.startswith("mddir ")

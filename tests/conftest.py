"""Test configuration and fixtures for mddir."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def project_dir(tmp_path):
    """Create a small project tree.

    project/
        README.md           5 bytes
        node_modules/
            lib.js          20 bytes
        src/
            a.txt           5 bytes
            utils/
                helpers.py  10 bytes
    """
    root = tmp_path / "project"
    root.mkdir()
    (root / "README.md").write_text("hello")
    (root / "node_modules").mkdir()
    (root / "node_modules" / "lib.js").write_text("x" * 20)
    (root / "src").mkdir()
    (root / "src" / "a.txt").write_text("aaaaa")
    (root / "src" / "utils").mkdir()
    (root / "src" / "utils" / "helpers.py").write_text("y" * 10)
    return root


@pytest.fixture
def no_config(tmp_path, monkeypatch):
    """Run from an empty working directory so no .ignore.json is picked up."""
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir

"""Unit tests for the filesystem accessor."""

import os

import pytest

from mddir.exceptions import PathNotFoundError
from mddir.file_system_tree.accessor import DirectoryEntry, EntryStat, FileSystemAccessor


@pytest.fixture
def accessor():
    return FileSystemAccessor()


def test_exists(accessor, project_dir):
    assert accessor.exists(project_dir)
    assert accessor.exists(project_dir / "README.md")
    assert not accessor.exists(project_dir / "missing")


def test_list_sorted_is_code_point_order(accessor, tmp_path):
    for name in ["b.txt", "B.txt", "a.txt", "_x", "10", "2"]:
        (tmp_path / name).touch()

    assert accessor.list_sorted(tmp_path) == ["10", "2", "B.txt", "_x", "a.txt", "b.txt"]


def test_list_sorted_missing_directory(accessor, tmp_path):
    with pytest.raises(PathNotFoundError):
        accessor.list_sorted(tmp_path / "missing")


def test_stat(accessor, project_dir):
    assert accessor.stat(project_dir / "README.md") == EntryStat(is_dir=False, size=5)
    assert accessor.stat(project_dir / "src").is_dir is True


def test_stat_missing_path(accessor, tmp_path):
    with pytest.raises(PathNotFoundError) as exc_info:
        accessor.stat(tmp_path / "missing")
    assert exc_info.value.path == str(tmp_path / "missing")


def test_entry(accessor, project_dir):
    entry = accessor.entry(project_dir / "src", "a.txt")

    assert isinstance(entry, DirectoryEntry)
    assert entry.name == "a.txt"
    assert entry.path == project_dir / "src" / "a.txt"
    assert entry.is_dir is False
    assert entry.size == 5
    assert "a.txt" in repr(entry)
    assert entry == DirectoryEntry("a.txt", project_dir / "src" / "a.txt", False, 5)


def test_dir_size_sums_all_descendants(accessor, project_dir):
    # README.md (5) + node_modules/lib.js (20) + src/a.txt (5) + src/utils/helpers.py (10)
    assert accessor.dir_size(project_dir) == 40
    assert accessor.dir_size(project_dir / "src") == 15


def test_dir_size_of_file(accessor, project_dir):
    assert accessor.dir_size(project_dir / "README.md") == 5


def test_dir_size_empty_directory(accessor, tmp_path):
    (tmp_path / "empty").mkdir()
    assert accessor.dir_size(tmp_path / "empty") == 0


def test_symlinks_are_followed(accessor, project_dir):
    try:
        os.symlink(project_dir / "src", project_dir / "link")
    except (OSError, NotImplementedError):
        pytest.skip("Symlink creation not supported on this platform/environment")

    assert accessor.stat(project_dir / "link").is_dir
    assert accessor.dir_size(project_dir / "link") == 15

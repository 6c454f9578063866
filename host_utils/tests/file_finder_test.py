# tests/file_finder_test.py
import os
from pathlib import Path

import pytest

from host_utils.errors import InvalidArgumentError
from host_utils.file_finder import find, find_file


def test_finds_nested_file(tmp_path: Path):
    (tmp_path / "a" / "b").mkdir(parents=True)
    target = tmp_path / "a" / "b" / "target.txt"
    target.write_text("x")
    assert find(tmp_path, "target.txt") == target


def test_first_match_is_some_target(tmp_path: Path):
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "a" / "b" / "target.txt").write_text("x")
    (tmp_path / "a" / "target.txt").write_text("x")
    found = find(tmp_path, "target.txt")
    assert found in {tmp_path / "a" / "target.txt", tmp_path / "a" / "b" / "target.txt"}
    assert found.is_file()


def test_accepts_string_root(tmp_path: Path):
    (tmp_path / "f.cfg").write_text("x")
    assert find(str(tmp_path), "f.cfg") == tmp_path / "f.cfg"


def test_directory_not_matched_by_default(tmp_path: Path):
    (tmp_path / "logs").mkdir()
    assert find(tmp_path, "logs") is None
    assert find_file(tmp_path, "logs") is None


def test_directory_name_skipped_but_searched_when_not_matching_dirs(tmp_path: Path):
    (tmp_path / "same").mkdir()
    inner = tmp_path / "same" / "same"
    inner.write_text("file with the directory's name")
    assert find(tmp_path, "same") == inner


def test_directory_match_does_not_descend(tmp_path: Path):
    (tmp_path / "same").mkdir()
    (tmp_path / "same" / "same").write_text("x")
    assert find(tmp_path, "same", True) == tmp_path / "same"


def test_nested_directory_match(tmp_path: Path):
    (tmp_path / "x" / "y" / "build").mkdir(parents=True)
    assert find(tmp_path, "build", match_directories=True) == tmp_path / "x" / "y" / "build"


def test_not_found_anywhere(tmp_path: Path):
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "a" / "b" / "other.txt").write_text("x")
    assert find(tmp_path, "missing.txt") is None
    assert find(tmp_path, "missing.txt", True) is None


def test_empty_root(tmp_path: Path):
    assert find(tmp_path, "anything") is None


def test_root_itself_is_not_a_candidate(tmp_path: Path):
    root = tmp_path / "root"
    root.mkdir()
    assert find(root, "root", True) is None


def test_none_root_rejected():
    with pytest.raises(InvalidArgumentError):
        find(None, "x")


def test_none_name_rejected(tmp_path: Path):
    with pytest.raises(InvalidArgumentError):
        find(tmp_path, None)


def test_file_root_rejected(tmp_path: Path):
    f = tmp_path / "plain.txt"
    f.write_text("x")
    with pytest.raises(InvalidArgumentError):
        find(f, "plain.txt")


def test_missing_root_rejected(tmp_path: Path):
    with pytest.raises(InvalidArgumentError):
        find(tmp_path / "nope", "x")


def test_invalid_argument_is_a_value_error(tmp_path: Path):
    with pytest.raises(ValueError):
        find(tmp_path / "nope", "x")


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_directory_symlinks_followed_only_on_request(tmp_path: Path):
    real = tmp_path / "real"
    real.mkdir()
    (real / "deep.txt").write_text("x")
    search_root = tmp_path / "search"
    search_root.mkdir()
    try:
        (search_root / "link").symlink_to(real, target_is_directory=True)
    except OSError:
        pytest.skip("cannot create symlinks here")

    assert find(search_root, "deep.txt") is None
    assert find(search_root, "link") is None
    assert find(search_root, "deep.txt", follow_symlinks=True) == search_root / "link" / "deep.txt"


def test_unreadable_directory_is_skipped(tmp_path: Path, monkeypatch):
    (tmp_path / "locked").mkdir()
    (tmp_path / "open").mkdir()
    (tmp_path / "open" / "t.txt").write_text("x")

    real_scandir = os.scandir

    def guarded_scandir(path):
        if Path(path).name == "locked":
            raise PermissionError("denied")
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", guarded_scandir)
    assert find(tmp_path, "t.txt") == tmp_path / "open" / "t.txt"

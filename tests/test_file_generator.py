# tests/test_file_generator.py
"""
Unit tests for the low‑level file helpers in ``patternfly_cli.file_generator``.
"""

import json
from pathlib import Path

import pytest

from patternfly_cli.exceptions import ManifestIOError
from patternfly_cli.file_generator import read_json, remove_tree, write_file, write_json


@pytest.fixture
def tmp_file(tmp_path: Path) -> Path:
    """Return a fresh, non‑existent file inside the temporary directory."""
    return tmp_path / "nested" / "hello.txt"


def test_write_text_file(tmp_file: Path) -> None:
    """Writing creates missing parents and leaves no temporary file behind."""
    write_file(tmp_file, "content")
    assert tmp_file.read_text() == "content"
    assert [p.name for p in tmp_file.parent.iterdir()] == ["hello.txt"]


def test_write_text_file_overwrite(tmp_file: Path) -> None:
    write_file(tmp_file, "first")
    write_file(tmp_file, "second")
    assert tmp_file.read_text() == "second"


def test_write_json_uses_two_space_indent(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    write_json(path, {"name": "app", "dependencies": {"react": "^18"}})
    assert path.read_text() == '{\n  "name": "app",\n  "dependencies": {\n    "react": "^18"\n  }\n}\n'


def test_write_json_keeps_unicode(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    write_json(path, {"author": "Zoë"})
    assert '"Zoë"' in path.read_text(encoding = "utf-8")


def test_read_json_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_text(json.dumps({"name": "x", "private": True}))
    assert read_json(path) == {"name": "x", "private": True}


@pytest.mark.parametrize(
        "content", ["{oops", "[1, 2]", ""], ids = ["invalid", "array", "empty"], )
def test_read_json_rejects_bad_manifest(tmp_path: Path, content: str) -> None:
    path = tmp_path / "package.json"
    path.write_text(content)
    with pytest.raises(ManifestIOError):
        read_json(path)


def test_read_json_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ManifestIOError):
        read_json(tmp_path / "package.json")


def test_remove_tree(tmp_path: Path) -> None:
    target = tmp_path / ".git"
    (target / "objects" / "ab").mkdir(parents = True)
    (target / "objects" / "ab" / "cdef").write_bytes(b"\x00")
    assert remove_tree(target) is True
    assert not target.exists()
    assert remove_tree(target) is False


def test_remove_tree_file(tmp_path: Path) -> None:
    target = tmp_path / ".git"
    target.write_text("gitdir: ../.git/worktrees/x\n")
    assert remove_tree(target) is True
    assert not target.exists()

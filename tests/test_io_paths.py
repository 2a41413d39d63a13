import os
from pathlib import Path

import pytest

from lstree.utils.io_paths import (
    DirectoryEntry,
    EntryKind,
    classify,
    filter_ignored,
    list_children,
    printable,
    sort_entries,
    write_lines,
)

from conftest import make_tree


def _entries(*names):
    return [DirectoryEntry(n, EntryKind.FILE, Path(n)) for n in names]


def test_classify(tmp_path):
    make_tree(tmp_path, {"f.txt": "", "d": {}})
    assert classify(tmp_path / "f.txt") is EntryKind.FILE
    assert classify(tmp_path / "d") is EntryKind.DIRECTORY
    assert classify(tmp_path / "missing") is EntryKind.MISSING


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="needs mkfifo")
def test_classify_special_file_as_other(tmp_path):
    os.mkfifo(tmp_path / "pipe")
    assert classify(tmp_path / "pipe") is EntryKind.OTHER


def test_list_children_reports_name_and_kind(tmp_path):
    make_tree(tmp_path, {"f.txt": "", "d": {"inner.txt": ""}})
    found = {(e.name, e.kind) for e in list_children(tmp_path)}
    assert found == {("f.txt", EntryKind.FILE), ("d", EntryKind.DIRECTORY)}


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="needs symlinks")
def test_list_children_skips_broken_symlinks(tmp_path):
    make_tree(tmp_path, {"f.txt": ""})
    os.symlink(tmp_path / "nowhere", tmp_path / "dangling")
    assert [e.name for e in list_children(tmp_path)] == ["f.txt"]


def test_list_children_raises_for_missing_directory(tmp_path):
    with pytest.raises(OSError):
        list_children(tmp_path / "missing")


def test_filter_ignored_is_exact():
    kept = filter_ignored(_entries(".git", "git", "a.git", "src"), [".git"])
    assert [e.name for e in kept] == ["git", "a.git", "src"]


def test_sort_entries_codepoint_order():
    assert [e.name for e in sort_entries(_entries("b", "a", "C"))] == ["C", "a", "b"]


def test_sort_entries_is_stable_across_runs():
    names = ["beta", "Alpha", "alpha", "_x", "10", "9"]
    first = [e.name for e in sort_entries(_entries(*names))]
    second = [e.name for e in sort_entries(_entries(*reversed(names)))]
    assert first == second == ["10", "9", "Alpha", "_x", "alpha", "beta"]


def test_write_lines_creates_parents(tmp_path):
    out = write_lines(["docs/", "└───a.txt"], tmp_path / "out" / "tree.txt")
    assert out.read_text(encoding="utf-8") == "docs/\n└───a.txt\n"


def test_printable_replaces_escaped_bytes():
    assert printable(b"bad\xff.txt".decode("utf-8", "surrogateescape")) == "bad�.txt"
    assert printable("plain ünïcode") == "plain ünïcode"


def test_write_lines_accepts_undecodable_names(tmp_path):
    name = b"bad\xff.txt".decode("utf-8", "surrogateescape")
    out = write_lines(["root/", "└───" + name], tmp_path / "tree.txt")
    assert out.read_text(encoding="utf-8") == "root/\n└───bad�.txt\n"

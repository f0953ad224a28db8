# tests/test_assets.py
import os

import pytest

from mclang_up.errors import FilesystemError
from mclang_up.lib.assets import copy_file, copy_tree, ensure_dir, remove_tree


def test_ensure_dir_is_idempotent(tmp_path):
    target = tmp_path / "a" / "b"
    ensure_dir(target)
    ensure_dir(target)
    assert target.is_dir()


def test_ensure_dir_wraps_os_errors(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    with pytest.raises(FilesystemError) as excinfo:
        ensure_dir(blocker / "sub")
    assert excinfo.value.op == "create"


def test_remove_tree_ignores_missing(tmp_path):
    remove_tree(tmp_path / "missing")


def test_remove_tree_removes_directory(tmp_path):
    d = tmp_path / "old"
    (d / "nested").mkdir(parents=True)
    (d / "nested" / "f").write_text("x")

    remove_tree(d)

    assert not d.exists()


def test_remove_tree_dry_run_keeps_directory(tmp_path):
    d = tmp_path / "old"
    d.mkdir()
    remove_tree(d, dry_run=True)
    assert d.exists()


def test_copy_file_into_directory(tmp_path):
    src = tmp_path / "mclangc"
    src.write_text("bin")
    dst = tmp_path / "bin"
    dst.mkdir()

    copy_file(src, dst)

    assert (dst / "mclangc").read_text() == "bin"


def test_copy_file_missing_source(tmp_path):
    with pytest.raises(FilesystemError):
        copy_file(tmp_path / "nope", tmp_path)


def test_copy_tree_depth_first_and_skips_git(tmp_path):
    src = tmp_path / "libmc"
    (src / "std" / "io").mkdir(parents=True)
    (src / "std" / "io" / "print.mcl").write_text("print")
    (src / "core.mcl").write_text("core")
    (src / ".git").mkdir()
    (src / ".git" / "HEAD").write_text("ref")
    dst = tmp_path / "stdlib"

    copy_tree(src, dst)

    assert (dst / "core.mcl").read_text() == "core"
    assert (dst / "std" / "io" / "print.mcl").read_text() == "print"
    assert not (dst / ".git").exists()


def test_copy_tree_overwrites_existing_files(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "a").write_text("new")
    dst = tmp_path / "dst"
    dst.mkdir()
    (dst / "a").write_text("old")

    copy_tree(src, dst)

    assert (dst / "a").read_text() == "new"


def test_copy_tree_missing_source(tmp_path):
    with pytest.raises(FilesystemError):
        copy_tree(tmp_path / "missing", tmp_path / "dst")


def test_copy_tree_dry_run_touches_nothing(tmp_path):
    copy_tree(tmp_path / "missing", tmp_path / "dst", dry_run=True)
    assert not os.path.exists(tmp_path / "dst")

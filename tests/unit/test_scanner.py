"""
Unit tests for the extension scanner.
"""

import os
import pytest

from core.scanner import file_extension, has_extension, has_extension_in
from conftest import make_tree


class TestFileExtension:
    """Test how extensions are read off file names."""

    @pytest.mark.parametrize("name,expected", [
        ("main.rs", "rs"),
        ("archive.tar.gz", "gz"),
        ("Cargo.toml", "toml"),
        ("Makefile", None),
        (".bashrc", None),
        ("trailing.", None),
    ])
    def test_extension(self, name, expected):
        assert file_extension(name) == expected


class TestHasExtensionIn:
    """Test the direct-children check."""

    def test_direct_child(self, tmp_path):
        make_tree(tmp_path, "main.py")
        assert has_extension_in(str(tmp_path), "py") is True

    def test_ignores_nested_files(self, tmp_path):
        make_tree(tmp_path, "pkg/main.py")
        assert has_extension_in(str(tmp_path), "py") is False

    def test_ignores_directories_named_like_files(self, tmp_path):
        make_tree(tmp_path, "weird.py/")
        assert has_extension_in(str(tmp_path), "py") is False

    def test_missing_directory(self, tmp_path):
        assert has_extension_in(str(tmp_path / "nope"), "py") is False


class TestHasExtension:
    """Test the recursive subtree scan."""

    def test_file_in_root(self, tmp_path):
        make_tree(tmp_path, "lib.rs")
        assert has_extension(str(tmp_path), "rs") is True

    def test_deeply_nested_file(self, tmp_path):
        make_tree(tmp_path, "a/b/c/d/lib.rs")
        assert has_extension(str(tmp_path), "rs") is True

    def test_extension_must_match_exactly(self, tmp_path):
        make_tree(tmp_path, "src/main.cpp", "src/header.hpp")
        assert has_extension(str(tmp_path), "c") is False
        assert has_extension(str(tmp_path), "h") is False
        assert has_extension(str(tmp_path), "cpp") is True

    def test_dotfile_has_no_extension(self, tmp_path):
        make_tree(tmp_path, "conf/.rs")
        assert has_extension(str(tmp_path), "rs") is False

    def test_empty_directory(self, tmp_path):
        assert has_extension(str(tmp_path), "rs") is False

    def test_nonexistent_directory(self, tmp_path):
        assert has_extension(str(tmp_path / "missing"), "rs") is False

    def test_checks_its_own_root_not_the_cwd(self, tmp_path, monkeypatch):
        """A match in the working directory must not leak into a scan of another tree."""
        cwd = tmp_path / "cwd"
        other = tmp_path / "other"
        make_tree(cwd, "main.rs")
        make_tree(other, "src/main.py")
        monkeypatch.chdir(cwd)

        assert has_extension(str(other), "rs") is False
        assert has_extension(str(other), "py") is True

    def test_idempotent(self, tmp_path):
        make_tree(tmp_path, "x/y/z.rb", "x/readme.md")
        first = [has_extension(str(tmp_path), e) for e in ("rb", "md", "cs")]
        second = [has_extension(str(tmp_path), e) for e in ("rb", "md", "cs")]
        assert first == second == [True, True, False]

    def test_max_depth(self, tmp_path):
        make_tree(tmp_path, "a/b/lib.rs")
        assert has_extension(str(tmp_path), "rs", max_depth=0) is False
        assert has_extension(str(tmp_path), "rs", max_depth=1) is False
        assert has_extension(str(tmp_path), "rs", max_depth=2) is True

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlink_cycle_terminates(self, tmp_path):
        make_tree(tmp_path, "a/b/readme.md")
        try:
            os.symlink(tmp_path / "a", tmp_path / "a" / "b" / "loop", target_is_directory=True)
        except OSError:
            pytest.skip("cannot create symlinks here")

        assert has_extension(str(tmp_path), "rs") is False
        assert has_extension(str(tmp_path), "md") is True

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_shorter_path_rescans_directory_seen_through_symlink(self, tmp_path):
        """A directory first reached deep through a symlink is walked again from a shallower path."""
        make_tree(tmp_path, "a/x/", "b/c/d/lib.rs")
        try:
            os.symlink(tmp_path / "b" / "c", tmp_path / "a" / "x" / "link", target_is_directory=True)
        except OSError:
            pytest.skip("cannot create symlinks here")

        # 'a' sorts first, so b/c is met at depth 3 via a/x/link before depth 2 via b
        assert has_extension(str(tmp_path), "rs", max_depth=3) is True
        assert has_extension(str(tmp_path), "rs", max_depth=2) is False

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinked_directory_not_followed_when_disabled(self, tmp_path):
        make_tree(tmp_path, "real/lib.rs", "project/")
        try:
            os.symlink(tmp_path / "real", tmp_path / "project" / "link", target_is_directory=True)
        except OSError:
            pytest.skip("cannot create symlinks here")

        project = str(tmp_path / "project")
        assert has_extension(project, "rs") is True
        assert has_extension(project, "rs", follow_symlinks=False) is False

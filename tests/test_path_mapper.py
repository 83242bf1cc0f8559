"""Tests for path mapping module."""

import logging
from pathlib import Path

import pytest

from folder_mirror.file_ops import FileOpsError
from folder_mirror.path_mapper import DirectoryPather, mirrored_path


class TestMirroredPath:
    """mirrored_path tests."""

    def test_one_level(self):
        """Test mapping a file one directory deep."""
        assert mirrored_path("/src/sub/f.txt", "/src", "/dst") == str(Path("/dst/sub/f.txt"))

    def test_two_levels(self):
        """Test mapping a file two directories deep."""
        result = mirrored_path("/src/a/b/f.txt", "/src", "/dst")

        assert result == str(Path("/dst/a/b/f.txt"))

    def test_file_at_root(self):
        """Test mapping a file directly under the root."""
        assert mirrored_path("/src/f.txt", "/src", "/dst") == str(Path("/dst/f.txt"))

    def test_root_maps_to_root(self):
        """Test mapping the root itself."""
        assert mirrored_path("/src", "/src", "/dst") == str(Path("/dst"))

    def test_reverse_direction(self):
        """Test that mapping is symmetric."""
        target = mirrored_path("/src/a/b/f.txt", "/src", "/dst")

        assert mirrored_path(target, "/dst", "/src") == str(Path("/src/a/b/f.txt"))

    def test_root_name_inside_path_is_untouched(self):
        """Test that only the leading root is replaced."""
        result = mirrored_path("/src/src/f.txt", "/src", "/dst")

        assert result == str(Path("/dst/src/f.txt"))

    def test_path_outside_root_raises(self):
        """Test that a path not under the root is rejected."""
        with pytest.raises(ValueError):
            mirrored_path("/other/f.txt", "/src", "/dst")

    def test_sibling_with_common_prefix_raises(self):
        """Test that '/src2' is not treated as being under '/src'."""
        with pytest.raises(ValueError):
            mirrored_path("/src2/f.txt", "/src", "/dst")


class TestDirectoryPather:
    """DirectoryPather tests."""

    def test_to_target_and_back(self, temp_dirs):
        """Test converting between source and target paths."""
        source, target = temp_dirs
        pather = DirectoryPather(str(source), str(target))

        target_path = pather.to_target(source / "a" / "f.txt")

        assert target_path == str(target / "a" / "f.txt")
        assert pather.to_source(target_path) == str(source / "a" / "f.txt")

    def test_ensure_target_directory_creates_nested(self, temp_dirs, caplog):
        """Test that missing directories and ancestors are created."""
        source, target = temp_dirs
        pather = DirectoryPather(str(source), str(target))

        with caplog.at_level(logging.DEBUG, logger="mirror"):
            created = pather.ensure_target_directory(source / "a" / "b" / "f.txt")

        assert created == target / "a" / "b"
        assert created.is_dir()
        assert "CREATED" in caplog.text

    def test_ensure_target_directory_existing(self, temp_dirs, caplog):
        """Test that an existing directory is left alone and not reported."""
        source, target = temp_dirs
        (target / "a").mkdir()
        pather = DirectoryPather(str(source), str(target))

        with caplog.at_level(logging.INFO, logger="mirror"):
            pather.ensure_target_directory(source / "a" / "f.txt")

        assert (target / "a").is_dir()
        assert "CREATED" not in caplog.text

    def test_ensure_target_directory_for_root_file(self, temp_dirs):
        """Test that a file at the source root maps to the target root."""
        source, target = temp_dirs
        pather = DirectoryPather(str(source), str(target))

        assert pather.ensure_target_directory(source / "f.txt") == target

    def test_ensure_target_directory_blocked_by_file(self, temp_dirs):
        """Test that a file in the way raises FileOpsError."""
        source, target = temp_dirs
        (target / "a").write_text("not a directory")
        pather = DirectoryPather(str(source), str(target))

        with pytest.raises(FileOpsError):
            pather.ensure_target_directory(source / "a" / "f.txt")

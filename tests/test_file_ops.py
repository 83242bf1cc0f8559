"""Tests for file operations module."""

import pytest

from folder_mirror.file_ops import TEMP_SUFFIX, FileOps, FileOpsError


class TestFileOps:
    """FileOps tests."""

    def test_copy_file(self, temp_dirs):
        """Test copying a file."""
        source, target = temp_dirs
        src_file = source / "source.txt"
        src_file.write_text("content")

        file_ops = FileOps()
        dst_file = target / "dest.txt"

        file_ops.copy_file(str(src_file), str(dst_file))

        assert dst_file.exists()
        assert dst_file.read_text() == "content"

    def test_copy_file_overwrites(self, temp_dirs):
        """Test that an existing destination is replaced."""
        source, target = temp_dirs
        src_file = source / "file.txt"
        src_file.write_text("new")
        dst_file = target / "file.txt"
        dst_file.write_text("old content that is longer")

        FileOps().copy_file(str(src_file), str(dst_file))

        assert dst_file.read_text() == "new"

    def test_copy_leaves_no_temp_file(self, temp_dirs):
        """Test that the temporary file is moved into place."""
        source, target = temp_dirs
        src_file = source / "file.txt"
        src_file.write_text("content")

        FileOps().copy_file(str(src_file), str(target / "file.txt"))

        assert [p.name for p in target.iterdir()] == ["file.txt"]

    def test_copy_nonexistent_file(self, temp_dirs):
        """Test copying non-existent file raises error."""
        source, target = temp_dirs

        file_ops = FileOps()
        with pytest.raises(FileOpsError):
            file_ops.copy_file(str(source / "nonexistent.txt"), str(target / "dest.txt"))

        assert not any(p.name.endswith(TEMP_SUFFIX) for p in target.iterdir())

    def test_copy_into_missing_directory_raises(self, temp_dirs):
        """Test that copy does not create directories itself."""
        source, target = temp_dirs
        src_file = source / "file.txt"
        src_file.write_text("content")

        with pytest.raises(FileOpsError):
            FileOps().copy_file(str(src_file), str(target / "missing" / "file.txt"))

    def test_ensure_directory(self, temp_dirs):
        """Test ensuring directory exists."""
        source, _ = temp_dirs
        nested_dir = source / "a" / "b" / "c"

        file_ops = FileOps()
        assert file_ops.ensure_directory(str(nested_dir)) is True
        assert nested_dir.is_dir()
        assert file_ops.ensure_directory(str(nested_dir)) is False

"""File operations layer for mirror actions."""

import os
import shutil
from pathlib import Path

from folder_mirror.logging_setup import get_logger

logger = get_logger()

TEMP_SUFFIX = ".mirror-tmp"


class FileOpsError(Exception):
    """Raised when file operation fails."""

    pass


class FileOps:
    """Handles file copy and directory creation."""

    def copy_file(self, src: str, dst: str) -> None:
        """Copy file content from source to destination, overwriting it.

        The content is written to a temporary file next to the destination
        and then moved into place, so a reader never sees a half-written file.

        Args:
            src: Source file path
            dst: Destination file path

        Raises:
            FileOpsError: If copy fails
        """
        src_path = Path(src)
        dst_path = Path(dst)
        tmp_path = dst_path.with_name(f".{dst_path.name}{TEMP_SUFFIX}")

        try:
            # Skip unnecessary work if source and destination point to same file
            if dst_path.exists() and os.path.samefile(src_path, dst_path):
                logger.debug(f"Skipped copy; source and destination are identical: {src}")
                return

            shutil.copyfile(str(src_path), str(tmp_path))
            os.replace(tmp_path, dst_path)
        except (OSError, shutil.Error) as e:
            try:
                tmp_path.unlink()
            except FileNotFoundError:
                pass
            except OSError as cleanup_error:
                logger.warning(f"Could not remove temporary file {tmp_path}: {cleanup_error}")
            raise FileOpsError(f"Copy failed: {e}") from e

        logger.debug(f"Copied file: {src} -> {dst}")

    def ensure_directory(self, path: str) -> bool:
        """Ensure directory exists.

        Args:
            path: Directory path

        Returns:
            True if the directory was created, False if it already existed

        Raises:
            FileOpsError: If creation fails
        """
        dir_path = Path(path)
        if dir_path.is_dir():
            return False
        try:
            dir_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileOpsError(f"Directory creation failed: {e}") from e
        return True

"""Directory scanner for file enumeration."""

from pathlib import Path
from typing import Iterator, List, Tuple

from folder_mirror.logging_setup import get_logger

logger = get_logger()


class Scanner:
    """Walks directory trees depth-first in a stable order."""

    def _list_directory(self, directory: Path, is_root: bool) -> Tuple[List[Path], List[Path]]:
        """List files and subdirectories of a directory, sorted by name.

        Errors listing the root propagate. Errors listing a nested directory
        are logged and the directory is skipped for this walk.
        """
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            if is_root:
                raise
            logger.warning(f"Could not list directory {directory}: {e}")
            return [], []

        files = []
        subdirs = []
        for entry in entries:
            try:
                if entry.is_symlink() and entry.is_dir():
                    # Symlinked directories are not followed to avoid cycles
                    logger.debug(f"Skipping symlinked directory: {entry}")
                elif entry.is_dir():
                    subdirs.append(entry)
                elif entry.is_file():
                    files.append(entry)
            except OSError as e:
                logger.warning(f"Could not stat {entry}: {e}")
        return files, subdirs

    def walk(self, root_path: str) -> Iterator[Tuple[Path, List[Path]]]:
        """Yield (directory, files) pairs depth-first, starting at root.

        Files of a directory come before any of its subdirectories.

        Args:
            root_path: Directory to walk

        Raises:
            OSError: If the root itself cannot be listed
        """
        stack = [(Path(root_path), True)]
        while stack:
            directory, is_root = stack.pop()
            files, subdirs = self._list_directory(directory, is_root)
            yield directory, files
            # Reversed so the first subdirectory is visited first
            stack.extend((subdir, False) for subdir in reversed(subdirs))

    def iter_files(self, root_path: str) -> Iterator[Path]:
        """Yield every file under root, recursively.

        Args:
            root_path: Directory to scan

        Returns:
            Iterator of absolute file paths
        """
        for _, files in self.walk(root_path):
            yield from files

    def has_any_file(self, root_path: str) -> bool:
        """Check whether any file exists anywhere under root."""
        for _ in self.iter_files(root_path):
            return True
        return False

"""Seed the replica snapshot from an existing target tree."""

from pathlib import Path
from typing import Optional

from folder_mirror.file_ops import TEMP_SUFFIX
from folder_mirror.fingerprint import DEFAULT_CHUNK_SIZE, fingerprint_of_file
from folder_mirror.logging_setup import get_logger
from folder_mirror.replica_snapshot import ReplicaSnapshot
from folder_mirror.scanner import Scanner

logger = get_logger()


class TargetBootstrapper:
    """Fingerprints files already present in the target tree.

    Running this once at startup lets a restarted process recognise files that
    are already up to date instead of copying the whole tree again.
    """

    def __init__(
        self,
        snapshot: ReplicaSnapshot,
        scanner: Optional[Scanner] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        """Initialize bootstrapper.

        Args:
            snapshot: Snapshot to populate
            scanner: Directory scanner
            chunk_size: Read chunk size for fingerprinting
        """
        self.snapshot = snapshot
        self.scanner = scanner or Scanner()
        self.chunk_size = chunk_size

    def bootstrap(self, target_root: str) -> int:
        """Add every file under target_root to the snapshot.

        Args:
            target_root: Absolute target root

        Returns:
            Number of snapshot entries added
        """
        if not self.scanner.has_any_file(target_root):
            logger.info(f"Target {target_root} has no files, nothing to bootstrap")
            return 0

        logger.info(f"Bootstrapping replica snapshot from {target_root}")
        added = 0
        for directory, files in self.scanner.walk(target_root):
            logger.debug(f"Bootstrap directory {directory}")
            for file_path in files:
                if file_path.name.endswith(TEMP_SUFFIX):
                    self._remove_leftover(file_path)
                    continue
                try:
                    fingerprint = fingerprint_of_file(file_path, self.chunk_size)
                except OSError as e:
                    # Left out of the snapshot, so the first cycle copies it again
                    logger.warning(f"Could not fingerprint target file {file_path}: {e}")
                    continue
                self.snapshot.insert(str(file_path), fingerprint)
                added += 1

        logger.info(f"Bootstrapped {added} files from {target_root}")
        return added

    def _remove_leftover(self, file_path: Path) -> None:
        """Delete a temporary copy left behind by an interrupted copy."""
        try:
            file_path.unlink()
            logger.info(f"Removed leftover temporary file {file_path}")
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Could not remove leftover temporary file {file_path}: {e}")

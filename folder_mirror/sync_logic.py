"""Core mirror reconciliation engine."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Set

from folder_mirror.file_ops import FileOps, FileOpsError
from folder_mirror.fingerprint import DEFAULT_CHUNK_SIZE, fingerprint_of_file
from folder_mirror.logging_setup import get_logger
from folder_mirror.path_mapper import DirectoryPather
from folder_mirror.replica_snapshot import ReplicaSnapshot
from folder_mirror.scanner import Scanner

logger = get_logger()


class SyncAction(Enum):
    """Outcome of evaluating one source file."""

    COPY_NEW = "COPY_NEW"
    COPY_CHANGED = "COPY_CHANGED"
    UNCHANGED = "UNCHANGED"
    FAILED = "FAILED"


@dataclass
class FileResult:
    """What happened to a single source file during a cycle."""

    action: SyncAction
    source_path: str
    target_path: str
    fingerprint: Optional[str] = None
    error: Optional[str] = None

    @property
    def copied(self) -> bool:
        """Whether the file was copied to the target."""
        return self.action in (SyncAction.COPY_NEW, SyncAction.COPY_CHANGED)


@dataclass
class CycleReport:
    """Results of one sync cycle."""

    results: List[FileResult] = field(default_factory=list)
    stale: List[str] = field(default_factory=list)

    @property
    def copied(self) -> List[FileResult]:
        """Files copied this cycle."""
        return [r for r in self.results if r.copied]

    @property
    def unchanged(self) -> List[FileResult]:
        """Files already up to date."""
        return [r for r in self.results if r.action == SyncAction.UNCHANGED]

    @property
    def failed(self) -> List[FileResult]:
        """Files skipped this cycle because of an error."""
        return [r for r in self.results if r.action == SyncAction.FAILED]

    def summary(self) -> str:
        """One line summary for the log."""
        return (
            f"{len(self.results)} files evaluated: {len(self.copied)} copied, "
            f"{len(self.unchanged)} unchanged, {len(self.failed)} failed, "
            f"{len(self.stale)} deleted in source"
        )


class SyncEngine:
    """Mirrors a source tree into a target tree, one cycle at a time.

    The engine only ever adds or overwrites files at the target. Files that
    disappear from the source are dropped from the snapshot and reported.
    """

    def __init__(
        self,
        source_root: str,
        target_root: str,
        snapshot: ReplicaSnapshot,
        scanner: Optional[Scanner] = None,
        file_ops: Optional[FileOps] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        """Initialize sync engine.

        Args:
            source_root: Absolute source root
            target_root: Absolute target root
            snapshot: Snapshot of the target tree, shared across cycles
            scanner: Directory scanner
            file_ops: File operations handler
            chunk_size: Read chunk size for fingerprinting
        """
        self.source_root = source_root
        self.target_root = target_root
        self.snapshot = snapshot
        self.scanner = scanner or Scanner()
        self.file_ops = file_ops or FileOps()
        self.pather = DirectoryPather(source_root, target_root, self.file_ops)
        self.chunk_size = chunk_size

    def run_cycle(self) -> CycleReport:
        """Run one full cycle: enumerate source, reconcile, report stale entries.

        Returns:
            CycleReport for this cycle

        Raises:
            OSError: If the source root itself cannot be listed
        """
        report = CycleReport()
        touched: Set[str] = set()
        skipped: Set[str] = set()

        for source_file in self.scanner.iter_files(self.source_root):
            result = self._sync_file(source_file)
            report.results.append(result)
            if result.action == SyncAction.FAILED:
                skipped.add(result.target_path)
            else:
                touched.add(result.target_path)

        report.stale = self._drop_stale_entries(touched, skipped)
        logger.info(report.summary())
        return report

    def _sync_file(self, source_file: Path) -> FileResult:
        """Decide whether a source file needs copying and copy it if so."""
        source_path = str(source_file)
        target_path = self.pather.to_target(source_file)
        logger.debug(f"Evaluate file {source_path}")

        stored = self.snapshot.get(target_path)
        if stored is None:
            logger.debug(f"File {source_path} is not in the replica, needs to be copied")
            action = SyncAction.COPY_NEW
        else:
            try:
                current = fingerprint_of_file(source_file, self.chunk_size)
            except OSError as e:
                logger.error(f"Failed to fingerprint {source_path}: {e}")
                return FileResult(SyncAction.FAILED, source_path, target_path, error=str(e))

            if current == stored:
                logger.debug(f"Files are identical, no need to copy {source_path}")
                return FileResult(SyncAction.UNCHANGED, source_path, target_path, stored)

            logger.debug(f"Files are different, need to overwrite {target_path}")
            self.snapshot.remove(target_path)
            action = SyncAction.COPY_CHANGED

        return self._copy(source_path, target_path, action)

    def _copy(self, source_path: str, target_path: str, action: SyncAction) -> FileResult:
        """Copy one file and record its new fingerprint."""
        try:
            self.pather.ensure_target_directory(source_path)
            self.file_ops.copy_file(source_path, target_path)
            fingerprint = fingerprint_of_file(target_path, self.chunk_size)
        except (FileOpsError, OSError) as e:
            logger.error(f"Failed to copy {source_path} to {target_path}: {e}")
            return FileResult(SyncAction.FAILED, source_path, target_path, error=str(e))

        self.snapshot.insert(target_path, fingerprint)
        if action == SyncAction.COPY_NEW:
            logger.info(f"ADDED: File {source_path} added to target dir")
        else:
            logger.info(f"UPDATED: File {target_path} overwritten from source")
        return FileResult(action, source_path, target_path, fingerprint)

    def _drop_stale_entries(self, touched: Set[str], skipped: Set[str]) -> List[str]:
        """Remove snapshot entries whose source file was not seen this cycle.

        Nothing is deleted from disk. Entries for files that failed this
        cycle are kept until the file is evaluated again.

        Returns:
            The stale target paths, sorted
        """
        stale = sorted(p for p in self.snapshot.paths() if p not in touched and p not in skipped)
        if not stale:
            logger.debug("Replica matches source. No file was deleted in source")
            return stale

        for target_path in stale:
            logger.info(f"DEL: This file was deleted in source {target_path}")
            self.snapshot.remove(target_path)
        return stale

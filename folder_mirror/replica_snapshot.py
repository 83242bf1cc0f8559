"""In-memory snapshot of the target tree."""

from typing import Dict, Iterator, List, Optional

from folder_mirror.logging_setup import get_logger

logger = get_logger()


class ReplicaSnapshot:
    """Maps target file paths to their last known fingerprint.

    Keys are compared by exact string equality. Callers pass absolute paths
    built the same way every time; nothing is normalized here.
    """

    def __init__(self, entries: Optional[Dict[str, str]] = None):
        """Initialize snapshot.

        Args:
            entries: Optional initial path -> fingerprint entries
        """
        self._entries: Dict[str, str] = dict(entries or {})

    def get(self, target_path: str) -> Optional[str]:
        """Get the stored fingerprint for a target path, or None."""
        return self._entries.get(target_path)

    def insert(self, target_path: str, fingerprint: str) -> None:
        """Record the fingerprint of a target path."""
        self._entries[target_path] = fingerprint
        logger.debug(f"Snapshot insert: {target_path} [{fingerprint}]")

    def remove(self, target_path: str) -> None:
        """Forget a target path. Unknown paths are ignored."""
        if self._entries.pop(target_path, None) is not None:
            logger.debug(f"Snapshot remove: {target_path}")

    def paths(self) -> List[str]:
        """Get all target paths currently in the snapshot."""
        return list(self._entries)

    def to_dict(self) -> Dict[str, str]:
        """Return a copy of the snapshot entries."""
        return self._entries.copy()

    def __contains__(self, target_path: object) -> bool:
        return target_path in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths())

    def __len__(self) -> int:
        return len(self._entries)

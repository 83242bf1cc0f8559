"""Path mapping between the source and target trees."""

import os
from pathlib import Path
from typing import Optional, Union

from folder_mirror.file_ops import FileOps
from folder_mirror.logging_setup import get_logger

logger = get_logger()

PathLike = Union[str, Path]


def mirrored_path(path: PathLike, from_root: PathLike, to_root: PathLike) -> str:
    """Map a path under one root to the same relative location under another.

    Works in both directions: source -> target and target -> source.

    Args:
        path: Path located under from_root
        from_root: Root the path currently lives under
        to_root: Root to map the path onto

    Returns:
        The mapped path as a string

    Raises:
        ValueError: If path is not located under from_root
    """
    relative = Path(path).relative_to(from_root)
    if relative == Path("."):
        return str(Path(to_root))
    return str(Path(to_root) / relative)


class DirectoryPather:
    """Derives target paths and creates target directories."""

    def __init__(self, source_root: str, target_root: str, file_ops: Optional[FileOps] = None):
        """Initialize pather.

        Args:
            source_root: Absolute source root
            target_root: Absolute target root
            file_ops: File operations handler
        """
        self.source_root = source_root
        self.target_root = target_root
        self.file_ops = file_ops or FileOps()

    def to_target(self, source_path: PathLike) -> str:
        """Get the target path mirroring a source path."""
        return mirrored_path(source_path, self.source_root, self.target_root)

    def to_source(self, target_path: PathLike) -> str:
        """Get the source path mirrored by a target path."""
        return mirrored_path(target_path, self.target_root, self.source_root)

    def ensure_target_directory(self, source_file: PathLike) -> Path:
        """Create the target directory that will hold a source file's copy.

        Missing ancestors are created too.

        Args:
            source_file: Source file about to be copied

        Returns:
            The target directory

        Raises:
            FileOpsError: If the directory cannot be created
        """
        target_dir = Path(self.to_target(os.path.dirname(source_file)))
        if self.file_ops.ensure_directory(str(target_dir)):
            logger.info(f"CREATED: Directory {target_dir} created")
        else:
            logger.debug(f"Directory {target_dir} exists, no need to create")
        return target_dir

"""Content fingerprints for change detection."""

import hashlib
from pathlib import Path
from typing import Union

DEFAULT_CHUNK_SIZE = 64 * 1024


def fingerprint_of_file(path: Union[str, Path], chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """Compute the MD5 fingerprint of a file's content.

    The file is read in chunks, so large files are not loaded into memory.

    Args:
        path: File to fingerprint
        chunk_size: Number of bytes read per chunk

    Returns:
        Uppercase hex digest without separators, e.g. "8C7DD9..."

    Raises:
        OSError: If the file cannot be opened or read
    """
    digest = hashlib.md5()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            digest.update(chunk)
    return digest.hexdigest().upper()


def fingerprint_of_string(data: str) -> str:
    """Compute the MD5 fingerprint of a string's UTF-8 bytes."""
    return hashlib.md5(data.encode("utf-8")).hexdigest().upper()

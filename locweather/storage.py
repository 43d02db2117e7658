"""
Durable storage for the weather cache.

The cache is stored as one opaque blob that is always written in full, there
are no partial or append writes.
"""

from pathlib import Path
from typing import Protocol

import structlog

logger = structlog.get_logger()


class BlobStorage(Protocol):
    """Protocol for storage backends holding a single blob."""

    def exists(self) -> bool: ...

    def read(self) -> bytes: ...

    def write(self, content: bytes) -> None: ...


class FileStorage:
    """
    Store the blob in a file on disk. Parent directories are created on the
    first write.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> bytes:
        return self.path.read_bytes()

    def write(self, content: bytes) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(content)
        logger.debug("Wrote cache file", path=str(self.path), size=len(content))

    def __repr__(self) -> str:
        return f"FileStorage({str(self.path)!r})"

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Storage(Protocol):
    """Whole-file byte storage used to open and save buffers."""

    def read(self, path: str) -> bytes: ...

    def write(self, path: str, data: bytes) -> None: ...


class FileStorage:
    """Reads and writes whole files on the local filesystem.

    OS errors (`FileNotFoundError`, `PermissionError`, `IsADirectoryError`, ...)
    propagate unchanged; callers decide how to report them.
    """

    def read(self, path: str) -> bytes:
        with open(path, "rb") as fh:
            data = fh.read()
        logger.debug("read %d bytes from %s", len(data), path)
        return data

    def write(self, path: str, data: bytes) -> None:
        with open(path, "wb") as fh:
            fh.write(bytes(data))
        logger.debug("wrote %d bytes to %s", len(data), path)


class MemoryStorage:
    """In-memory storage keyed by path; records every write."""

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self.files: dict[str, bytes] = dict(files or {})
        self.writes: list[tuple[str, bytes]] = []
        self.fail_writes: OSError | None = None

    def read(self, path: str) -> bytes:
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(f"File not found: {path}") from None

    def write(self, path: str, data: bytes) -> None:
        if self.fail_writes is not None:
            raise self.fail_writes
        self.files[path] = bytes(data)
        self.writes.append((path, bytes(data)))

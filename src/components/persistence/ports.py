"""
Persistence component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class FileWriterPort(Protocol):
    """Port for the filesystem write primitive."""

    def write_bytes(self, path: str, data: bytes) -> None:
        """
        Write all bytes to path, creating or truncating the file.

        Must not create missing parent directories.
        Raises OSError (or ValueError for malformed paths) on failure.
        """
        ...

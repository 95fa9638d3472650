"""
Local filesystem write adapter.

Implements FileWriterPort on top of the host filesystem. Each call opens,
writes and closes its own handle; nothing is shared between calls.
"""

from __future__ import annotations


class LocalFileWriter:
    """
    Writes whole payloads to arbitrary host paths.

    No sandboxing: any path the process may write to is accepted.
    Parent directories are never created.
    """

    def write_bytes(self, path: str, data: bytes) -> None:
        """
        Write all bytes to path, creating or truncating it.

        The path goes to the OS untouched: a trailing separator names a
        directory and must fail rather than resolve to a plain file.
        """
        with open(path, "wb") as f:
            f.write(data)

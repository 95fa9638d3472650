"""
Persistence component - write an in-memory buffer to a user-chosen path.

Validates the destination, hands the whole payload to the filesystem write
primitive and reports a tagged outcome. Failures are returned as values,
never raised to the caller.

Invariants:
- A SaveResult is produced only after the write call returned normally
- Existing files are overwritten without confirmation
- Missing parent directories are never created
- The returned path designates the same file as the requested path
"""

from __future__ import annotations

import errno
import logging
from pathlib import Path

from .models import SaveError, SaveErrorKind, SaveOutput, SaveRequest, SaveResult
from .ports import FileWriterPort

logger = logging.getLogger(__name__)

FAILURE_PREFIX = "Failed to write file"

# errno values that mean the path itself is unusable
_INVALID_PATH_ERRNOS = frozenset(
    {errno.ENOENT, errno.ENOTDIR, errno.EISDIR, errno.ENAMETOOLONG, errno.EINVAL}
)


# --- Pure Functions ---


def normalize_path(path: str) -> str:
    """
    Normalize a path without changing the file it designates.

    Collapses redundant separators and "." segments. ".." is kept as is,
    since resolving it lexically could step out of a symlinked directory.
    """
    return str(Path(path))


def validate_path(path: str) -> SaveError | None:
    """Check a destination path before touching the filesystem."""
    if not path:
        return SaveError(
            kind=SaveErrorKind.INVALID_PATH,
            message=f"{FAILURE_PREFIX}: path must not be empty",
            path=path,
        )
    if "\x00" in path:
        return SaveError(
            kind=SaveErrorKind.INVALID_PATH,
            message=f"{FAILURE_PREFIX}: path contains a NUL character",
            path=path,
        )
    return None


def classify_os_error(err: OSError) -> SaveErrorKind:
    """Map an OS-level failure onto the error taxonomy."""
    if isinstance(err, PermissionError):
        return SaveErrorKind.PERMISSION_DENIED
    if isinstance(err, (FileNotFoundError, NotADirectoryError, IsADirectoryError)):
        return SaveErrorKind.INVALID_PATH
    if err.errno in _INVALID_PATH_ERRNOS:
        return SaveErrorKind.INVALID_PATH
    return SaveErrorKind.IO_FAILURE


def failure_from_exception(err: Exception, path: str) -> SaveError:
    """Build a tagged error embedding the underlying failure description."""
    if isinstance(err, OSError):
        kind = classify_os_error(err)
    else:
        # ValueError from the OS layer, e.g. a path the platform cannot encode
        kind = SaveErrorKind.INVALID_PATH
    return SaveError(kind=kind, message=f"{FAILURE_PREFIX}: {err}", path=path)


# --- Component Entry Point ---


def run_save(
    inp: SaveRequest,
    *,
    writer: FileWriterPort,
) -> SaveOutput:
    """
    Write the request payload to the request path.

    Args:
        inp: Destination path and payload bytes.
        writer: Filesystem write port.

    Returns:
        SaveOutput with either the normalized result or a tagged error.
    """
    invalid = validate_path(inp.path)
    if invalid is not None:
        logger.warning("Save rejected (%s): %r", invalid.kind.value, inp.path)
        return SaveOutput(error=invalid)

    try:
        # The OS sees the path as received; a trailing separator must still fail
        writer.write_bytes(inp.path, inp.data)
    except (OSError, ValueError) as err:
        failure = failure_from_exception(err, inp.path)
        logger.warning("Save failed (%s) for %s: %s", failure.kind.value, inp.path, err)
        return SaveOutput(error=failure)

    normalized = normalize_path(inp.path)
    logger.info("Saved %d bytes to %s", len(inp.data), normalized)
    return SaveOutput(result=SaveResult(path=normalized))


def run(inp: SaveRequest, *, writer: FileWriterPort) -> SaveOutput:
    """Main entry point for the persistence component."""
    return run_save(inp, writer=writer)

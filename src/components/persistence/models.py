"""
Persistence component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# --- Error Kinds ---


class SaveErrorKind(str, Enum):
    """Failure kinds a caller can branch on."""

    INVALID_PATH = "InvalidPath"
    PERMISSION_DENIED = "PermissionDenied"
    IO_FAILURE = "IOFailure"


@dataclass(frozen=True)
class SaveError:
    """
    Tagged save failure.

    The message always carries the human-readable description of the
    underlying fault, prefixed with a fixed phrase.
    """

    kind: SaveErrorKind
    message: str
    path: str | None = None

    def to_payload(self) -> dict[str, str | None]:
        return {"kind": self.kind.value, "message": self.message, "path": self.path}


# --- Input Models ---


@dataclass(frozen=True)
class SaveRequest:
    """Destination path and opaque payload for a single save."""

    path: str
    data: bytes


# --- Output Models ---


@dataclass(frozen=True)
class SaveResult:
    """Successful save. `success` is always True when produced."""

    path: str
    success: bool = True

    def to_payload(self) -> dict[str, bool | str]:
        return {"success": self.success, "path": self.path}


@dataclass(frozen=True)
class SaveOutput:
    """Output of the save operation: exactly one of result/error is set."""

    result: SaveResult | None = None
    error: SaveError | None = None

    def __post_init__(self) -> None:
        """Validate that exactly one outcome is present."""
        if (self.result is None) == (self.error is None):
            raise ValueError("SaveOutput requires exactly one of result or error")

    @property
    def success(self) -> bool:
        return self.result is not None and self.error is None

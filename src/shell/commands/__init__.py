"""
Host command boundary - dispatch table and command bindings.
"""

from .dispatch import (
    INVALID_PAYLOAD,
    UNKNOWN_COMMAND,
    CommandError,
    CommandRegistry,
    CommandResponse,
    CommandSpec,
)
from .handlers import (
    SAVE_VISUALIZATION,
    SaveVisualizationRequest,
    SaveVisualizationResponse,
    build_registry,
)

__all__ = [
    "CommandError",
    "CommandRegistry",
    "CommandResponse",
    "CommandSpec",
    "INVALID_PAYLOAD",
    "UNKNOWN_COMMAND",
    "SAVE_VISUALIZATION",
    "SaveVisualizationRequest",
    "SaveVisualizationResponse",
    "build_registry",
]

"""
Persistence component - save an in-memory buffer to the local filesystem.
"""

from .component import (
    FAILURE_PREFIX,
    classify_os_error,
    failure_from_exception,
    normalize_path,
    run,
    run_save,
    validate_path,
)
from .models import (
    SaveError,
    SaveErrorKind,
    SaveOutput,
    SaveRequest,
    SaveResult,
)
from .ports import FileWriterPort

__all__ = [
    # Entry points
    "run",
    "run_save",
    # Pure functions
    "normalize_path",
    "validate_path",
    "classify_os_error",
    "failure_from_exception",
    "FAILURE_PREFIX",
    # Models
    "SaveError",
    "SaveErrorKind",
    "SaveOutput",
    "SaveRequest",
    "SaveResult",
    # Ports
    "FileWriterPort",
]

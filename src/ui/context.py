from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from pathlib import Path

from src.rules.models import Rules
from src.shell.commands import SAVE_VISUALIZATION, CommandRegistry, build_registry
from src.ui.state import AppState

logger = logging.getLogger(__name__)


@dataclass
class StatusMessage:
    text: str
    is_error: bool = False


@dataclass
class AppContext:
    """Everything the views need: rules, the command table and UI state."""

    rules: Rules
    registry: CommandRegistry
    state: AppState

    @classmethod
    def create(cls, rules: Rules, registry: CommandRegistry | None = None) -> AppContext:
        if registry is None:
            registry = build_registry(enabled=rules.commands.enabled)
        return cls(rules=rules, registry=registry, state=AppState())

    def load_buffer(self, source_path: str) -> StatusMessage:
        """Read a file chosen in the open dialog into the export buffer."""
        try:
            data = Path(source_path).read_bytes()
        except OSError as e:
            logger.error(f"Could not read {source_path}: {e}")
            return StatusMessage(f"Could not read {source_path}: {e}", is_error=True)

        self.state.load(data, source_path)
        return StatusMessage(f"Loaded {len(data)} bytes from {Path(source_path).name}")

    def save_buffer(self, destination: str | None) -> StatusMessage | None:
        """
        Send the buffer through the save command.

        Returns None when the save dialog was cancelled.
        """
        if destination is None:
            return None

        encoded = base64.b64encode(self.state.buffer).decode("ascii")
        response = self.registry.invoke(
            SAVE_VISUALIZATION, {"path": destination, "data_b64": encoded}
        )
        if not response.ok:
            assert response.error is not None
            self.state.last_error = response.error.message
            return StatusMessage(
                f"{response.error.kind}: {response.error.message}", is_error=True
            )

        assert response.result is not None
        saved_path = response.result["path"]
        self.state.last_saved_path = saved_path
        self.state.last_error = None
        return StatusMessage(f"Saved to {saved_path}")

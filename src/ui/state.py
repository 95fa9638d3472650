from dataclasses import dataclass


@dataclass
class AppState:
    """In-memory buffer awaiting export, plus the last save outcome."""

    buffer: bytes = b""
    buffer_source: str | None = None
    last_saved_path: str | None = None
    last_error: str | None = None

    def load(self, data: bytes, source: str) -> None:
        self.buffer = data
        self.buffer_source = source
        self.last_error = None

    def clear(self) -> None:
        self.buffer = b""
        self.buffer_source = None
        self.last_saved_path = None
        self.last_error = None

    def outcome_text(self) -> str:
        """One-line summary of the last save for the export panel."""
        if self.last_error:
            return f"Last save failed: {self.last_error}"
        if self.last_saved_path:
            return f"Last saved to {self.last_saved_path}"
        return ""

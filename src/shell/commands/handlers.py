"""
Command bindings.

Wires components to adapters and registers them in the dispatch table.
"""

from __future__ import annotations

import base64
import binascii
from collections.abc import Iterable
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.adapters.fs.filestore import LocalFileWriter
from src.components.persistence import FileWriterPort, SaveRequest, run_save

from .dispatch import CommandError, CommandRegistry, Handler

SAVE_VISUALIZATION = "save_visualization"

Byte = Annotated[int, Field(ge=0, le=255)]


# --- Request/Response Models ---


class SaveVisualizationRequest(BaseModel):
    """
    Payload for save_visualization.

    The buffer arrives either as a list of byte values (what a JS byte
    array serializes to) or as a base64 string, never both.
    """

    model_config = ConfigDict(extra="forbid")

    path: str = Field(..., description="Destination path chosen by the user")
    data: list[Byte] | None = Field(None, description="Payload as byte values")
    data_b64: str | None = Field(None, description="Payload as base64 text")

    @field_validator("data_b64")
    @classmethod
    def _check_base64(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            base64.b64decode(v, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"not valid base64: {e}") from e
        return v

    @model_validator(mode="after")
    def _exactly_one_payload(self) -> SaveVisualizationRequest:
        if (self.data is None) == (self.data_b64 is None):
            raise ValueError("exactly one of 'data' or 'data_b64' is required")
        return self

    def payload_bytes(self) -> bytes:
        if self.data is not None:
            return bytes(self.data)
        return base64.b64decode(self.data_b64 or "", validate=True)


class SaveVisualizationResponse(BaseModel):
    success: bool
    path: str


# --- Handlers ---


def make_save_handler(writer: FileWriterPort) -> Handler:
    def save_visualization(
        req: SaveVisualizationRequest,
    ) -> SaveVisualizationResponse | CommandError:
        output = run_save(SaveRequest(path=req.path, data=req.payload_bytes()), writer=writer)
        if output.error is not None:
            return CommandError(**output.error.to_payload())
        assert output.result is not None
        return SaveVisualizationResponse(**output.result.to_payload())

    return save_visualization


def build_registry(
    writer: FileWriterPort | None = None,
    *,
    enabled: Iterable[str] | None = None,
) -> CommandRegistry:
    """Create the dispatch table with every host command registered."""
    registry = CommandRegistry(enabled=enabled)
    registry.register(
        SAVE_VISUALIZATION,
        make_save_handler(writer or LocalFileWriter()),
        SaveVisualizationRequest,
        SaveVisualizationResponse,
    )
    return registry

"""
Command dispatch table.

Maps command names to handlers with typed request/response payloads so the
front-end boundary can be exercised without any particular UI framework.

Key behaviors:
- Unknown or disabled commands come back as UnknownCommand errors
- Payloads failing validation come back as InvalidPayload errors
- Handler failures come back as the handler's own tagged error
- invoke() never raises for any of the above
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND = "UnknownCommand"
INVALID_PAYLOAD = "InvalidPayload"


# --- Wire Models ---


class CommandError(BaseModel):
    """Tagged failure carried across the command boundary."""

    kind: str
    message: str
    path: str | None = None


class CommandResponse(BaseModel):
    """Envelope returned for every invocation."""

    ok: bool
    command: str
    result: dict[str, Any] | None = None
    error: CommandError | None = None


# --- Registry ---


Handler = Callable[[Any], "BaseModel | CommandError"]


@dataclass(frozen=True)
class CommandSpec:
    """A registered command."""

    name: str
    handler: Handler
    request_model: type[BaseModel]
    response_model: type[BaseModel]


def _format_validation_error(err: ValidationError) -> str:
    parts = []
    for item in err.errors():
        loc = ".".join(str(p) for p in item["loc"]) or "payload"
        parts.append(f"{loc}: {item['msg']}")
    return "; ".join(parts)


class CommandRegistry:
    """
    Dispatch table from command names to handlers.

    Args:
        enabled: Optional allow-list of command names. When given, commands
            outside it stay registered but cannot be invoked.
    """

    def __init__(self, enabled: Iterable[str] | None = None) -> None:
        self._commands: dict[str, CommandSpec] = {}
        self._enabled = frozenset(enabled) if enabled is not None else None

    def register(
        self,
        name: str,
        handler: Handler,
        request_model: type[BaseModel],
        response_model: type[BaseModel],
    ) -> None:
        if name in self._commands:
            raise ValueError(f"Command already registered: {name}")
        self._commands[name] = CommandSpec(
            name=name,
            handler=handler,
            request_model=request_model,
            response_model=response_model,
        )

    def is_enabled(self, name: str) -> bool:
        if name not in self._commands:
            return False
        return self._enabled is None or name in self._enabled

    def names(self) -> list[str]:
        """Invocable command names, sorted."""
        return sorted(n for n in self._commands if self.is_enabled(n))

    def get(self, name: str) -> CommandSpec | None:
        return self._commands.get(name) if self.is_enabled(name) else None

    def invoke(self, name: str, payload: Any) -> CommandResponse:
        """
        Validate the payload, run the handler and wrap its outcome.

        The payload comes straight off the wire; anything but a mapping (or
        None, meaning no body) is an InvalidPayload error.
        """
        spec = self.get(name)
        if spec is None:
            logger.warning("Unknown command: %s", name)
            return CommandResponse(
                ok=False,
                command=name,
                error=CommandError(kind=UNKNOWN_COMMAND, message=f"Unknown command: {name}"),
            )

        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            message = (
                f"Invalid payload for {name}: expected a JSON object, "
                f"got {type(payload).__name__}"
            )
            logger.warning(message)
            return CommandResponse(
                ok=False,
                command=name,
                error=CommandError(kind=INVALID_PAYLOAD, message=message),
            )

        try:
            request = spec.request_model.model_validate(payload)
        except ValidationError as e:
            message = f"Invalid payload for {name}: {_format_validation_error(e)}"
            logger.warning(message)
            return CommandResponse(
                ok=False,
                command=name,
                error=CommandError(kind=INVALID_PAYLOAD, message=message),
            )

        outcome = spec.handler(request)
        if isinstance(outcome, CommandError):
            return CommandResponse(ok=False, command=name, error=outcome)

        result = spec.response_model.model_validate(outcome.model_dump())
        return CommandResponse(ok=True, command=name, result=result.model_dump())

"""
Command endpoint for the web front-end bundle.

Endpoint: POST /api/commands/{name}
- Body is the command's request payload
- Persistence failures are returned as ok=false with a tagged error
- Unknown commands map to 404, invalid payloads to 422
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from src.api.deps import get_registry
from src.shell.commands import (
    INVALID_PAYLOAD,
    UNKNOWN_COMMAND,
    CommandRegistry,
    CommandResponse,
)

router = APIRouter()

_ERROR_STATUS = {
    UNKNOWN_COMMAND: 404,
    INVALID_PAYLOAD: 422,
}


@router.get("", summary="List commands")
def list_commands(registry: CommandRegistry = Depends(get_registry)) -> dict[str, list[str]]:
    """Names of the commands the front-end may invoke."""
    return {"commands": registry.names()}


@router.post(
    "/{name}",
    response_model=CommandResponse,
    responses={
        404: {"model": CommandResponse, "description": "Unknown command"},
        422: {"model": CommandResponse, "description": "Invalid payload"},
    },
    summary="Invoke command",
)
async def invoke_command(
    name: str,
    payload: Any = Body(default=None),
    registry: CommandRegistry = Depends(get_registry),
) -> JSONResponse:
    """
    Dispatch a command by name.

    The handler blocks on filesystem I/O, so it runs in the thread pool.
    """
    response = await run_in_threadpool(registry.invoke, name, payload)

    status_code = status.HTTP_200_OK
    if response.error is not None:
        status_code = _ERROR_STATUS.get(response.error.kind, status.HTTP_200_OK)

    return JSONResponse(status_code=status_code, content=response.model_dump())

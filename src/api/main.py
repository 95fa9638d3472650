import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.deps import get_rules
from src.rules.loader import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    # Load rules on startup (fail-fast)
    try:
        rules = get_rules()
    except (FileNotFoundError, ValueError) as e:
        print(f"CRITICAL: Rules load failed: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(rules)
    logger.info("Commands enabled: %s", ", ".join(rules.commands.enabled))
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Circuit Explorer Host API",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # --- Routers ---
    from src.api.routes import commands

    app.include_router(commands.router, prefix="/api/commands", tags=["Commands"])

    # CORS (Allow Frontend)
    try:
        origins = get_rules().api.cors_origins
    except (FileNotFoundError, ValueError):
        origins = []

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "service": "host-api"}

    return app


app = create_app()


def serve() -> None:
    """Run the host API; binds to the address configured in the rules."""
    rules = get_rules()
    uvicorn.run("src.api.main:app", host=rules.api.host, port=rules.api.port)


if __name__ == "__main__":
    serve()

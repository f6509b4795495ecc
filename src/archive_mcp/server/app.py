"""FastAPI application wiring the MCP dispatcher to HTTP routes.

Routes:
  POST /mcp         -> JSON-RPC entry point
  GET  /mcp/health  -> liveness probe
  GET  /mcp         -> diagnostic message
"""

from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from archive_mcp import __version__
from archive_mcp.protocol.dispatcher import RequestDispatcher
from archive_mcp.protocol.models import PARSE_ERROR, JsonRpcResponse
from archive_mcp.store.client import ConversationStoreClient
from archive_mcp.tools.registry import ToolRegistry
from archive_mcp.tools.save_conversation import SAVE_CONVERSATION_DESCRIPTOR, SaveConversationTool

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from archive_mcp.config import ServerConfig
    from archive_mcp.protocol.models import ToolDescriptor

logger = logging.getLogger(__name__)


def build_registry(store: ConversationStoreClient) -> ToolRegistry:
    """Register every built-in tool."""
    return ToolRegistry([SaveConversationTool(store)])


def builtin_descriptors() -> list[ToolDescriptor]:
    """Descriptors of every built-in tool, in the order :func:`build_registry` registers them."""
    return [SAVE_CONVERSATION_DESCRIPTOR]


def create_app(config: ServerConfig, *, store: ConversationStoreClient | None = None) -> FastAPI:
    """Build the application for *config*.

    *store* defaults to a client for ``config.store_url``; its HTTP pool is
    opened on startup and closed on shutdown.
    """
    if store is None:
        store = ConversationStoreClient(
            config.store_url,
            timeout=config.request_timeout,
            model_label=config.model_label,
        )
    dispatcher = RequestDispatcher(build_registry(store), server_name=config.server_name)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        await store.open()
        try:
            yield
        finally:
            await store.close()

    app = FastAPI(
        title=config.server_name,
        description="MCP server that saves conversations to a remote archive.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.dispatcher = dispatcher

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post("/mcp")
    async def mcp_endpoint(request: Request) -> Response:
        raw = await request.body()
        try:
            body: Any = json.loads(raw)
        except ValueError:
            logger.warning("Rejected MCP request with undecodable JSON body")
            error = JsonRpcResponse.failure(None, PARSE_ERROR, "Parse error")
            return JSONResponse(status_code=400, content=error.to_payload())

        logger.debug("Received MCP request: %s", body)
        outcome = await dispatcher.dispatch(body)
        if outcome.response is None:
            return Response(status_code=204)
        return JSONResponse(status_code=outcome.status_code, content=outcome.response.to_payload())

    @app.get("/mcp/health")
    async def health() -> dict[str, str]:
        return {
            "status": "healthy",
            "server": config.server_name,
            "timestamp": _utc_timestamp(),
        }

    @app.get("/mcp")
    async def info() -> dict[str, str]:
        return {
            "message": "MCP Server is running",
            "note": "Use POST requests for MCP protocol communication",
        }

    return app


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")

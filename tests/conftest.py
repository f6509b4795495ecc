"""Shared fixtures for archive-mcp tests."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock

import pytest

from archive_mcp.config import ServerConfig
from archive_mcp.protocol.dispatcher import RequestDispatcher
from archive_mcp.tools.registry import ToolRegistry
from archive_mcp.tools.save_conversation import SaveConversationTool

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx


@pytest.fixture
def config() -> ServerConfig:
    return ServerConfig(base_url="http://archive.test:3000")


@pytest.fixture
def mock_store() -> MagicMock:
    """A ConversationStoreClient stand-in whose ``save`` returns a fixed URL."""
    store = MagicMock()
    store.save = AsyncMock(return_value="http://x/y")
    store.open = AsyncMock()
    store.close = AsyncMock()
    return store


@pytest.fixture
def dispatcher(mock_store: MagicMock) -> RequestDispatcher:
    registry = ToolRegistry([SaveConversationTool(mock_store)])
    return RequestDispatcher(registry)


@pytest.fixture
def archive_handler() -> Callable[..., Callable[[httpx.Request], httpx.Response]]:
    """Build an ``httpx.MockTransport`` handler that records requests."""
    import httpx

    def _factory(
        status_code: int = 201,
        json_body: object | None = None,
        text: str | None = None,
        seen: list[httpx.Request] | None = None,
    ) -> Callable[[httpx.Request], httpx.Response]:
        def handler(request: httpx.Request) -> httpx.Response:
            if seen is not None:
                seen.append(request)
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json_body if json_body is not None else {})

        return handler

    return _factory

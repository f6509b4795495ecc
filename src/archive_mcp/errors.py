"""Shared error types for archive-mcp."""

from __future__ import annotations


class ArchiveMCPError(Exception):
    """Base error for all archive-mcp failures."""


class ConfigError(ArchiveMCPError):
    """Required configuration is missing or invalid."""


class ToolError(ArchiveMCPError):
    """Base error for tool-invocation failures.

    The exception message is what MCP clients see in the ``-32602`` error
    object, so subclasses keep it human-readable.
    """


class ToolNotFoundError(ToolError):
    """Requested tool is not in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class InvalidToolArgumentsError(ToolError):
    """Tool arguments failed validation."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)


class ConversationStoreError(ToolError):
    """The remote conversation store rejected the request or was unreachable."""

    def __init__(self, detail: str, *, status_code: int | None = None, body: str = "") -> None:
        self.detail = detail
        self.status_code = status_code
        self.body = body
        super().__init__(f"API request failed: {detail}")

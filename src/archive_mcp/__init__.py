"""archive-mcp — MCP server that saves LLM conversations to a remote archive."""

from __future__ import annotations

__version__ = "1.0.0"

"""HTTP surface — FastAPI application exposing the MCP endpoint."""

from archive_mcp.server.app import build_registry, builtin_descriptors, create_app

__all__ = ["build_registry", "builtin_descriptors", "create_app"]

"""Tool layer — handler protocol, registry and the built-in tools."""

from archive_mcp.tools.provider import ToolHandler
from archive_mcp.tools.registry import ToolName, ToolRegistry
from archive_mcp.tools.save_conversation import SaveConversationTool

__all__ = [
    "SaveConversationTool",
    "ToolHandler",
    "ToolName",
    "ToolRegistry",
]

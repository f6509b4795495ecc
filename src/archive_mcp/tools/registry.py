"""ToolRegistry — immutable name-to-handler map built at startup."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

from archive_mcp.errors import ToolNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from archive_mcp.protocol.models import ToolDescriptor
    from archive_mcp.tools.provider import ToolHandler


class ToolName(str, Enum):
    """Identifiers of every tool this server can expose."""

    SAVE_CONVERSATION = "save_conversation"


class ToolRegistry:
    """Routes ``tools/call`` names to their handlers.

    Usage::

        registry = ToolRegistry([SaveConversationTool(store)])
        registry.descriptors()                  # for tools/list
        handler = registry.get("save_conversation")
    """

    def __init__(self, handlers: Iterable[ToolHandler]) -> None:
        table: dict[ToolName, ToolHandler] = {}
        for handler in handlers:
            if handler.name in table:
                msg = f"Duplicate tool registration: {handler.name.value}"
                raise ValueError(msg)
            table[handler.name] = handler
        self._handlers = MappingProxyType(table)

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, name: object) -> bool:
        try:
            return ToolName(name) in self._handlers
        except ValueError:
            return False

    def get(self, name: str) -> ToolHandler:
        """Return the handler for *name* or raise :class:`ToolNotFoundError`."""
        try:
            key = ToolName(name)
        except ValueError:
            raise ToolNotFoundError(name) from None
        handler = self._handlers.get(key)
        if handler is None:
            raise ToolNotFoundError(name)
        return handler

    def descriptors(self) -> list[ToolDescriptor]:
        """Descriptors of all registered tools, in registration order."""
        return [handler.descriptor for handler in self._handlers.values()]

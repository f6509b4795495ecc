"""ToolHandler protocol — the interface every registered tool satisfies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from archive_mcp.protocol.models import ToolDescriptor
    from archive_mcp.tools.registry import ToolName


@runtime_checkable
class ToolHandler(Protocol):
    """A named, schema-described capability invokable via ``tools/call``."""

    @property
    def name(self) -> ToolName: ...

    @property
    def descriptor(self) -> ToolDescriptor:
        """Static descriptor advertised by ``tools/list``."""
        ...

    async def invoke(self, arguments: dict[str, Any]) -> str:
        """Run the tool and return its text result.

        Failures are raised; their message is returned to the client.
        """
        ...

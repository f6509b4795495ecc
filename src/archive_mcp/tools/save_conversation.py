"""``save_conversation`` — archive a conversation and return its URL."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from archive_mcp.errors import InvalidToolArgumentsError
from archive_mcp.protocol.models import ToolDescriptor
from archive_mcp.tools.registry import ToolName

if TYPE_CHECKING:
    from archive_mcp.store.client import ConversationStoreClient

SAVE_CONVERSATION_DESCRIPTOR = ToolDescriptor(
    name=ToolName.SAVE_CONVERSATION.value,
    description=(
        "Saves entire LLM conversation to the conversation archive and returns a "
        "shareable URL. Provide full conversation text."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "conversation": {
                "type": "string",
                "description": "Full conversation as text or HTML",
            },
        },
        "required": ["conversation"],
    },
)


class SaveConversationTool:
    """Satisfies :class:`~archive_mcp.tools.provider.ToolHandler`."""

    def __init__(self, store: ConversationStoreClient) -> None:
        self._store = store

    @property
    def name(self) -> ToolName:
        return ToolName.SAVE_CONVERSATION

    @property
    def descriptor(self) -> ToolDescriptor:
        return SAVE_CONVERSATION_DESCRIPTOR

    async def invoke(self, arguments: dict[str, Any]) -> str:
        conversation = arguments.get("conversation")
        if not isinstance(conversation, str) or not conversation:
            raise InvalidToolArgumentsError("`conversation` must be a string")

        url = await self._store.save(conversation)
        return f"Conversation saved successfully! View it at: {url}"

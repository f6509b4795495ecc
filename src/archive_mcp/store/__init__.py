"""Remote conversation store client."""

from archive_mcp.store.client import ConversationStoreClient

__all__ = ["ConversationStoreClient"]

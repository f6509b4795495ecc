"""Protocol layer — JSON-RPC envelopes and MCP request dispatch."""

from archive_mcp.protocol.dispatcher import DispatchOutcome, RequestDispatcher
from archive_mcp.protocol.models import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    PROTOCOL_VERSION,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    ToolDescriptor,
)

__all__ = [
    "INTERNAL_ERROR",
    "INVALID_PARAMS",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "PARSE_ERROR",
    "PROTOCOL_VERSION",
    "DispatchOutcome",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "RequestDispatcher",
    "ToolDescriptor",
]

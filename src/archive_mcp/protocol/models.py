"""MCP models — JSON-RPC 2.0 envelopes and MCP payloads.

Implements the message shapes the server accepts and emits for
``initialize``, ``tools/list`` and ``tools/call``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

PROTOCOL_VERSION = "2025-06-18"

# Reserved JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """An incoming JSON-RPC 2.0 message.

    Every field is optional so that malformed calls still parse and can be
    answered with ``-32600``. ``id`` is echoed back untouched and ``params``
    is checked per method, so both accept any JSON value. Whether ``id`` was
    sent at all (as opposed to sent as ``null``) is read from
    ``model_fields_set``.
    """

    jsonrpc: str | None = None
    method: str | None = None
    id: Any = None
    params: Any = None

    @property
    def has_id(self) -> bool:
        return "id" in self.model_fields_set

    @property
    def is_notification(self) -> bool:
        return bool(self.method) and not self.has_id

    @property
    def is_valid_call(self) -> bool:
        return bool(self.jsonrpc) and bool(self.method) and self.has_id


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message; exactly one of result/error is set."""

    jsonrpc: str = "2.0"
    id: Any = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @model_validator(mode="after")
    def _one_of_result_or_error(self) -> JsonRpcResponse:
        if (self.result is None) == (self.error is None):
            msg = "exactly one of 'result' or 'error' must be set"
            raise ValueError(msg)
        return self

    @classmethod
    def success(cls, request_id: Any, result: dict[str, Any]) -> JsonRpcResponse:
        return cls(id=request_id, result=result)

    @classmethod
    def failure(
        cls,
        request_id: Any,
        code: int,
        message: str,
        data: Any = None,
    ) -> JsonRpcResponse:
        return cls(id=request_id, error=JsonRpcError(code=code, message=message, data=data))

    def to_payload(self) -> dict[str, Any]:
        """Serialize for the wire, keeping ``id: null`` and dropping the unset member."""
        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            payload["error"] = self.error.model_dump(exclude_none=True)
        else:
            payload["result"] = self.result
        return payload


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class ToolDescriptor(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = {"populate_by_name": True, "frozen": True}

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")


class ToolCallParams(BaseModel):
    """``params`` of a ``tools/call`` request."""

    name: str = Field(min_length=1)
    arguments: dict[str, Any]


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolCallResult(BaseModel):
    """``result`` of a successful ``tools/call``."""

    content: list[TextContent]

    @classmethod
    def from_text(cls, text: str) -> ToolCallResult:
        return cls(content=[TextContent(text=text)])


class ServerInfo(BaseModel):
    name: str
    version: str


class InitializeResult(BaseModel):
    """``result`` of ``initialize``."""

    model_config = {"populate_by_name": True}

    protocol_version: str = Field(default=PROTOCOL_VERSION, alias="protocolVersion")
    capabilities: dict[str, Any] = Field(default_factory=lambda: {"tools": {}})
    server_info: ServerInfo = Field(alias="serverInfo")

"""RequestDispatcher — classifies MCP messages and routes calls.

Every decoded body ends in exactly one :class:`DispatchOutcome`:

* notification (``method`` without ``id``)  -> 204, no body
* malformed envelope                        -> 400, ``-32600``
* ``initialize`` / ``tools/list``           -> 200, result
* ``tools/call``                            -> 200, result or ``-32602``
* unknown method                            -> 200, ``-32601``
* anything unexpected                       -> 500, ``-32603``
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from archive_mcp import __version__
from archive_mcp.config import DEFAULT_SERVER_NAME
from archive_mcp.protocol.models import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    InitializeResult,
    JsonRpcRequest,
    JsonRpcResponse,
    ServerInfo,
    ToolCallParams,
    ToolCallResult,
)
from archive_mcp.utils.telemetry import (
    ATTR_ERROR_CODE,
    ATTR_METHOD,
    ATTR_REQUEST_KIND,
    ATTR_TOOL_NAME,
    get_tracer,
)

if TYPE_CHECKING:
    from archive_mcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


@dataclass(frozen=True)
class DispatchOutcome:
    """What the transport should send back."""

    status_code: int
    response: JsonRpcResponse | None = None

    @property
    def is_notification(self) -> bool:
        return self.response is None


class RequestDispatcher:
    """Stateless handler for decoded ``POST /mcp`` bodies.

    Usage::

        dispatcher = RequestDispatcher(registry, server_name="Remote MCP Server")
        outcome = await dispatcher.dispatch({"jsonrpc": "2.0", "id": 1, "method": "tools/list"})
    """

    def __init__(self, registry: ToolRegistry, *, server_name: str = DEFAULT_SERVER_NAME) -> None:
        self._registry = registry
        self._server_info = ServerInfo(name=server_name, version=__version__)

    async def dispatch(self, body: Any) -> DispatchOutcome:
        """Classify *body* and produce the outcome. Never raises."""
        request_id: Any = None
        with _tracer.start_as_current_span("mcp.dispatch") as span:
            try:
                if not isinstance(body, dict):
                    span.set_attribute(ATTR_REQUEST_KIND, "malformed")
                    return self._invalid_request(None)

                request_id = body.get("id")
                try:
                    request = JsonRpcRequest.model_validate(body)
                except ValidationError:
                    if "id" not in body and body.get("method"):
                        return self._notification(body["method"])
                    span.set_attribute(ATTR_REQUEST_KIND, "malformed")
                    return self._invalid_request(request_id)

                if request.is_notification:
                    span.set_attribute(ATTR_REQUEST_KIND, "notification")
                    return self._notification(request.method)

                if not request.is_valid_call:
                    span.set_attribute(ATTR_REQUEST_KIND, "malformed")
                    return self._invalid_request(request_id)

                assert request.method is not None
                span.set_attribute(ATTR_REQUEST_KIND, "call")
                span.set_attribute(ATTR_METHOD, request.method)
                response = await self._route(request)
                if response.error is not None:
                    span.set_attribute(ATTR_ERROR_CODE, response.error.code)
                return DispatchOutcome(status_code=200, response=response)
            except Exception as exc:
                logger.exception("Error processing request")
                span.set_attribute(ATTR_ERROR_CODE, INTERNAL_ERROR)
                return DispatchOutcome(
                    status_code=500,
                    response=JsonRpcResponse.failure(
                        request_id, INTERNAL_ERROR, "Internal error", data=str(exc)
                    ),
                )

    async def _route(self, request: JsonRpcRequest) -> JsonRpcResponse:
        if request.method == "initialize":
            return self._initialize(request)
        if request.method == "tools/list":
            return self._tools_list(request)
        if request.method == "tools/call":
            return await self._tools_call(request)
        return JsonRpcResponse.failure(
            request.id, METHOD_NOT_FOUND, f"Method not found: {request.method}"
        )

    def _initialize(self, request: JsonRpcRequest) -> JsonRpcResponse:
        result = InitializeResult(server_info=self._server_info)
        return JsonRpcResponse.success(request.id, result.model_dump(by_alias=True))

    def _tools_list(self, request: JsonRpcRequest) -> JsonRpcResponse:
        tools = [d.model_dump(by_alias=True) for d in self._registry.descriptors()]
        return JsonRpcResponse.success(request.id, {"tools": tools})

    async def _tools_call(self, request: JsonRpcRequest) -> JsonRpcResponse:
        try:
            params = ToolCallParams.model_validate(request.params)
        except ValidationError:
            return JsonRpcResponse.failure(
                request.id, INVALID_PARAMS, "Invalid params - missing tool name or arguments"
            )

        with _tracer.start_as_current_span("mcp.tool.call") as span:
            span.set_attribute(ATTR_TOOL_NAME, params.name)
            try:
                handler = self._registry.get(params.name)
                text = await handler.invoke(params.arguments)
            except Exception as exc:
                # Tool failures are reported to the client, never fatal.
                logger.warning("Tool %s failed: %s", params.name, exc)
                span.set_attribute(ATTR_ERROR_CODE, INVALID_PARAMS)
                return JsonRpcResponse.failure(
                    request.id, INVALID_PARAMS, str(exc) or type(exc).__name__
                )

        result = ToolCallResult.from_text(text)
        return JsonRpcResponse.success(request.id, result.model_dump())

    @staticmethod
    def _notification(method: object) -> DispatchOutcome:
        logger.info("Notification received: %s", method)
        return DispatchOutcome(status_code=204)

    @staticmethod
    def _invalid_request(request_id: Any) -> DispatchOutcome:
        return DispatchOutcome(
            status_code=400,
            response=JsonRpcResponse.failure(
                request_id, INVALID_REQUEST, "Invalid Request - missing required fields"
            ),
        )


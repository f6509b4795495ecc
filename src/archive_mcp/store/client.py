"""ConversationStoreClient — uploads conversations to the remote archive."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from archive_mcp.config import DEFAULT_MODEL_LABEL, DEFAULT_TIMEOUT
from archive_mcp.errors import ConversationStoreError
from archive_mcp.utils.telemetry import ATTR_STORE_STATUS, get_tracer

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

CONVERSATION_PATH = "/api/conversation"
MISSING_URL = "N/A"


class ConversationStoreClient:
    """Talks to the archive's ``POST /api/conversation`` endpoint.

    Usage::

        async with ConversationStoreClient("http://archive:3000") as store:
            url = await store.save("user: hi\\nassistant: hello")

    *transport* is handed to :class:`httpx.AsyncClient` unchanged, which lets
    tests plug in an :class:`httpx.MockTransport`.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        model_label: str = DEFAULT_MODEL_LABEL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._model_label = model_label
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> ConversationStoreClient:
        await self.open()
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.close()

    async def open(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            )

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            msg = "ConversationStoreClient must be opened before use"
            raise RuntimeError(msg)
        return self._client

    async def save(self, conversation: str) -> str:
        """Upload *conversation* and return the archive URL.

        Returns ``"N/A"`` when the store accepts the upload but its JSON reply
        carries no URL.

        Raises
        ------
        ConversationStoreError
            On a non-201 response, an undecodable 201 body, or a transport
            failure.
        """
        files = {
            "htmlDoc": ("conversation.txt", conversation.encode("utf-8"), "text/plain"),
        }
        data = {"model": self._model_label, "skipScraping": ""}

        with _tracer.start_as_current_span("archive.store.save") as span:
            try:
                response = await self._http().post(CONVERSATION_PATH, files=files, data=data)
            except httpx.HTTPError as exc:
                logger.warning("Conversation store unreachable at %s: %s", self._base_url, exc)
                raise ConversationStoreError(str(exc) or type(exc).__name__) from exc

            span.set_attribute(ATTR_STORE_STATUS, response.status_code)
            if response.status_code != httpx.codes.CREATED:
                body = response.text
                raise ConversationStoreError(
                    f"{response.status_code} - {body}",
                    status_code=response.status_code,
                    body=body,
                )

        return self._extract_url(response)

    @staticmethod
    def _extract_url(response: httpx.Response) -> str:
        try:
            payload: Any = response.json()
        except ValueError as exc:
            body = response.text
            raise ConversationStoreError(
                f"{response.status_code} - invalid JSON body: {body}",
                status_code=response.status_code,
                body=body,
            ) from exc
        if not isinstance(payload, dict):
            return MISSING_URL
        url = payload.get("url")
        return str(url) if url else MISSING_URL

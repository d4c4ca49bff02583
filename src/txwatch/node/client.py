"""
Async JSON-RPC client for the node.

``RpcClient`` wraps a caller-supplied ``httpx.AsyncClient`` so one
connection pool can be shared across many concurrent calls. Each call is
independent: one POST, one response, no retries.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..config import get_rpc_url
from ..wire.schemas import SchemaRegistry
from .envelope import RequestId, RpcFailure, build_request, decode_response, encode_request
from .errors import ProtocolFailure, TransportError

logger = logging.getLogger(__name__)


class RpcClient:
    """Send JSON-RPC requests to a single node endpoint."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        rpc_url: Optional[str] = None,
        registry: Optional[SchemaRegistry] = None,
        owns_http: bool = False,
    ) -> None:
        self.http = http
        self.rpc_url = rpc_url or get_rpc_url()
        self.registry = registry or SchemaRegistry.default()
        self._owns_http = owns_http

    async def __aenter__(self) -> "RpcClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def call(self, method: str, params: list, request_id: RequestId = 1) -> Any:
        """
        Make a JSON-RPC call.

        Args:
            method: RPC method name (e.g., "tx_info")
            params: RPC parameters
            request_id: Envelope id

        Returns:
            Result field from the RPC response

        Raises:
            SerializationError: If params cannot be serialized
            TransportError: If the HTTP status is not 200
            ProtocolFailure: If the node returned an error envelope
            MalformedResponseError: If the body is not a valid envelope
        """
        body = encode_request(build_request(method, params, request_id))
        logger.debug("-> %s %s", method, body)

        response = await self.http.post(
            self.rpc_url,
            content=body,
            headers={"Content-Type": "application/json"},
        )
        if response.status_code != httpx.codes.OK:
            logger.debug("<- %s status %s", method, response.status_code)
            raise TransportError(response.status_code)

        reply = decode_response(response.content, registry=self.registry)
        if isinstance(reply, RpcFailure):
            logger.debug("<- %s error %s", method, reply.error)
            raise ProtocolFailure(reply.error.code, reply.error.message, reply.error.data)

        logger.debug("<- %s result %r", method, reply.result)
        return reply.result


def open_client(
    rpc_url: Optional[str] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    timeout: Optional[float] = None,
) -> RpcClient:
    """
    Create an RpcClient that owns its own httpx.AsyncClient.

    Use as ``async with open_client(url) as client: ...``.

    Args:
        rpc_url: Node endpoint (default: TXWATCH_RPC_URL)
        transport: Alternative transport, e.g. httpx.MockTransport
        timeout: Request timeout in seconds (default: httpx default)
    """
    kwargs: dict[str, Any] = {}
    if transport is not None:
        kwargs["transport"] = transport
    if timeout is not None:
        kwargs["timeout"] = timeout
    return RpcClient(httpx.AsyncClient(**kwargs), rpc_url=rpc_url, owns_http=True)

"""
JSON-RPC 2.0 envelope codec.

Builds request objects of the fixed shape ``{id, method, jsonrpc, params}``
and turns response bodies into either an ``RpcSuccess`` or an
``RpcFailure``. No batching, no notifications.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional, Union

from ..wire.schemas import RESPONSE_SCHEMA, SchemaRegistry, SchemaValidationError
from .errors import MalformedResponseError, SerializationError

JSONRPC_VERSION = "2.0"

RequestId = Union[str, int]


def build_request(method: str, params: list, request_id: RequestId = 1) -> dict[str, Any]:
    """
    Build a JSON-RPC request object.

    Args:
        method: RPC method name (e.g., "tx_info")
        params: Positional parameters, kept in order
        request_id: Request id, string or integer

    Returns:
        Request dict ready for JSON serialization
    """
    return {
        "id": request_id,
        "method": method,
        "jsonrpc": JSONRPC_VERSION,
        "params": list(params),
    }


def encode_request(request: dict[str, Any]) -> bytes:
    """Serialize a request object to UTF-8 JSON bytes."""
    try:
        return json.dumps(request, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"Cannot serialize params for {request.get('method')}: {exc}"
        ) from exc


@dataclass(frozen=True)
class RpcSuccess:
    id: Optional[RequestId]
    result: Any


@dataclass(frozen=True)
class RpcError:
    code: Optional[int]
    message: str
    data: Any = None

    @classmethod
    def from_value(cls, value: Any) -> "RpcError":
        # Error objects that ignore the JSON-RPC shape are kept as text.
        if isinstance(value, dict):
            code = value.get("code")
            message = value.get("message")
            return cls(
                code=code if isinstance(code, int) and not isinstance(code, bool) else None,
                message=message if isinstance(message, str) else json.dumps(value),
                data=value.get("data"),
            )
        return cls(code=None, message=str(value))


@dataclass(frozen=True)
class RpcFailure:
    id: Optional[RequestId]
    error: RpcError


RpcResponse = Union[RpcSuccess, RpcFailure]


def decode_response(
    body: Union[bytes, str, dict[str, Any]],
    registry: SchemaRegistry | None = None,
) -> RpcResponse:
    """
    Decode a response body into a success or failure envelope.

    Args:
        body: Raw response bytes/text, or an already parsed JSON value
        registry: Schema registry (default: bundled schemas)

    Returns:
        RpcSuccess or RpcFailure

    Raises:
        MalformedResponseError: If the body is not a JSON-RPC envelope
    """
    if isinstance(body, (bytes, str)):
        try:
            payload = json.loads(body)
        except ValueError as exc:
            raise MalformedResponseError(f"Response is not valid JSON: {exc}") from exc
    else:
        payload = body

    registry = registry or SchemaRegistry.default()
    try:
        registry.validate_instance(payload, RESPONSE_SCHEMA)
    except SchemaValidationError as exc:
        raise MalformedResponseError("Response is not a JSON-RPC envelope.", errors=exc.errors) from exc

    request_id = payload.get("id")
    if payload.get("error") is not None:
        return RpcFailure(id=request_id, error=RpcError.from_value(payload["error"]))
    return RpcSuccess(id=request_id, result=payload.get("result"))

"""
Error types raised by the node RPC layer.

Every failure surfaces to the immediate caller as one of these; nothing in
this package retries or aborts the process on a bad response.
"""

from __future__ import annotations

from typing import Any, Optional


class RpcClientError(RuntimeError):
    pass


class TransportError(RpcClientError):
    """The node answered with a non-200 HTTP status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"non-ok response: {status_code}")
        self.status_code = status_code


class ProtocolFailure(RpcClientError):
    """The node answered with a JSON-RPC error envelope."""

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        super().__init__(f"rpc error {code}: {message}")
        self.code = code
        self.message = message
        self.data = data


class MalformedResponseError(RpcClientError):
    def __init__(self, message: str, errors: Optional[list[str]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class SerializationError(RpcClientError):
    pass

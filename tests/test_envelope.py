"""Tests for the JSON-RPC envelope codec."""

from __future__ import annotations

import json

import pytest

from txwatch.node.envelope import (
    JSONRPC_VERSION,
    RpcFailure,
    RpcSuccess,
    build_request,
    decode_response,
    encode_request,
)
from txwatch.node.errors import MalformedResponseError, SerializationError


class TestBuildRequest:
    def test_fixed_shape(self) -> None:
        req = build_request("tx_info", ["0xabc"], request_id="4")
        assert req == {"id": "4", "method": "tx_info", "jsonrpc": "2.0", "params": ["0xabc"]}
        assert list(req) == ["id", "method", "jsonrpc", "params"]

    def test_version_is_fixed(self) -> None:
        assert JSONRPC_VERSION == "2.0"
        assert build_request("account_info", [], request_id=1)["jsonrpc"] == "2.0"

    def test_params_order_preserved(self) -> None:
        req = build_request("tx_submit", [{"type": "Transfer"}, "0xsig"])
        assert req["params"] == [{"type": "Transfer"}, "0xsig"]

    def test_params_copied(self) -> None:
        params = [1]
        req = build_request("ethop_info", params)
        params.append(2)
        assert req["params"] == [1]

    def test_encode_request_round_trips_through_json(self) -> None:
        req = build_request("ethop_info", [7], request_id="3")
        assert json.loads(encode_request(req)) == req

    def test_unserializable_params(self) -> None:
        req = build_request("tx_submit", [object()])
        with pytest.raises(SerializationError, match="tx_submit"):
            encode_request(req)


class TestDecodeResponse:
    def test_success(self) -> None:
        reply = decode_response(b'{"jsonrpc":"2.0","id":"1","result":{"executed":false}}')
        assert reply == RpcSuccess(id="1", result={"executed": False})

    def test_success_with_null_result(self) -> None:
        reply = decode_response('{"jsonrpc":"2.0","id":"1","result":null}')
        assert isinstance(reply, RpcSuccess)
        assert reply.result is None

    def test_success_without_id_or_version(self) -> None:
        reply = decode_response({"result": {"executed": True, "block": {"verified": False}}})
        assert isinstance(reply, RpcSuccess)
        assert reply.id is None

    def test_failure(self) -> None:
        reply = decode_response(
            {"jsonrpc": "2.0", "id": 1, "error": {"code": -32602, "message": "Invalid params", "data": "nonce"}}
        )
        assert isinstance(reply, RpcFailure)
        assert reply.error.code == -32602
        assert reply.error.message == "Invalid params"
        assert reply.error.data == "nonce"

    def test_failure_with_nonstandard_error_value(self) -> None:
        reply = decode_response({"jsonrpc": "2.0", "id": 1, "error": "boom"})
        assert isinstance(reply, RpcFailure)
        assert reply.error.code is None
        assert reply.error.message == "boom"

    def test_failure_with_error_object_missing_message(self) -> None:
        reply = decode_response({"id": 1, "error": {"code": "x"}})
        assert isinstance(reply, RpcFailure)
        assert reply.error.code is None
        assert "x" in reply.error.message

    def test_invalid_json(self) -> None:
        with pytest.raises(MalformedResponseError, match="not valid JSON"):
            decode_response(b"<html>bad gateway</html>")

    def test_not_an_object(self) -> None:
        with pytest.raises(MalformedResponseError):
            decode_response(b"[1, 2, 3]")

    def test_neither_result_nor_error(self) -> None:
        with pytest.raises(MalformedResponseError) as exc_info:
            decode_response({"jsonrpc": "2.0", "id": 1})
        assert exc_info.value.errors

    def test_wrong_version(self) -> None:
        with pytest.raises(MalformedResponseError):
            decode_response({"jsonrpc": "1.0", "id": 1, "result": None})

    def test_null_error_without_result(self) -> None:
        with pytest.raises(MalformedResponseError):
            decode_response({"jsonrpc": "2.0", "id": "1", "error": None})

    def test_null_error_alongside_result(self) -> None:
        reply = decode_response({"jsonrpc": "2.0", "id": "1", "result": 5, "error": None})
        assert reply == RpcSuccess(id="1", result=5)

"""
Node RPC operations.

- send_tx:      submit a signed transaction, return its identifier
- account_info: current account state for an address
- ethop_info:   (executed, verified) for a priority operation serial id
- tx_info:      whether a transaction's block is verified

All four go through ``RpcClient.call`` and share its error surface.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..sigil.eth import PackedEthSignature, to_checksum_address
from ..sigil.tx import SignedTransaction
from ..wire.models import AccountState, ConfirmationStatus, OpInfo
from ..wire.schemas import SchemaValidationError
from .client import RpcClient
from .errors import MalformedResponseError

logger = logging.getLogger(__name__)

# Envelope ids per method.
SUBMIT_TX_ID = "1"
ACCOUNT_INFO_ID = 1
ETHOP_INFO_ID = "3"
TX_INFO_ID = "4"

UINT64_MAX = 2**64 - 1


def _op_info(result: Any, client: RpcClient, method: str) -> OpInfo:
    try:
        return OpInfo.from_dict(result, registry=client.registry)
    except SchemaValidationError as exc:
        raise MalformedResponseError(f"Malformed {method} result.", errors=exc.errors) from exc


async def send_tx(
    tx: SignedTransaction,
    eth_signature: Optional[PackedEthSignature],
    client: RpcClient,
) -> str:
    """
    Submit a signed transaction.

    The identifier is computed before sending. The node's result value is
    discarded.

    Args:
        tx: Signed transaction
        eth_signature: Optional authorization signature, sent as a second param
        client: RPC client

    Returns:
        Transaction identifier
    """
    tx_hash = tx.hash()
    params: list[Any] = [tx.to_json()]
    if eth_signature is not None:
        params.append(eth_signature.to_json())

    await client.call("tx_submit", params, request_id=SUBMIT_TX_ID)
    logger.info("Submitted %s", tx_hash)
    return tx_hash


async def account_info(address: str, client: RpcClient) -> AccountState:
    """
    Query the current state of an account.

    Args:
        address: 0x-prefixed account address
        client: RPC client

    Returns:
        AccountState wrapping the node's result verbatim
    """
    # Must be 20 bytes of hex; sent lowercase.
    address = to_checksum_address(address).lower()
    result = await client.call("account_info", [address], request_id=ACCOUNT_INFO_ID)
    try:
        return AccountState.from_dict(result, registry=client.registry)
    except SchemaValidationError as exc:
        raise MalformedResponseError("Malformed account_info result.", errors=exc.errors) from exc


async def ethop_info(serial_id: int, client: RpcClient) -> ConfirmationStatus:
    """
    Query a priority operation by serial id.

    Returns:
        (executed, verified); always (False, False) while not executed
    """
    if (
        isinstance(serial_id, bool)
        or not isinstance(serial_id, int)
        or not 0 <= serial_id <= UINT64_MAX
    ):
        raise ValueError(f"serial_id must be an unsigned 64-bit integer: {serial_id!r}")
    result = await client.call("ethop_info", [serial_id], request_id=ETHOP_INFO_ID)
    return _op_info(result, client, "ethop_info").status


async def tx_info(tx_hash: str, client: RpcClient) -> bool:
    """
    Query whether a transaction is verified.

    Returns:
        True only once the transaction is executed and its block verified
    """
    result = await client.call("tx_info", [tx_hash], request_id=TX_INFO_ID)
    return _op_info(result, client, "tx_info").status.verified

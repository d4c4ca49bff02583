"""
Wait for confirmations by polling the node.

These helpers sit above the single-shot calls in ``calls``: they repeat a
query until the operation is verified or the deadline passes. RPC errors
from any poll propagate immediately.
"""

from __future__ import annotations

import asyncio
import logging

from ..wire.models import ConfirmationStatus
from .calls import ethop_info, tx_info
from .client import RpcClient

logger = logging.getLogger(__name__)


async def wait_for_verified(
    tx_hash: str,
    client: RpcClient,
    timeout: float = 120,
    poll_interval: float = 2.0,
) -> None:
    """
    Wait until a transaction is verified.

    Args:
        tx_hash: Transaction identifier returned by send_tx
        client: RPC client
        timeout: Maximum wait time in seconds
        poll_interval: Polling interval in seconds

    Raises:
        TimeoutError: If not verified within timeout
    """
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while True:
        if await tx_info(tx_hash, client):
            logger.info("Transaction %s verified", tx_hash)
            return
        if loop.time() + poll_interval > deadline:
            break
        await asyncio.sleep(poll_interval)

    raise TimeoutError(f"Transaction {tx_hash} not verified within {timeout}s")


async def wait_for_ethop(
    serial_id: int,
    client: RpcClient,
    timeout: float = 120,
    poll_interval: float = 2.0,
) -> ConfirmationStatus:
    """
    Wait until a priority operation is verified.

    Returns:
        The final (executed=True, verified=True) status

    Raises:
        TimeoutError: If not verified within timeout
    """
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    last = None
    while True:
        status = await ethop_info(serial_id, client)
        if status != last:
            logger.info("Priority op %s: executed=%s verified=%s", serial_id, *status)
            last = status
        if status.verified:
            return status
        if loop.time() + poll_interval > deadline:
            break
        await asyncio.sleep(poll_interval)

    raise TimeoutError(f"Priority operation {serial_id} not verified within {timeout}s")

"""
Query - Read confirmation and account state from the node.
"""

from __future__ import annotations

import json
import sys

import click

from ..node.calls import account_info, ethop_info, tx_info
from ..node.polling import wait_for_verified
from ._common import rpc_url_option, run_rpc


def _yes_no(flag: bool) -> str:
    return click.style("yes", fg="green") if flag else click.style("no", fg="yellow")


@click.command("tx-info")
@click.argument("tx_hash")
@rpc_url_option
def tx_info_cmd(tx_hash: str, rpc_url: str | None) -> None:
    """Show whether TX_HASH is verified."""
    verified = run_rpc(rpc_url, lambda client: tx_info(tx_hash, client))
    click.echo(f"  TX:       {tx_hash}")
    click.echo(f"  Verified: {_yes_no(verified)}")


@click.command("ethop-info")
@click.argument("serial_id", type=click.IntRange(min=0, max=2**64 - 1))
@rpc_url_option
def ethop_info_cmd(serial_id: int, rpc_url: str | None) -> None:
    """Show executed/verified for priority operation SERIAL_ID."""
    status = run_rpc(rpc_url, lambda client: ethop_info(serial_id, client))
    click.echo(f"  Serial:   {serial_id}")
    click.echo(f"  Executed: {_yes_no(status.executed)}")
    click.echo(f"  Verified: {_yes_no(status.verified)}")


@click.command()
@click.argument("address")
@rpc_url_option
def account(address: str, rpc_url: str | None) -> None:
    """Show the node's account state for ADDRESS."""
    try:
        state = run_rpc(rpc_url, lambda client: account_info(address, client))
    except ValueError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)
    click.echo(json.dumps(state.to_dict(), indent=2, sort_keys=True))


@click.command()
@click.argument("tx_hash")
@click.option("--timeout", default=120.0, type=float, help="Maximum wait in seconds")
@click.option("--interval", default=2.0, type=float, help="Polling interval in seconds")
@rpc_url_option
def wait(tx_hash: str, timeout: float, interval: float, rpc_url: str | None) -> None:
    """Poll until TX_HASH is verified."""
    click.echo(f"Waiting for {tx_hash} ...")
    try:
        run_rpc(
            rpc_url,
            lambda client: wait_for_verified(tx_hash, client, timeout=timeout, poll_interval=interval),
        )
    except TimeoutError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)
    click.secho("SUCCESS: Transaction verified!", fg="green")

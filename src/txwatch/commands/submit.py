"""
Submit - Send a signed transaction to the node.

Reads the transaction payload from a JSON file, optionally attaches an
authorization signature over the transaction identifier, and prints the
identifier once the node accepts the request.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from ..node.calls import send_tx
from ..node.errors import SerializationError
from ..sigil.eth import get_address, load_private_key, sign_eth_message
from ..sigil.tx import CanonicalTx
from ._common import rpc_url_option, run_rpc


@click.command()
@click.option(
    "--tx-file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file with the signed transaction",
)
@click.option("--eth-sign", is_flag=True, help="Attach an authorization signature")
@rpc_url_option
def submit(tx_file: Path, eth_sign: bool, rpc_url: str | None) -> None:
    """Submit a signed transaction and print its identifier."""
    try:
        tx = CanonicalTx.from_path(tx_file)
        tx_hash = tx.hash()
    except SerializationError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)
    except ValueError as exc:
        click.secho(f"ERROR: Invalid transaction file: {exc}", fg="red")
        sys.exit(1)

    signature = None
    if eth_sign:
        try:
            private_key = load_private_key()
        except ValueError as exc:
            click.secho(f"ERROR: {exc}", fg="red")
            sys.exit(1)
        signature = sign_eth_message(tx_hash, private_key)
        click.echo(f"  Signer: {get_address(private_key)}")

    run_rpc(rpc_url, lambda client: send_tx(tx, signature, client))
    click.secho("Submitted", fg="green")
    click.echo(f"  TX: {tx_hash}")

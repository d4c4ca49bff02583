"""
txwatch CLI

Command-line interface for submitting transactions to a node and tracking
them through execution and verification.

Commands:
  submit      - Submit a signed transaction
  tx-info     - Show whether a transaction is verified
  ethop-info  - Show executed/verified for a priority operation
  account     - Show account state
  wait        - Poll until a transaction is verified
  events      - List stored block events
  info        - Show resolved configuration
"""

from __future__ import annotations

import logging

import click

from . import __version__
from .config import TXWATCH_ENV, get_db_path, get_rpc_url

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="txwatch")
@click.option("-v", "--verbose", is_flag=True, help="Log requests and responses")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """txwatch - transaction submission and confirmation client."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


from .commands.submit import submit
from .commands.query import account, ethop_info_cmd, tx_info_cmd, wait
from .commands.events import events

cli.add_command(submit)
cli.add_command(tx_info_cmd)
cli.add_command(ethop_info_cmd)
cli.add_command(account)
cli.add_command(wait)
cli.add_command(events)


@cli.command()
def info() -> None:
    """Show resolved configuration."""
    click.echo(f"  Version:   {__version__}")
    click.echo(f"  RPC URL:   {get_rpc_url()}")
    click.echo(f"  Event DB:  {get_db_path()}")
    env_state = "found" if TXWATCH_ENV.exists() else "not found"
    click.echo(f"  Env file:  {TXWATCH_ENV} ({env_state})")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()

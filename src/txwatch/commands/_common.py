from __future__ import annotations

import asyncio
import sys
from typing import Any, Awaitable, Callable

import click
import httpx

from ..node.client import RpcClient, open_client
from ..node.errors import RpcClientError

rpc_url_option = click.option(
    "--rpc-url",
    envvar="TXWATCH_RPC_URL",
    default=None,
    help="Node JSON-RPC URL (default: TXWATCH_RPC_URL or http://127.0.0.1:3030)",
)


def run_rpc(rpc_url: str | None, action: Callable[[RpcClient], Awaitable[Any]]) -> Any:
    """Run ``action`` against a fresh client; exit(1) on any RPC failure."""

    async def _main() -> Any:
        async with open_client(rpc_url) as client:
            return await action(client)

    try:
        return asyncio.run(_main())
    except RpcClientError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        for detail in getattr(exc, "errors", []):
            click.echo(f"  - {detail}")
        sys.exit(1)
    except httpx.HTTPError as exc:
        click.secho(f"ERROR: Request failed: {exc}", fg="red")
        sys.exit(1)

"""
Events - List block events recorded in the local event database.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click

from ..config import get_db_path
from ..storage.records import BlockType
from ..storage.store import EventStore


@click.command()
@click.option(
    "--type",
    "block_type",
    type=click.Choice([t.value for t in BlockType]),
    default=None,
    help="Only events of this type",
)
@click.option("--from-block", type=int, default=None, help="Only blocks >= this number")
@click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Event database (default: TXWATCH_DB or ~/.txwatch/events.db)",
)
@click.option("--json", "as_json", is_flag=True, help="Print events as JSON")
def events(
    block_type: Optional[str],
    from_block: Optional[int],
    db_path: Optional[Path],
    as_json: bool,
) -> None:
    """List stored Committed/Verified block events."""
    with EventStore(db_path or get_db_path()) as store:
        rows = store.load_block_events(
            block_type=BlockType(block_type) if block_type else None,
            from_block=from_block,
        )

    if as_json:
        click.echo(json.dumps([row.to_dict() for row in rows], indent=2))
        return

    if not rows:
        click.echo("No block events stored.")
        return
    for row in rows:
        click.echo(f"  #{row.block_num:<10} {row.block_type.value:<10} 0x{row.transaction_hash.hex()}")

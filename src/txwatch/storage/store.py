"""
SQLite store for storage-state checkpoints and block events.

Rows are only ever inserted and selected. One block event per
(block_num, block_type) is enforced by a UNIQUE constraint.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Any, Optional, Union

from .records import (
    BlockType,
    NewBlockEvent,
    NewStorageState,
    StoredBlockEvent,
    StoredStorageState,
)

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS storage_state_update (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    storage_state TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS events_state (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    block_type TEXT NOT NULL CHECK (block_type IN ('Committed', 'Verified')),
    transaction_hash BLOB NOT NULL,
    block_num INTEGER NOT NULL,
    UNIQUE (block_num, block_type)
);
CREATE INDEX IF NOT EXISTS idx_events_block_num ON events_state(block_num);
"""


class StoreError(RuntimeError):
    pass


class DuplicateBlockEventError(StoreError):
    def __init__(self, block_type: BlockType, block_num: int) -> None:
        super().__init__(f"{block_type.value} event for block {block_num} already stored")
        self.block_type = block_type
        self.block_num = block_num


class EventStore:
    """SQLite-backed storage for block events and state checkpoints."""

    def __init__(self, db_path: Union[str, Path] = ":memory:") -> None:
        self.db_path = str(db_path)
        if self.db_path != ":memory:":
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(self.db_path)
        self.conn.row_factory = sqlite3.Row
        self.conn.executescript(SCHEMA)

    def __enter__(self) -> "EventStore":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self.conn.close()

    # -- storage state --

    def save_storage_state(self, state: NewStorageState) -> StoredStorageState:
        with self.conn:
            cur = self.conn.execute(
                "INSERT INTO storage_state_update (storage_state) VALUES (?)",
                (state.storage_state,),
            )
        logger.info("Saved storage state checkpoint %s", cur.lastrowid)
        return StoredStorageState(id=cur.lastrowid, storage_state=state.storage_state)

    def load_storage_state(self) -> Optional[StoredStorageState]:
        """Latest checkpoint, or None if nothing was saved yet."""
        row = self.conn.execute(
            "SELECT id, storage_state FROM storage_state_update ORDER BY id DESC LIMIT 1"
        ).fetchone()
        if row is None:
            return None
        return StoredStorageState(id=row["id"], storage_state=row["storage_state"])

    # -- block events --

    def save_block_event(self, event: NewBlockEvent) -> StoredBlockEvent:
        try:
            with self.conn:
                cur = self.conn.execute(
                    "INSERT INTO events_state (block_type, transaction_hash, block_num) "
                    "VALUES (?, ?, ?)",
                    (event.block_type.value, event.transaction_hash, event.block_num),
                )
        except sqlite3.IntegrityError as exc:
            raise DuplicateBlockEventError(event.block_type, event.block_num) from exc
        logger.info("Saved %s event for block %s", event.block_type.value, event.block_num)
        return StoredBlockEvent(
            id=cur.lastrowid,
            block_type=event.block_type,
            transaction_hash=event.transaction_hash,
            block_num=event.block_num,
        )

    def load_block_events(
        self,
        block_type: Optional[BlockType] = None,
        from_block: Optional[int] = None,
    ) -> list[StoredBlockEvent]:
        """
        Load block events ordered by block number, then id.

        Args:
            block_type: Only events of this type
            from_block: Only events with block_num >= from_block
        """
        query = "SELECT id, block_type, transaction_hash, block_num FROM events_state"
        clauses = []
        args: list[Any] = []
        if block_type is not None:
            clauses.append("block_type = ?")
            args.append(BlockType(block_type).value)
        if from_block is not None:
            clauses.append("block_num >= ?")
            args.append(from_block)
        if clauses:
            query += " WHERE " + " AND ".join(clauses)
        query += " ORDER BY block_num, id"
        return [self._event_from_row(row) for row in self.conn.execute(query, args)]

    def load_last_block_event(self, block_type: BlockType) -> Optional[StoredBlockEvent]:
        row = self.conn.execute(
            "SELECT id, block_type, transaction_hash, block_num FROM events_state "
            "WHERE block_type = ? ORDER BY block_num DESC LIMIT 1",
            (BlockType(block_type).value,),
        ).fetchone()
        return self._event_from_row(row) if row is not None else None

    @staticmethod
    def _event_from_row(row: sqlite3.Row) -> StoredBlockEvent:
        return StoredBlockEvent(
            id=row["id"],
            block_type=BlockType(row["block_type"]),
            transaction_hash=bytes(row["transaction_hash"]),
            block_num=row["block_num"],
        )

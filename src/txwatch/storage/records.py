"""
Persisted records for block lifecycle events and state checkpoints.

``New*`` classes are insert projections without an id; ``Stored*`` classes
are read projections carrying the id the store assigned.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..utils import from_hex, to_hex

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class BlockType(str, Enum):
    COMMITTED = "Committed"
    VERIFIED = "Verified"


def _check_block_num(block_num: int) -> None:
    if isinstance(block_num, bool) or not INT64_MIN <= block_num <= INT64_MAX:
        raise ValueError(f"block_num out of int64 range: {block_num!r}")


@dataclass(frozen=True)
class NewStorageState:
    storage_state: str


@dataclass(frozen=True)
class StoredStorageState:
    id: int
    storage_state: str

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "StoredStorageState":
        return cls(id=int(payload["id"]), storage_state=payload["storage_state"])

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "storage_state": self.storage_state}


@dataclass(frozen=True)
class NewBlockEvent:
    block_type: BlockType
    transaction_hash: bytes
    block_num: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "block_type", BlockType(self.block_type))
        object.__setattr__(self, "transaction_hash", bytes(self.transaction_hash))
        _check_block_num(self.block_num)


@dataclass(frozen=True)
class StoredBlockEvent:
    id: int
    block_type: BlockType
    transaction_hash: bytes
    block_num: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "block_type", BlockType(self.block_type))
        object.__setattr__(self, "transaction_hash", bytes(self.transaction_hash))
        _check_block_num(self.block_num)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "StoredBlockEvent":
        return cls(
            id=int(payload["id"]),
            block_type=BlockType(payload["block_type"]),
            transaction_hash=from_hex(payload["transaction_hash"]),
            block_num=int(payload["block_num"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "block_type": self.block_type.value,
            "transaction_hash": to_hex(self.transaction_hash),
            "block_num": self.block_num,
        }

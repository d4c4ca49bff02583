from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple, Optional

from .schemas import (
    ACCOUNT_INFO_SCHEMA,
    OP_INFO_SCHEMA,
    SchemaRegistry,
    SchemaValidationError,
)


class ConfirmationStatus(NamedTuple):
    """Two-phase status of a transaction or priority operation.

    ``verified`` is only ever true when ``executed`` is true.
    """

    executed: bool
    verified: bool


PENDING = ConfirmationStatus(executed=False, verified=False)


@dataclass(frozen=True)
class BlockInfo:
    verified: bool
    committed: Optional[bool] = None
    block_number: Optional[int] = None

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "BlockInfo":
        return cls(
            verified=payload["verified"],
            committed=payload.get("committed"),
            block_number=payload.get("block_number"),
        )


@dataclass(frozen=True)
class OpInfo:
    """Result of ``tx_info`` / ``ethop_info``.

    ``block`` is None whenever the operation is not executed yet, even if the
    node sent a block object along with ``executed: false``.
    """

    executed: bool
    block: Optional[BlockInfo] = None

    @classmethod
    def from_dict(cls, payload: Any, registry: SchemaRegistry | None = None) -> "OpInfo":
        registry = registry or SchemaRegistry.default()
        registry.validate_instance(payload, OP_INFO_SCHEMA)
        if not payload["executed"]:
            return cls(executed=False)
        return cls(executed=True, block=BlockInfo.from_dict(payload["block"]))

    @property
    def status(self) -> ConfirmationStatus:
        if not self.executed or self.block is None:
            return PENDING
        return ConfirmationStatus(executed=True, verified=self.block.verified)


@dataclass(frozen=True)
class AccountState:
    data: dict[str, Any]

    @classmethod
    def from_dict(cls, payload: Any, registry: SchemaRegistry | None = None) -> "AccountState":
        registry = registry or SchemaRegistry.default()
        registry.validate_instance(payload, ACCOUNT_INFO_SCHEMA)
        return cls(payload)

    def to_dict(self) -> dict[str, Any]:
        return self.data


__all__ = [
    "AccountState",
    "BlockInfo",
    "ConfirmationStatus",
    "OpInfo",
    "PENDING",
    "SchemaValidationError",
]

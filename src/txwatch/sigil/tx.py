"""
Signed transaction payloads.

The node client never looks inside a transaction: it only needs the
content-derived identifier (``hash()``) and a JSON value to send
(``to_json()``). ``CanonicalTx`` is the stock implementation, hashing the
RFC 8785 canonical form of its payload.
"""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

import rfc8785

from ..node.errors import SerializationError
from ..utils import sha256_hex


class SignedTransaction(Protocol):
    def hash(self) -> str:
        ...

    def to_json(self) -> Any:
        ...


def tx_hash(payload: dict[str, Any]) -> str:
    """Compute the transaction identifier: 0x + SHA-256 of RFC 8785 JCS bytes.

    Raises:
        SerializationError: If the payload has no canonical form, e.g. an
            integer outside the IEEE 754 safe range
    """
    try:
        canonical = rfc8785.dumps(payload)
    except rfc8785.CanonicalizationError as exc:
        raise SerializationError(f"Cannot canonicalize transaction: {exc}") from exc
    return "0x" + sha256_hex(canonical)


@dataclass(frozen=True)
class CanonicalTx:
    payload: dict[str, Any]

    @classmethod
    def from_path(cls, path: Path) -> "CanonicalTx":
        with path.open("r", encoding="utf-8") as f:
            payload = json.load(f)
        if not isinstance(payload, dict):
            raise ValueError(f"Transaction file must hold a JSON object: {path}")
        return cls(payload)

    def hash(self) -> str:
        return tx_hash(self.payload)

    def to_json(self) -> dict[str, Any]:
        return copy.deepcopy(self.payload)

"""
ECDSA / secp256k1 helpers for authorization signatures.

Some transactions must be accompanied by an Ethereum-style signature of
the transaction identifier, made by the account owner's L1 key. That
signature is sent as the optional second ``tx_submit`` parameter.

Keys are read from PRIVATE_KEY (environment or ~/.txwatch/.env).
"""

from __future__ import annotations

import os
import secrets
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from eth_account import Account
from eth_account.messages import encode_defunct
from eth_account.signers.local import LocalAccount
from eth_hash.auto import keccak

from ..config import TXWATCH_ENV, load_env


@dataclass(frozen=True)
class PackedEthSignature:
    """65-byte r || s || v signature, carried as 0x-prefixed hex."""

    value: str

    def __post_init__(self) -> None:
        raw = self.value.removeprefix("0x")
        if len(raw) != 130:
            raise ValueError(f"Packed signature must be 65 bytes, got {len(raw) // 2}")
        bytes.fromhex(raw)

    def to_json(self) -> str:
        return "0x" + self.value.removeprefix("0x").lower()

    def to_bytes(self) -> bytes:
        return bytes.fromhex(self.value.removeprefix("0x"))


def generate_eoa() -> tuple[str, str]:
    """
    Generate a new ECDSA/secp256k1 keypair.

    Returns:
        Tuple of (private_key_hex, checksummed address)
    """
    private_key = "0x" + secrets.token_hex(32)
    account = Account.from_key(private_key)
    return private_key, account.address


def load_private_key(env_path: Optional[Path] = None) -> str:
    """
    Load private key from .env file or environment.

    Raises:
        ValueError: If PRIVATE_KEY is not set
    """
    env_path = env_path or TXWATCH_ENV
    load_env(env_path)

    private_key = os.environ.get("PRIVATE_KEY")
    if not private_key:
        raise ValueError(f"PRIVATE_KEY not found. Set PRIVATE_KEY in {env_path}")

    if not private_key.startswith("0x"):
        private_key = "0x" + private_key

    return private_key


def get_account(private_key: Optional[str] = None) -> LocalAccount:
    if private_key is None:
        private_key = load_private_key()
    return Account.from_key(private_key)


def get_address(private_key: Optional[str] = None) -> str:
    """Get the checksummed Ethereum address for a private key."""
    return get_account(private_key).address


def sign_eth_message(message: str, private_key: Optional[str] = None) -> PackedEthSignature:
    """
    Sign a message using EIP-191 personal_sign.

    Args:
        message: Text to sign (usually a transaction identifier)
        private_key: 0x-prefixed hex private key. If None, loads from .env.
    """
    account = get_account(private_key)
    signed = account.sign_message(encode_defunct(text=message))
    return PackedEthSignature(bytes(signed.signature).hex())


def recover_signer(message: str, signature: PackedEthSignature) -> str:
    """Return the checksummed address that produced ``signature`` over ``message``."""
    return Account.recover_message(encode_defunct(text=message), signature=signature.to_bytes())


def to_checksum_address(address: str) -> str:
    """Convert an address to EIP-55 checksummed format."""
    addr = address.lower().removeprefix("0x")
    if len(addr) != 40:
        raise ValueError(f"Address must be 20 bytes: {address}")
    bytes.fromhex(addr)
    # NOTE: Keccak-256 != SHA3-256 (NIST). Never use hashlib.sha3_256 here.
    addr_hash = keccak(addr.encode("utf-8")).hex()
    result = "0x"
    for i, c in enumerate(addr):
        if c in "abcdef":
            result += c.upper() if int(addr_hash[i], 16) >= 8 else c
        else:
            result += c
    return result

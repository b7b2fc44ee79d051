from __future__ import annotations

import base64
import hashlib
import json
from pathlib import Path
from typing import Any

PUBLIC_ADDRESS_LENGTH = 32


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def base64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def base64url_decode(value: str) -> bytes:
    padding = "=" * (-len(value) % 4)
    # Raises binascii.Error (a ValueError) on characters outside the alphabet
    return base64.b64decode(value + padding, altchars=b"-_", validate=True)


def public_address_from_base64url(value: str) -> bytes:
    """
    Decode a base64url account address.

    Raises:
        ValueError: If the value is not base64url or not 32 bytes long
    """
    address = base64url_decode(value)
    if len(address) != PUBLIC_ADDRESS_LENGTH:
        raise ValueError(
            f"Incorrect address length: expected {PUBLIC_ADDRESS_LENGTH} bytes, got {len(address)}"
        )
    return address


def contract_address_v1(signer: bytes, nonce: int) -> bytes:
    """Contract address as defined in protocol v0.4: sha256(signer || nonce as u64 LE)."""
    return sha256(signer + nonce.to_bytes(8, "little"))


def contract_address_v2(signer: bytes, nonce: int, index: int) -> bytes:
    """Contract address as defined in protocol v0.5: sha256(signer || nonce as u64 LE || index as u32 LE)."""
    return sha256(signer + nonce.to_bytes(8, "little") + index.to_bytes(4, "little"))


def load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)

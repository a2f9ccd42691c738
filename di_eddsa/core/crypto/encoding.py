"""Byte/text encodings shared by the key codec and the proof pipeline."""

from __future__ import annotations

import base64
import binascii

import base58

from di_eddsa.core.errors import FormatError

# Multibase header for base58-btc.
MULTIBASE_BASE58_BTC = "z"


def base58btc_encode(data: bytes) -> str:
    """Encode bytes as a base58-btc multibase string (``z`` header included)."""
    return MULTIBASE_BASE58_BTC + base58.b58encode(data).decode("ascii")


def base58btc_decode(text: str) -> bytes:
    """Decode a base58-btc multibase string.

    Raises
    ------
    FormatError
        If the ``z`` header is missing or the body is not valid base58.
    """
    if not isinstance(text, str) or not text.startswith(MULTIBASE_BASE58_BTC):
        raise FormatError("Invalid base-58-btc multibase header", source="base58btc_decode")
    try:
        return base58.b58decode(text[len(MULTIBASE_BASE58_BTC) :])
    except ValueError as exc:
        raise FormatError(f"Invalid base-58-btc body: {exc}", source="base58btc_decode") from exc


def base64url_encode(data: bytes) -> str:
    """Unpadded base64url, as used by JWK members."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def base64url_decode(text: str) -> bytes:
    pad = "=" * (-len(text) % 4)
    try:
        return base64.urlsafe_b64decode(text + pad)
    except (binascii.Error, ValueError) as exc:
        raise FormatError(f"Invalid base64url value: {exc}", source="base64url_decode") from exc

"""Canonicalization helpers for stable cross-platform hashing/signing."""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from typing import Any

import rfc8785
from pyld import jsonld

CANONICALIZATION_RDFC = "URDNA2015"

RDF_FORMAT_NQUADS = "application/n-quads"


def canonicalize_jcs_bytes(data: Any) -> bytes:
    """Return RFC 8785 (JCS) canonical bytes."""
    canonical = rfc8785.dumps(data)
    if isinstance(canonical, bytes):
        return canonical
    return str(canonical).encode("utf-8")


def canonicalize_jcs(data: Any) -> str:
    """Return RFC 8785 (JCS) canonical JSON text."""
    return canonicalize_jcs_bytes(data).decode("utf-8")


def canonicalize_rdfc(
    document: dict[str, Any],
    document_loader: Callable[..., dict[str, Any]],
) -> str:
    """Return the canonical N-Quads of a JSON-LD document.

    Context URLs are dereferenced exclusively through ``document_loader``.
    ``pyld.jsonld.JsonLdError`` propagates to the caller, which maps it onto
    the failing pipeline stage.
    """
    canonical = jsonld.normalize(
        document,
        {
            "algorithm": CANONICALIZATION_RDFC,
            "format": RDF_FORMAT_NQUADS,
            "documentLoader": document_loader,
        },
    )
    return str(canonical)


def sha256_digest(text: str) -> bytes:
    """SHA-256 over the UTF-8 encoding of ``text`` (always 32 bytes)."""
    return hashlib.sha256(text.encode("utf-8")).digest()


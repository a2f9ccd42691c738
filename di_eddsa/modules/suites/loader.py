"""
Document loader contract and an offline, in-memory implementation.

A loader is called as ``loader(url, options)`` and returns a remote document
dict ``{"contextUrl": None, "documentUrl": url, "document": {...}}``. This is
the same contract pyld uses for ``documentLoader``, so one loader serves both
context dereferencing during canonicalization and verification-method
resolution.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Mapping
from typing import Any, Protocol

from di_eddsa.core.errors import DocumentLoaderError


class DocumentLoader(Protocol):
    """Callable resolving a URL to a remote document dict."""

    def __call__(
        self, url: str, options: dict[str, Any] | None = None
    ) -> dict[str, Any]: ...


class StaticDocumentLoader:
    """Serve documents from a fixed URL map; never touches the network."""

    def __init__(self, documents: Mapping[str, Any] | None = None) -> None:
        self._documents: dict[str, Any] = copy.deepcopy(dict(documents or {}))

    def __call__(self, url: str, options: dict[str, Any] | None = None) -> dict[str, Any]:
        if url not in self._documents:
            raise DocumentLoaderError(
                f"Attempted to remote load context: '{url}', please cache instead",
                source="StaticDocumentLoader",
            )
        return {
            "contextUrl": None,
            "documentUrl": url,
            "document": copy.deepcopy(self._documents[url]),
        }

    def __contains__(self, url: object) -> bool:
        return url in self._documents

    def extend(self, documents: Mapping[str, Any]) -> StaticDocumentLoader:
        """Return a new loader serving this loader's documents plus ``documents``."""
        merged = dict(self._documents)
        merged.update(documents)
        return StaticDocumentLoader(merged)


def load_json_document(loader: DocumentLoader, url: str) -> dict[str, Any]:
    """Call ``loader`` and return the parsed JSON object it produced.

    Raises
    ------
    DocumentLoaderError
        If the loader fails or yields something other than a JSON object.
    """
    try:
        remote = loader(url, {})
    except DocumentLoaderError:
        raise
    except Exception as exc:
        raise DocumentLoaderError(
            f"Failed to load '{url}': {exc}", source="load_json_document"
        ) from exc

    document = remote.get("document") if isinstance(remote, Mapping) else None
    if isinstance(document, (str, bytes)):
        try:
            document = json.loads(document)
        except ValueError as exc:
            raise DocumentLoaderError(
                f"Document at '{url}' is not valid JSON", source="load_json_document"
            ) from exc
    if not isinstance(document, dict):
        raise DocumentLoaderError(
            f"Document at '{url}' is not a JSON object", source="load_json_document"
        )
    return document

"""Tests for the offline document loader."""

from __future__ import annotations

import json
from typing import Any

import pytest

from di_eddsa.core.errors import DocumentLoaderError
from di_eddsa.modules.suites.loader import StaticDocumentLoader, load_json_document

URL = "https://example.org/context/v1"
DOCUMENT = {"@context": {"name": "https://schema.org/name"}}


class TestStaticDocumentLoader:
    """Tests for the in-memory loader."""

    def test_returns_remote_document(self) -> None:
        remote = StaticDocumentLoader({URL: DOCUMENT})(URL, {})
        assert remote == {"contextUrl": None, "documentUrl": URL, "document": DOCUMENT}

    def test_returns_copies(self) -> None:
        loader = StaticDocumentLoader({URL: DOCUMENT})
        loader(URL)["document"]["@context"]["name"] = "changed"
        assert loader(URL)["document"] == DOCUMENT

    def test_unknown_url_raises(self) -> None:
        with pytest.raises(DocumentLoaderError, match="please cache instead"):
            StaticDocumentLoader()("https://example.org/unknown")

    def test_snapshot_on_construction(self) -> None:
        documents = {URL: {"@context": {}}}
        loader = StaticDocumentLoader(documents)
        documents[URL]["@context"]["name"] = "https://schema.org/name"
        assert loader(URL)["document"] == {"@context": {}}

    def test_contains(self) -> None:
        loader = StaticDocumentLoader({URL: DOCUMENT})
        assert URL in loader
        assert "https://example.org/other" not in loader

    def test_extend_leaves_original_untouched(self) -> None:
        loader = StaticDocumentLoader({URL: DOCUMENT})
        extended = loader.extend({"did:example:1": {"id": "did:example:1"}})
        assert "did:example:1" in extended
        assert URL in extended
        assert "did:example:1" not in loader

    def test_extend_overrides(self) -> None:
        loader = StaticDocumentLoader({URL: DOCUMENT}).extend({URL: {"@context": {}}})
        assert loader(URL)["document"] == {"@context": {}}


class TestLoadJsonDocument:
    def test_returns_document(self) -> None:
        assert load_json_document(StaticDocumentLoader({URL: DOCUMENT}), URL) == DOCUMENT

    def test_parses_string_documents(self) -> None:
        loader = StaticDocumentLoader({URL: json.dumps(DOCUMENT)})
        assert load_json_document(loader, URL) == DOCUMENT

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(DocumentLoaderError, match="not valid JSON"):
            load_json_document(StaticDocumentLoader({URL: "{"}), URL)

    def test_non_object_raises(self) -> None:
        with pytest.raises(DocumentLoaderError, match="not a JSON object"):
            load_json_document(StaticDocumentLoader({URL: ["a"]}), URL)

    def test_foreign_loader_failure_wrapped(self) -> None:
        def loader(url: str, options: dict[str, Any] | None = None) -> dict[str, Any]:
            raise RuntimeError("network disabled")

        with pytest.raises(DocumentLoaderError, match="network disabled"):
            load_json_document(loader, URL)

    def test_loader_error_propagates(self) -> None:
        with pytest.raises(DocumentLoaderError, match="please cache instead"):
            load_json_document(StaticDocumentLoader(), URL)

"""
Pytest fixtures for the EdDSA cryptosuite tests.
Provides the W3C vc-di-eddsa test vectors and an offline document loader.
"""

import json
from pathlib import Path
from typing import Any

import pytest

from di_eddsa.core.config import get_settings
from di_eddsa.modules.suites.loader import StaticDocumentLoader

FIXTURES = Path(__file__).parent / "fixtures"

CREDENTIALS_V2_URL = "https://www.w3.org/ns/credentials/v2"
EXAMPLES_V2_URL = "https://www.w3.org/ns/credentials/examples/v2"
CONTROLLER_DID = "did:key:z6MkrJVnaZkeFzdQyMZu1cgjg7k1pZZ6pvBQ7XJPt4swbTQ2"
VERIFICATION_METHOD = f"{CONTROLLER_DID}#z6MkrJVnaZkeFzdQyMZu1cgjg7k1pZZ6pvBQ7XJPt4swbTQ2"
PUBLIC_KEY_MULTIBASE = "z6MkrJVnaZkeFzdQyMZu1cgjg7k1pZZ6pvBQ7XJPt4swbTQ2"
SECRET_KEY_MULTIBASE = "z3u2en7t5LR2WtQH5PfFqMqwVHBeXouLzo6haApm8XHqvjxq"

RDFC_DOCUMENT_HASH = "517744132ae165a5349155bef0bb0cf2258fff99dfe1dbd914b938d775a36017"
RDFC_PROOF_HASH = "bea7b7acfbad0126b135104024a5f1733e705108f42d59668b05c0c50004c6b0"
RDFC_PROOF_VALUE = (
    "z2YwC8z3ap7yx1nZYCg4L3j3ApHsF8kgPdSb5xoS1VR7vPG3F561B52hYnQF9iseabecm3ijx4K1FBTQsCZahKZme"
)
JCS_PROOF_VALUE = (
    "z2HnFSSPPBzR36zdDgK8PbEHeXbR56YF24jwMpt3R1eHXQzJDMWS93FCzpvJpwTWd3GAVFuUfjoJdcnTMuVor51aX"
)


def load_fixture(name: str) -> Any:
    return json.loads((FIXTURES / name).read_text(encoding="utf-8"))


def read_fixture_text(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    """Settings are cached process-wide; drop them between tests."""
    get_settings.cache_clear()


@pytest.fixture
def controller_document() -> dict[str, Any]:
    return load_fixture("did-key-controller.json")


@pytest.fixture
def verification_method(controller_document: dict[str, Any]) -> dict[str, Any]:
    return controller_document["verificationMethod"][0]


@pytest.fixture
def document_loader(controller_document: dict[str, Any]) -> StaticDocumentLoader:
    """Offline loader serving the contexts and the did:key controller document."""
    return StaticDocumentLoader(
        {
            CREDENTIALS_V2_URL: load_fixture("contexts/credentials-v2.json"),
            EXAMPLES_V2_URL: load_fixture("contexts/examples-v2.json"),
            CONTROLLER_DID: controller_document,
        }
    )


@pytest.fixture
def unsecured_credential() -> dict[str, Any]:
    return load_fixture("unsecured-credential.json")


@pytest.fixture
def rdfc_proof_options() -> dict[str, Any]:
    return load_fixture("proof-options-rdfc.json")


@pytest.fixture
def jcs_proof_options() -> dict[str, Any]:
    return load_fixture("proof-options-jcs.json")

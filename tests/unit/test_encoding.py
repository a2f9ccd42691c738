"""Tests for multibase and base64url helpers."""

from __future__ import annotations

import pytest

from di_eddsa.core.crypto.encoding import (
    base58btc_decode,
    base58btc_encode,
    base64url_decode,
    base64url_encode,
)
from di_eddsa.core.errors import FormatError


class TestBase58Btc:
    def test_header(self) -> None:
        assert base58btc_encode(b"hello").startswith("z")

    def test_known_value(self) -> None:
        # base58("hello world") per the Bitcoin alphabet
        assert base58btc_encode(b"hello world") == "zStV1DL6CwTryKyV"

    def test_leading_zero_bytes_preserved(self) -> None:
        data = b"\x00\x00\x01\x02"
        assert base58btc_decode(base58btc_encode(data)) == data

    def test_missing_header_rejected(self) -> None:
        with pytest.raises(FormatError, match="header"):
            base58btc_decode("StV1DL6CwTryKyV")

    @pytest.mark.parametrize("body", ["z0abc", "zOabc", "zIabc", "zlabc"])
    def test_characters_outside_alphabet_rejected(self, body: str) -> None:
        with pytest.raises(FormatError):
            base58btc_decode(body)

    def test_non_string_rejected(self) -> None:
        with pytest.raises(FormatError):
            base58btc_decode(b"zabc")  # type: ignore[arg-type]


class TestBase64Url:
    def test_unpadded(self) -> None:
        assert base64url_encode(b"\xff\xfe") == "__4"

    def test_decode_restores_padding(self) -> None:
        assert base64url_decode("__4") == b"\xff\xfe"

    def test_invalid_rejected(self) -> None:
        with pytest.raises(FormatError):
            base64url_decode("a")

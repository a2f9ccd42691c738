"""
Ed25519 key material codec.

Lossless, validated conversion between the four representations of one
Ed25519 key:

- **raw**: 32-byte public point / 32-byte private seed
- **DER**: SubjectPublicKeyInfo / PKCS8 PrivateKeyInfo with a fixed prefix
- **multibase**: ``z`` + base58-btc(multicodec prefix || raw)
- **JWK**: ``{"kty": "OKP", "crv": "Ed25519", "x": ..., "d": ...}``

Every decoder compares the full expected prefix and fails closed with
:class:`~di_eddsa.core.errors.FormatError`; this is what keeps a private key
from being read as a public one and vice versa.
"""

from __future__ import annotations

import hashlib
from collections.abc import Mapping
from typing import Any, Literal, overload

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
    load_der_private_key,
    load_der_public_key,
)
from jwt.algorithms import OKPAlgorithm
from jwt.exceptions import InvalidKeyError

from di_eddsa.core.crypto.canonicalization import canonicalize_jcs_bytes
from di_eddsa.core.crypto.encoding import (
    base58btc_decode,
    base58btc_encode,
    base64url_decode,
    base64url_encode,
)
from di_eddsa.core.errors import FormatError
from di_eddsa.modules.keys.constants import (
    DER_PREFIXES,
    EXTENDED_PRIVATE_KEY_LENGTH,
    JWK_CURVE,
    JWK_KEY_TYPE,
    JWK_USE,
    PRIVATE_KEY_LENGTH,
    PUBLIC_KEY_LENGTH,
    KeyFlag,
)

Ed25519Key = Ed25519PrivateKey | Ed25519PublicKey

_MATERIAL_LENGTHS = {
    KeyFlag.PUBLIC: PUBLIC_KEY_LENGTH,
    KeyFlag.PRIVATE: PRIVATE_KEY_LENGTH,
}


def _flag(flag: KeyFlag | str) -> KeyFlag:
    try:
        return KeyFlag(flag)
    except ValueError as exc:
        raise FormatError(f"Unsupported key flag: {flag!r}", source="codec") from exc


# ----------------------------------------------------------------------
# DER
# ----------------------------------------------------------------------


def material_from_der(blob: bytes, flag: KeyFlag | str) -> bytes:
    """Strip the Ed25519 DER prefix for ``flag`` and return the raw material.

    Raises
    ------
    FormatError
        If any prefix byte differs from the expected constant, or the
        remaining material is not 32 bytes long.
    """
    flag = _flag(flag)
    prefix = DER_PREFIXES[flag]
    blob = bytes(blob)
    if blob[: len(prefix)] != prefix:
        raise FormatError(
            f"Expected the buffer to be an Ed25519 {flag.value} key",
            source="codec.material_from_der",
        )
    material = blob[len(prefix) :]
    if len(material) != _MATERIAL_LENGTHS[flag]:
        raise FormatError(
            f"Expected {_MATERIAL_LENGTHS[flag]} bytes of {flag.value} key material, "
            f"got {len(material)}",
            source="codec.material_from_der",
        )
    return material


def der_from_material(material: bytes, flag: KeyFlag | str) -> bytes:
    """Prepend the Ed25519 DER prefix for ``flag`` to 32 bytes of raw material."""
    flag = _flag(flag)
    if len(material) != _MATERIAL_LENGTHS[flag]:
        raise FormatError(
            f"Invalid {flag.value} key material length: {len(material)}",
            source="codec.der_from_material",
        )
    return DER_PREFIXES[flag] + bytes(material)


# ----------------------------------------------------------------------
# Multibase / multicodec
# ----------------------------------------------------------------------


def multibase_encode(material: bytes, multicodec_prefix: bytes) -> str:
    """Encode ``multicodec_prefix || material`` as a base58-btc multibase string."""
    return base58btc_encode(bytes(multicodec_prefix) + bytes(material))


def multibase_decode(text: str, expected_prefix: bytes | None = None) -> bytes:
    """Decode a base58-btc multibase string.

    When ``expected_prefix`` is given, every byte of it must match the head of
    the decoded bytes; the prefix is then stripped from the result.
    """
    decoded = base58btc_decode(text)
    if expected_prefix is None:
        return decoded
    expected_prefix = bytes(expected_prefix)
    head = decoded[: len(expected_prefix)]
    if len(head) != len(expected_prefix) or any(
        actual != expected for actual, expected in zip(head, expected_prefix, strict=True)
    ):
        raise FormatError("Invalid multicodec key prefix", source="codec.multibase_decode")
    return decoded[len(expected_prefix) :]


# ----------------------------------------------------------------------
# Key objects <-> raw material
# ----------------------------------------------------------------------


def key_to_material(key: Ed25519Key, flag: KeyFlag | str) -> bytes:
    """Export a key object to raw material through its DER encoding."""
    flag = _flag(flag)
    if flag is KeyFlag.PRIVATE:
        if not isinstance(key, Ed25519PrivateKey):
            raise FormatError("Expected an Ed25519 private key", source="codec.key_to_material")
        der = key.private_bytes(Encoding.DER, PrivateFormat.PKCS8, NoEncryption())
    else:
        public = key.public_key() if isinstance(key, Ed25519PrivateKey) else key
        if not isinstance(public, Ed25519PublicKey):
            raise FormatError("Expected an Ed25519 public key", source="codec.key_to_material")
        der = public.public_bytes(Encoding.DER, PublicFormat.SubjectPublicKeyInfo)
    return material_from_der(der, flag)


@overload
def material_to_key(material: bytes, flag: Literal[KeyFlag.PRIVATE]) -> Ed25519PrivateKey: ...
@overload
def material_to_key(material: bytes, flag: Literal[KeyFlag.PUBLIC]) -> Ed25519PublicKey: ...
@overload
def material_to_key(material: bytes, flag: KeyFlag | str) -> Ed25519Key: ...


def material_to_key(material: bytes, flag: KeyFlag | str) -> Ed25519Key:
    """Import raw material as a key object through the DER route.

    Private material may be the 32-byte seed or the 64-byte ``seed || public``
    form; in the latter case the trailing half must equal the derived public key.
    """
    flag = _flag(flag)
    material = bytes(material)
    if flag is KeyFlag.PRIVATE:
        if len(material) == EXTENDED_PRIVATE_KEY_LENGTH:
            seed, public = material[:PRIVATE_KEY_LENGTH], material[PRIVATE_KEY_LENGTH:]
            private_key = material_to_key(seed, KeyFlag.PRIVATE)
            if key_to_material(private_key, KeyFlag.PUBLIC) != public:
                raise FormatError(
                    "Extended private key does not match its public half",
                    source="codec.material_to_key",
                )
            return private_key
        der = der_from_material(material, flag)
        try:
            key: Any = load_der_private_key(der, password=None)
        except (ValueError, UnsupportedAlgorithm) as exc:
            raise FormatError(f"Invalid private key: {exc}", source="codec.material_to_key") from exc
        if not isinstance(key, Ed25519PrivateKey):
            raise FormatError("Expected an Ed25519 private key", source="codec.material_to_key")
        return key
    der = der_from_material(material, flag)
    try:
        key = load_der_public_key(der)
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise FormatError(f"Invalid public key: {exc}", source="codec.material_to_key") from exc
    if not isinstance(key, Ed25519PublicKey):
        raise FormatError("Expected an Ed25519 public key", source="codec.material_to_key")
    return key


# ----------------------------------------------------------------------
# JSON Web Key
# ----------------------------------------------------------------------


def jwk_from_key(key: Ed25519Key, flag: KeyFlag | str) -> dict[str, Any]:
    """Export a key object as an OKP/Ed25519 JWK.

    A public JWK never carries ``d`` and is restricted to ``verify``.
    """
    flag = _flag(flag)
    if flag is KeyFlag.PRIVATE:
        if not isinstance(key, Ed25519PrivateKey):
            raise FormatError("Expected an Ed25519 private key", source="codec.jwk_from_key")
        jwk: dict[str, Any] = OKPAlgorithm.to_jwk(key, as_dict=True)
        jwk["key_ops"] = ["sign"]
    else:
        public = key.public_key() if isinstance(key, Ed25519PrivateKey) else key
        if not isinstance(public, Ed25519PublicKey):
            raise FormatError("Expected an Ed25519 public key", source="codec.jwk_from_key")
        jwk = OKPAlgorithm.to_jwk(public, as_dict=True)
        jwk.pop("d", None)
        jwk["key_ops"] = ["verify"]
    jwk["use"] = JWK_USE
    return jwk


@overload
def key_from_jwk(jwk: Mapping[str, Any], flag: Literal[KeyFlag.PRIVATE]) -> Ed25519PrivateKey: ...
@overload
def key_from_jwk(jwk: Mapping[str, Any], flag: Literal[KeyFlag.PUBLIC]) -> Ed25519PublicKey: ...
@overload
def key_from_jwk(jwk: Mapping[str, Any], flag: KeyFlag | str) -> Ed25519Key: ...


def key_from_jwk(jwk: Mapping[str, Any], flag: KeyFlag | str) -> Ed25519Key:
    """Import an OKP/Ed25519 JWK as a key object.

    With ``flag`` public, a ``d`` member is stripped before import so a private
    JWK is never handled as a private key by accident.
    """
    flag = _flag(flag)
    if not isinstance(jwk, Mapping):
        raise FormatError("A JWK must be a JSON object", source="codec.key_from_jwk")
    material = dict(jwk)
    if material.get("kty") != JWK_KEY_TYPE or material.get("crv") != JWK_CURVE:
        raise FormatError(
            f"Unsupported JWK (kty={material.get('kty')!r}, crv={material.get('crv')!r})",
            source="codec.key_from_jwk",
        )
    if flag is KeyFlag.PUBLIC:
        if "d" in material:
            material.pop("d")
            material["key_ops"] = ["verify"]
    elif "d" not in material:
        raise FormatError("The JWK does not contain a private key", source="codec.key_from_jwk")
    for member in ("x", "d"):
        if member in material and not isinstance(material[member], str):
            raise FormatError(
                f"JWK member {member!r} must be a base64url string", source="codec.key_from_jwk"
            )

    try:
        key = OKPAlgorithm.from_jwk(material)
    except (InvalidKeyError, TypeError, ValueError) as exc:
        raise FormatError(f"Invalid JWK: {exc}", source="codec.key_from_jwk") from exc

    if flag is KeyFlag.PRIVATE:
        if not isinstance(key, Ed25519PrivateKey):
            raise FormatError("Expected an Ed25519 private key", source="codec.key_from_jwk")
        if key_to_material(key, KeyFlag.PUBLIC) != base64url_decode(str(material["x"])):
            raise FormatError(
                "The JWK public member does not match its private member",
                source="codec.key_from_jwk",
            )
    elif not isinstance(key, Ed25519PublicKey):
        raise FormatError("Expected an Ed25519 public key", source="codec.key_from_jwk")
    return key


def jwk_thumbprint(jwk: Mapping[str, Any]) -> str:
    """RFC 7638 SHA-256 thumbprint of an OKP JWK, base64url encoded."""
    try:
        members = {"crv": jwk["crv"], "kty": jwk["kty"], "x": jwk["x"]}
    except KeyError as exc:
        raise FormatError(f"JWK is missing member {exc}", source="codec.jwk_thumbprint") from exc
    return base64url_encode(hashlib.sha256(canonicalize_jcs_bytes(members)).digest())

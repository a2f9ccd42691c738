"""Ed25519 key material constants."""

from __future__ import annotations

from enum import Enum


class KeyFlag(str, Enum):
    """Which half of a keypair an operation targets."""

    PUBLIC = "public"
    PRIVATE = "private"


class KeyEncoding(str, Enum):
    """Key document encodings supported by export/import."""

    MULTIBASE = "multibase"
    JWK = "jwk"


PUBLIC_KEY_LENGTH = 32
PRIVATE_KEY_LENGTH = 32
# seed || public key
EXTENDED_PRIVATE_KEY_LENGTH = 64
SEED_LENGTH = 32

# SEQUENCE(42) { SEQUENCE(5) { OID 1.3.101.112 } BIT STRING(33) { 0x00 ... } }
DER_PUBLIC_PREFIX = bytes.fromhex("302a300506032b6570032100")
# SEQUENCE(46) { INTEGER 0, SEQUENCE(5) { OID 1.3.101.112 }, OCTET STRING(34) { OCTET STRING(32) ... } }
DER_PRIVATE_PREFIX = bytes.fromhex("302e020100300506032b657004220420")

# varint(0xed) and varint(0x1300)
MULTICODEC_PUBLIC_PREFIX = bytes([0xED, 0x01])
MULTICODEC_PRIVATE_PREFIX = bytes([0x80, 0x26])

JWK_KEY_TYPE = "OKP"
JWK_CURVE = "Ed25519"
JWK_USE = "sig"

TYPE_MULTIKEY = "Multikey"
TYPE_ED25519_2020 = "Ed25519VerificationKey2020"
TYPE_JSON_WEB_KEY = "JsonWebKey"
TYPE_JSON_WEB_KEY_2020 = "JsonWebKey2020"

MULTIBASE_TYPES = frozenset({TYPE_MULTIKEY, TYPE_ED25519_2020})
JWK_TYPES = frozenset({TYPE_JSON_WEB_KEY, TYPE_JSON_WEB_KEY_2020})

DER_PREFIXES = {
    KeyFlag.PUBLIC: DER_PUBLIC_PREFIX,
    KeyFlag.PRIVATE: DER_PRIVATE_PREFIX,
}

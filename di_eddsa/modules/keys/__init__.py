"""
Ed25519 key material.

- **codec**: raw / DER / multibase / JWK conversions
- **generator**: raw keypair generation (optionally seeded)
- **keypair**: the verification-method-shaped keypair entity
"""

from di_eddsa.modules.keys.codec import (
    der_from_material,
    jwk_from_key,
    jwk_thumbprint,
    key_from_jwk,
    key_to_material,
    material_from_der,
    material_to_key,
    multibase_decode,
    multibase_encode,
)
from di_eddsa.modules.keys.constants import KeyEncoding, KeyFlag
from di_eddsa.modules.keys.generator import RawKeypair, generate_raw_keypair
from di_eddsa.modules.keys.keypair import Ed25519Keypair

__all__ = [
    "der_from_material",
    "jwk_from_key",
    "jwk_thumbprint",
    "key_from_jwk",
    "key_to_material",
    "material_from_der",
    "material_to_key",
    "multibase_decode",
    "multibase_encode",
    "KeyEncoding",
    "KeyFlag",
    "RawKeypair",
    "generate_raw_keypair",
    "Ed25519Keypair",
]

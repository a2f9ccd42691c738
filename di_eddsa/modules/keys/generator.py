"""Raw Ed25519 keypair generation."""

from __future__ import annotations

from typing import NamedTuple

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from di_eddsa.core.errors import FormatError
from di_eddsa.modules.keys.codec import key_to_material, material_to_key
from di_eddsa.modules.keys.constants import SEED_LENGTH, KeyFlag


class RawKeypair(NamedTuple):
    """Raw 32-byte public point and 32-byte private seed."""

    public_key: bytes
    private_key: bytes


def generate_raw_keypair(seed: bytes | None = None) -> RawKeypair:
    """Generate a fresh Ed25519 keypair as raw material.

    Parameters
    ----------
    seed:
        Optional 32-byte seed. The private key is then imported through its
        PKCS8 DER encoding and the public key is derived from it, so the same
        seed always yields the same pair.

    Raises
    ------
    FormatError
        If ``seed`` is given and is not exactly 32 bytes.
    """
    if seed is None:
        private_key = Ed25519PrivateKey.generate()
    else:
        if len(seed) != SEED_LENGTH:
            raise FormatError("Invalid seed length", source="generate_raw_keypair")
        private_key = material_to_key(seed, KeyFlag.PRIVATE)
    return RawKeypair(
        public_key=key_to_material(private_key.public_key(), KeyFlag.PUBLIC),
        private_key=key_to_material(private_key, KeyFlag.PRIVATE),
    )

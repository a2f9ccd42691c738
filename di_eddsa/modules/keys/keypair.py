"""Ed25519 keypair entity with verification-method export/import."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from pydantic import ValidationError

from di_eddsa.core.config import get_settings
from di_eddsa.core.errors import FormatError, KeypairRevokedError, LogicError
from di_eddsa.core.logging import get_logger
from di_eddsa.modules.keys.codec import (
    jwk_from_key,
    key_from_jwk,
    key_to_material,
    material_to_key,
    multibase_decode,
    multibase_encode,
)
from di_eddsa.modules.keys.constants import (
    JWK_TYPES,
    MULTIBASE_TYPES,
    MULTICODEC_PRIVATE_PREFIX,
    MULTICODEC_PUBLIC_PREFIX,
    TYPE_JSON_WEB_KEY,
    TYPE_MULTIKEY,
    KeyEncoding,
    KeyFlag,
)
from di_eddsa.modules.keys.generator import generate_raw_keypair
from di_eddsa.modules.keys.schemas import VerificationMethodDocument

logger = get_logger(__name__)


class Ed25519Keypair:
    """An Ed25519 keypair addressable as a verification method.

    Either half may be absent: an imported public verification method yields
    a verify-only keypair. The fingerprint is the multibase (multicodec
    ``0xed01``) encoding of the public key.

    Typical workflow::

        keypair = Ed25519Keypair(controller="did:example:123")
        keypair.initialize()
        document = keypair.export(flag="private", encoding="jwk")
        restored = Ed25519Keypair.import_document(document)
    """

    def __init__(
        self,
        id: str | None = None,
        controller: str | None = None,
        revoked: datetime | None = None,
    ) -> None:
        self.id = id
        self.controller = controller
        self.revoked = revoked
        self.public_key: Ed25519PublicKey | None = None
        self.private_key: Ed25519PrivateKey | None = None

    def __repr__(self) -> str:
        return (
            f"Ed25519Keypair(id={self.id!r}, controller={self.controller!r}, "
            f"public={self.public_key is not None}, private={self.private_key is not None})"
        )

    # -- Lifecycle ----------------------------------------------------------

    def initialize(self, seed: bytes | None = None) -> None:
        """Generate key material, replacing any material already held.

        If a controller is set and no identifier is, the identifier becomes
        ``<controller>#<fingerprint>``. An existing identifier is kept even
        when the key material is replaced.
        """
        raw = generate_raw_keypair(seed)
        self.private_key = material_to_key(raw.private_key, KeyFlag.PRIVATE)
        self.public_key = material_to_key(raw.public_key, KeyFlag.PUBLIC)

        if self.controller and not self.id:
            self.id = f"{self.controller}#{self.fingerprint()}"
        logger.debug("keypair_initialized", keypair_id=self.id, seeded=seed is not None)

    # -- Fingerprint --------------------------------------------------------

    def fingerprint(self) -> str:
        """Return the multibase-encoded public key.

        Raises
        ------
        LogicError
            If the keypair has no public key.
        """
        if self.public_key is None:
            raise LogicError(
                "Public key has not been generated", source="Ed25519Keypair.fingerprint"
            )
        return self._public_key_multibase()

    def verify_fingerprint(self, fingerprint: str) -> bool:
        """Check whether ``fingerprint`` belongs to this keypair's public key."""
        return fingerprint == self.fingerprint()

    # -- Export -------------------------------------------------------------

    def export(
        self,
        *,
        flag: KeyFlag | str = KeyFlag.PUBLIC,
        encoding: KeyEncoding | str = KeyEncoding.MULTIBASE,
    ) -> dict[str, Any]:
        """Export a verification method document.

        With ``flag`` private, the public key is included next to the secret
        key.

        Raises
        ------
        LogicError
            If the requested half is missing, ``id``/``controller`` are unset,
            or the encoding is unsupported.
        """
        try:
            flag = KeyFlag(flag)
            encoding = KeyEncoding(encoding)
        except ValueError as exc:
            raise LogicError(f"Unsupported export option: {exc}", source="Ed25519Keypair.export") from exc

        if (flag is KeyFlag.PRIVATE and self.private_key is None) or self.public_key is None:
            raise LogicError(
                "This keypair has not been initialized", source="Ed25519Keypair.export"
            )
        if not self.id or not self.controller:
            raise LogicError("Required fields are missing", source="Ed25519Keypair.export")

        if encoding is KeyEncoding.JWK:
            document = self._to_jwk(flag)
        else:
            document = self._to_multibase(flag)
        return document.to_document()

    def _public_key_multibase(self) -> str:
        assert self.public_key is not None
        material = key_to_material(self.public_key, KeyFlag.PUBLIC)
        return multibase_encode(material, MULTICODEC_PUBLIC_PREFIX)

    def _private_key_multibase(self) -> str:
        assert self.private_key is not None
        material = key_to_material(self.private_key, KeyFlag.PRIVATE)
        return multibase_encode(material, MULTICODEC_PRIVATE_PREFIX)

    def _revoked_timestamp(self) -> str | None:
        if self.revoked is None:
            return None
        revoked = self.revoked if self.revoked.tzinfo else self.revoked.replace(tzinfo=UTC)
        return revoked.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")

    def _to_multibase(self, flag: KeyFlag) -> VerificationMethodDocument:
        return VerificationMethodDocument(
            id=self.id,
            type=TYPE_MULTIKEY,
            controller=self.controller,
            revoked=self._revoked_timestamp(),
            public_key_multibase=self._public_key_multibase(),
            secret_key_multibase=(
                self._private_key_multibase() if flag is KeyFlag.PRIVATE else None
            ),
        )

    def _to_jwk(self, flag: KeyFlag) -> VerificationMethodDocument:
        assert self.public_key is not None
        secret_key_jwk = None
        if flag is KeyFlag.PRIVATE:
            assert self.private_key is not None
            secret_key_jwk = jwk_from_key(self.private_key, KeyFlag.PRIVATE)
        return VerificationMethodDocument(
            id=self.id,
            type=TYPE_JSON_WEB_KEY,
            controller=self.controller,
            revoked=self._revoked_timestamp(),
            public_key_jwk=jwk_from_key(self.public_key, KeyFlag.PUBLIC),
            secret_key_jwk=secret_key_jwk,
        )

    # -- Import -------------------------------------------------------------

    @classmethod
    def import_document(
        cls,
        document: Mapping[str, Any],
        *,
        check_context: bool | None = None,
        check_revoked: bool | None = None,
    ) -> Ed25519Keypair:
        """Reconstruct a keypair from a verification method document.

        ``check_context`` and ``check_revoked`` default to the
        ``import_check_context`` and ``import_check_revoked`` settings.

        Raises
        ------
        FormatError
            Unsupported context or type, a malformed key, or missing key material.
        KeypairRevokedError
            If ``check_revoked`` is set and the revocation date has passed.
        """
        settings = get_settings()
        if check_context is None:
            check_context = settings.import_check_context
        if check_revoked is None:
            check_revoked = settings.import_check_revoked

        try:
            method = VerificationMethodDocument.model_validate(dict(document))
        except (ValidationError, TypeError, ValueError) as exc:
            raise FormatError(
                f"Malformed verification method: {exc}", source="Ed25519Keypair.import"
            ) from exc

        if check_context and not any(
            isinstance(ctx, str) and ctx in settings.accepted_contexts for ctx in method.contexts
        ):
            raise FormatError("The context is not supported", source="Ed25519Keypair.import")

        if method.type not in MULTIBASE_TYPES and method.type not in JWK_TYPES:
            raise FormatError(
                f"The keypair type {method.type!r} is not supported",
                source="Ed25519Keypair.import",
            )

        revoked = _parse_revoked(method.revoked)
        if revoked is not None and check_revoked and revoked < datetime.now(UTC):
            raise KeypairRevokedError(
                "The keypair has been revoked", source="Ed25519Keypair.import"
            )

        keypair = cls(method.id, method.controller, revoked)
        if method.type in MULTIBASE_TYPES:
            keypair._load_multibase(method)
        else:
            keypair._load_jwk(method)
        logger.debug(
            "keypair_imported",
            keypair_id=keypair.id,
            method_type=method.type,
            has_private_key=keypair.private_key is not None,
        )
        return keypair

    def _load_multibase(self, method: VerificationMethodDocument) -> None:
        if not method.secret_key_multibase and not method.public_key_multibase:
            raise FormatError(
                "The key material is missing from the multibase document",
                source="Ed25519Keypair.import",
            )
        if method.secret_key_multibase:
            material = multibase_decode(method.secret_key_multibase, MULTICODEC_PRIVATE_PREFIX)
            self.private_key = material_to_key(material, KeyFlag.PRIVATE)
        if method.public_key_multibase:
            material = multibase_decode(method.public_key_multibase, MULTICODEC_PUBLIC_PREFIX)
            self.public_key = material_to_key(material, KeyFlag.PUBLIC)
        self._reconcile_halves()

    def _load_jwk(self, method: VerificationMethodDocument) -> None:
        if not method.secret_key_jwk and not method.public_key_jwk:
            raise FormatError(
                "The key material is missing from the JWK document",
                source="Ed25519Keypair.import",
            )
        if method.secret_key_jwk:
            self.private_key = key_from_jwk(method.secret_key_jwk, KeyFlag.PRIVATE)
        if method.public_key_jwk:
            self.public_key = key_from_jwk(method.public_key_jwk, KeyFlag.PUBLIC)
        self._reconcile_halves()

    def _reconcile_halves(self) -> None:
        """Derive a missing public half and reject mismatched halves."""
        if self.private_key is None:
            return
        derived = key_to_material(self.private_key, KeyFlag.PUBLIC)
        if self.public_key is None:
            self.public_key = self.private_key.public_key()
        elif key_to_material(self.public_key, KeyFlag.PUBLIC) != derived:
            raise FormatError(
                "The public key does not match the private key",
                source="Ed25519Keypair.import",
            )


def _parse_revoked(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        revoked = datetime.fromisoformat(value)
    except ValueError as exc:
        raise FormatError(f"Invalid revocation timestamp: {value!r}", source="Ed25519Keypair.import") from exc
    if revoked.tzinfo is None:
        revoked = revoked.replace(tzinfo=UTC)
    return revoked

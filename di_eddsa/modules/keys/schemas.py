"""Pydantic schemas for verification method (key) documents."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Verification method documents (W3C Controlled Identifiers v1.0)
# ---------------------------------------------------------------------------


class VerificationMethodDocument(BaseModel):
    """A verification method carrying Ed25519 key material.

    Exactly one encoding family is expected to be populated: the multibase
    pair (``publicKeyMultibase`` / ``secretKeyMultibase``) or the JWK pair
    (``publicKeyJwk`` / ``secretKeyJwk``).
    """

    context: str | dict[str, Any] | list[Any] | None = Field(default=None, alias="@context")
    id: str | None = None
    type: str
    controller: str | None = None
    revoked: str | None = None
    public_key_multibase: str | None = Field(default=None, alias="publicKeyMultibase")
    secret_key_multibase: str | None = Field(default=None, alias="secretKeyMultibase")
    public_key_jwk: dict[str, Any] | None = Field(default=None, alias="publicKeyJwk")
    secret_key_jwk: dict[str, Any] | None = Field(default=None, alias="secretKeyJwk")

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @property
    def contexts(self) -> list[Any]:
        if self.context is None:
            return []
        if isinstance(self.context, list):
            return list(self.context)
        return [self.context]

    def to_document(self) -> dict[str, Any]:
        """Serialize to the JSON shape used on the wire."""
        return self.model_dump(by_alias=True, exclude_none=True)

"""
Verification result type.

Verification failures are an expected outcome for forged or corrupted
input, so verification entry points report them through this structure
rather than raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from di_eddsa.core.errors import DataIntegrityError


@dataclass
class VerificationResult:
    """Result of verifying a signature or a secured document.

    Attributes
    ----------
    verified:
        ``True`` only when the signature checked out.
    errors:
        Errors that caused ``verified`` to be ``False``.
    verified_document:
        The unsecured document, set only on a successful proof verification.
    """

    verified: bool = False
    errors: list[DataIntegrityError] = field(default_factory=list)
    verified_document: dict[str, Any] | None = None

    @classmethod
    def failure(cls, error: DataIntegrityError) -> VerificationResult:
        return cls(verified=False, errors=[error])

    @property
    def error_codes(self) -> list[str]:
        return [error.code for error in self.errors]

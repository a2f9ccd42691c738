"""
Library configuration using Pydantic Settings.
All configuration is loaded from environment variables with sensible defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings loaded from ``DI_EDDSA_*`` environment variables.

    Only behaviour that callers commonly toggle per deployment lives here;
    per-call arguments always take precedence over these defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="DI_EDDSA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Logging
    # ==========================================================================
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ==========================================================================
    # Keypair import
    # ==========================================================================
    import_check_context: bool = Field(
        default=False,
        description="Require an accepted @context on imported key documents",
    )
    import_check_revoked: bool = Field(
        default=True,
        description="Reject key documents whose revocation date is in the past",
    )
    accepted_contexts: list[str] = Field(
        default=[
            "https://www.w3.org/ns/cid/v1",
            "https://w3id.org/security/multikey/v1",
            "https://w3id.org/security/suites/ed25519-2020/v1",
            "https://w3id.org/security/jws/v1",
            "https://w3id.org/security/jwk/v1",
        ],
        description="Context URLs accepted by the key document context gate",
    )

    # ==========================================================================
    # Proof pipeline
    # ==========================================================================
    verification_method_check_revoked: bool = Field(
        default=True,
        description="Apply the revocation check to resolved verification methods",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

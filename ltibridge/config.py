"""Centralized configuration for ltibridge.

Uses Pydantic BaseSettings with environment variable loading and validation.
All LTI_* environment variables are validated at import time.  The role map
strings here are tenant properties; they are handed to the resolvers as
plain arguments, never looked up from inside them.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = {"env_prefix": "LTI_", "case_sensitive": False, "extra": "ignore"}

    # Role maps
    outbound_role_map: str = Field(
        default="", description="Tenant outbound map, e.g. 'maintain:Instructor;access:Learner'"
    )
    inbound_role_map: str = Field(
        default="", description="Tenant inbound map, e.g. '<urn>:Instructor,maintain'"
    )
    legacy_role_map: str = Field(
        default="", description="Tenant legacy map, e.g. 'urn:lti:instrole:x=<urn>'"
    )

    # Crypto
    encryption_key: str | None = Field(
        default=None, description="Key used to encrypt stored tool secrets"
    )

    # Logging
    log_format: str = Field(default="text", description="Log format: text or json")
    log_level: str = Field(default="INFO", description="Python log level")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("text", "json"):
            msg = f"LTI_LOG_FORMAT must be 'text' or 'json', got '{v}'"
            raise ValueError(msg)
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        import logging

        v = v.upper()
        if not isinstance(getattr(logging, v, None), int):
            msg = f"LTI_LOG_LEVEL must be a valid Python log level, got '{v}'"
            raise ValueError(msg)
        return v

    @field_validator("encryption_key")
    @classmethod
    def validate_encryption_key(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            msg = "LTI_ENCRYPTION_KEY must not be blank when set"
            raise ValueError(msg)
        return v


def get_settings() -> Settings:
    """Build a fresh Settings from the current environment."""
    return Settings()


# Singleton, validated at import time.
settings = Settings()

"""Custom exception hierarchy for ltibridge.

Mapping misses are not errors (resolvers return ``None``); these types are
for configuration and programming faults only.
"""

from __future__ import annotations


class LtiBridgeError(Exception):
    """Base exception for all ltibridge errors."""

    status_code: int = 500
    error_type: str = "internal_error"

    def __init__(self, message: str = "An internal error occurred") -> None:
        self.message = message
        super().__init__(message)


class ValidationError(LtiBridgeError):
    """Input outside the accepted range."""

    status_code = 400
    error_type = "validation_error"


class CryptoError(LtiBridgeError):
    """Cryptographic operation could not be attempted (bad key or input)."""

    status_code = 400
    error_type = "crypto_error"

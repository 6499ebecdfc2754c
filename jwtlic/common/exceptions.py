"""
Custom exceptions for the license token system.
"""

from __future__ import annotations


class LicenseTokenError(Exception):
    """Base exception for license token failures."""


class KeyFormatError(LicenseTokenError, ValueError):
    """Exception for key material that is not a recognized PEM block."""


class SigningError(LicenseTokenError):
    """Exception for payload/key/algorithm combinations the signer rejects."""


class VerificationError(LicenseTokenError):
    """Exception for tokens that fail signature or structure checks."""

    MISSING = "missing"
    MALFORMED = "malformed"
    SIGNATURE = "signature"
    ALGORITHM = "algorithm"
    EXPIRED = "expired"
    CLAIMS = "claims"
    KEY = "key"

    def __init__(self, message: str, reason: str = MALFORMED) -> None:
        super().__init__(message)
        self.reason = reason

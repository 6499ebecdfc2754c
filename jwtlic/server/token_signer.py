"""
License token signer.
"""

from __future__ import annotations

import time
from datetime import datetime
from typing import Any, Mapping

import jwt

from jwtlic.common import Configurable
from jwtlic.common.config import Config
from jwtlic.common.crypto import normalize_key
from jwtlic.common.exceptions import SigningError
from jwtlic.common.interfaces import Expiry, Payload
from jwtlic.common.models import Algorithm, LicenseClaims
from jwtlic.common.timeutils import (
    from_epoch_seconds,
    parse_duration,
    to_epoch_seconds,
)


class TokenSigner(Configurable):
    """Signs license claims into compact JWTs."""

    def __init__(self, config: Config | None = None, **overrides: Any):
        # Without an explicit config the signer uses built-in defaults and
        # never consults the environment.
        self.config = config
        self.default_algorithm: Algorithm | str = Algorithm.RS256
        self.apply_overrides(overrides, config, ["default_algorithm"])
        self.default_algorithm = Algorithm.resolve(self.default_algorithm)

    def sign(
        self,
        payload: Payload,
        key: str,
        expiry: Expiry = None,
        algorithm: Algorithm | str | None = None,
    ) -> str:
        """Sign ``payload`` with ``key``.

        Args:
            payload: Claims mapping or LicenseClaims record
            key: RSA private key PEM (any line-break encoding) or HS256 secret
            expiry: None for a perpetual token, an absolute datetime, or a
                relative duration (timedelta, seconds, or e.g. "1 month")
            algorithm: RS256 or HS256 (default: the signer's default_algorithm)

        Raises:
            KeyFormatError: If an RS256 key is not a recognized PEM block
            SigningError: If the claims, expiry or key are rejected
        """
        try:
            alg = Algorithm.resolve(algorithm or self.default_algorithm)
        except ValueError as err:
            raise SigningError(str(err)) from err

        claims = self.build_claims(payload, expiry)
        signing_key = normalize_key(key) if alg.is_asymmetric else key

        try:
            return jwt.encode(claims, signing_key, algorithm=alg.value)
        except Exception as err:
            msg = f"Failed to sign token with {alg.value}: {err}"
            raise SigningError(msg) from err

    def build_claims(self, payload: Payload, expiry: Expiry = None) -> dict[str, Any]:
        """Copy ``payload`` and add the iat and exp claims."""
        if isinstance(payload, LicenseClaims):
            claims = payload.to_payload()
        elif isinstance(payload, Mapping):
            claims = dict(payload)
        else:
            msg = f"Payload must be a mapping, got {type(payload).__name__}"
            raise SigningError(msg)

        now = int(time.time())
        if claims.get("iat") is None:
            claims["iat"] = now

        if expiry is None:
            return claims
        if "exp" in claims:
            msg = 'Payload already has an "exp" claim; drop it or pass expiry=None'
            raise SigningError(msg)

        if isinstance(expiry, datetime):
            # Truncated to the second; a past moment yields an expired token.
            claims["exp"] = to_epoch_seconds(expiry)
            return claims

        try:
            expires_in = parse_duration(expiry)
        except ValueError as err:
            msg = f"Invalid expiry: {err}"
            raise SigningError(msg) from err
        if not isinstance(claims["iat"], (int, float)) or isinstance(
            claims["iat"], bool
        ):
            msg = f'"iat" claim must be a number, got {claims["iat"]!r}'
            raise SigningError(msg)
        claims["exp"] = int(claims["iat"]) + expires_in
        try:
            from_epoch_seconds(claims["exp"])
        except (ValueError, OverflowError, OSError) as err:
            msg = f"Expiry {expiry!r} is out of the representable date range"
            raise SigningError(msg) from err
        return claims

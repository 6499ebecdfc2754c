"""
License token verification and parsing.
"""

from __future__ import annotations

import contextlib
from datetime import datetime
from typing import TYPE_CHECKING, Any

import jwt

from jwtlic.common import Configurable
from jwtlic.common.config import Config
from jwtlic.common.crypto import normalize_key
from jwtlic.common.exceptions import VerificationError
from jwtlic.common.models import (
    DEFAULT_EXPIRY_TOLERANCE_MS,
    Algorithm,
    ParsedToken,
)
from jwtlic.common.timeutils import from_epoch_seconds

if TYPE_CHECKING:
    from jwtlic.common.interfaces import ErrorObserver


class TokenVerifier(Configurable):
    """Checks token signatures and decodes their claims.

    ``parse`` tolerates expired tokens so callers can still read the claims
    (e.g. to show when a license lapsed); ``is_valid`` is the strict yes/no
    check. Failures swallowed by ``is_valid`` go to the optional ``on_error``
    observer, except for empty tokens.
    """

    def __init__(
        self,
        config: Config | None = None,
        on_error: ErrorObserver | None = None,
        **overrides: Any,
    ):
        # Without an explicit config the verifier uses built-in defaults and
        # never consults the environment.
        self.config = config
        self.on_error = on_error
        self.default_algorithm: Algorithm | str = Algorithm.RS256
        self.expiry_tolerance_ms: int = DEFAULT_EXPIRY_TOLERANCE_MS
        self.apply_overrides(
            overrides, config, ["default_algorithm", "expiry_tolerance_ms"]
        )
        self.default_algorithm = Algorithm.resolve(self.default_algorithm)

    def parse(
        self, token: str, key: str, algorithm: Algorithm | str | None = None
    ) -> ParsedToken:
        """Verify the signature of ``token`` and decode it, ignoring expiry.

        Raises:
            KeyFormatError: If an RS256 key is not a recognized PEM block
            VerificationError: If the token is missing, malformed, signed with
                another key, or declares an unaccepted algorithm
        """
        claims = self._decode(token, key, algorithm, strict=False)
        return ParsedToken(
            claims=claims,
            issued_at=self._claim_time(claims, "iat"),
            expires_at=self._claim_time(claims, "exp"),
            token=token,
        )

    def is_valid(
        self, token: str, key: str, algorithm: Algorithm | str | None = None
    ) -> bool:
        """Return True only for a correctly signed, unexpired token. Never raises."""
        try:
            claims = self._decode(token, key, algorithm, strict=True)
            self._claim_time(claims, "iat")
            self._claim_time(claims, "exp")
        except VerificationError as err:
            if err.reason != VerificationError.MISSING:
                self._notify(err)
            return False
        except Exception as err:  # noqa: BLE001
            self._notify(err)
            return False
        return True

    def expiry_matches(self, parsed: ParsedToken, expected: datetime) -> bool:
        """Check ``parsed.expires_at`` against an independently computed expiry."""
        return parsed.expiry_matches(expected, tolerance_ms=self.expiry_tolerance_ms)

    def _decode(
        self,
        token: str,
        key: str,
        algorithm: Algorithm | str | None,
        *,
        strict: bool,
    ) -> dict[str, Any]:
        try:
            alg = Algorithm.resolve(algorithm or self.default_algorithm)
        except ValueError as err:
            raise VerificationError(str(err), VerificationError.ALGORITHM) from err

        if token is None or token == "":
            msg = "Token must be provided"
            raise VerificationError(msg, VerificationError.MISSING)
        if not isinstance(token, str):
            msg = f"Token must be a string, got {type(token).__name__}"
            raise VerificationError(msg, VerificationError.MALFORMED)

        verify_key = normalize_key(key) if alg.is_asymmetric else key
        # Parsing checks the signature only; time claims are enforced by the
        # strict path.
        options = {"verify_aud": False}
        if not strict:
            options.update(verify_exp=False, verify_iat=False, verify_nbf=False)
        try:
            return jwt.decode(
                token,
                verify_key,
                algorithms=[alg.value],
                options=options,
            )
        except jwt.InvalidSignatureError as err:
            raise VerificationError(str(err), VerificationError.SIGNATURE) from err
        except jwt.InvalidAlgorithmError as err:
            raise VerificationError(str(err), VerificationError.ALGORITHM) from err
        except jwt.ExpiredSignatureError as err:
            raise VerificationError(str(err), VerificationError.EXPIRED) from err
        except jwt.DecodeError as err:
            raise VerificationError(str(err), VerificationError.MALFORMED) from err
        except jwt.InvalidKeyError as err:
            raise VerificationError(str(err), VerificationError.KEY) from err
        except jwt.InvalidTokenError as err:
            raise VerificationError(str(err), VerificationError.CLAIMS) from err

    @staticmethod
    def _claim_time(claims: dict[str, Any], name: str) -> datetime | None:
        value = claims.get(name)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            msg = f'"{name}" claim must be a number, got {value!r}'
            raise VerificationError(msg, VerificationError.CLAIMS)
        try:
            return from_epoch_seconds(value)
        except (ValueError, OverflowError, OSError) as err:
            msg = f'"{name}" claim {value!r} is out of the representable date range'
            raise VerificationError(msg, VerificationError.CLAIMS) from err

    def _notify(self, error: Exception) -> None:
        if self.on_error is None:
            return
        # is_valid must not raise; a failing observer is ignored.
        with contextlib.suppress(Exception):
            self.on_error(error)

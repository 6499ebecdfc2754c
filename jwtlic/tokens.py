"""
Function-style shortcuts over default signer/verifier instances.
"""

from __future__ import annotations

from datetime import datetime

from jwtlic.client.token_verifier import TokenVerifier
from jwtlic.common.crypto import normalize_key
from jwtlic.common.interfaces import Expiry, Payload
from jwtlic.common.models import Algorithm, ParsedToken
from jwtlic.server.token_signer import TokenSigner

__all__ = [
    "is_token_exp_date_matching",
    "is_token_valid",
    "normalize_key",
    "parse_token",
    "sign_token",
]


def sign_token(
    payload: Payload,
    key: str,
    expiry: Expiry = None,
    algorithm: Algorithm | str = Algorithm.RS256,
) -> str:
    return TokenSigner().sign(payload, key, expiry, algorithm)


def parse_token(
    token: str, key: str, algorithm: Algorithm | str = Algorithm.RS256
) -> ParsedToken:
    return TokenVerifier().parse(token, key, algorithm)


def is_token_valid(
    token: str, key: str, algorithm: Algorithm | str = Algorithm.RS256
) -> bool:
    return TokenVerifier().is_valid(token, key, algorithm)


def is_token_exp_date_matching(parsed: ParsedToken, expected: datetime) -> bool:
    return TokenVerifier().expiry_matches(parsed, expected)

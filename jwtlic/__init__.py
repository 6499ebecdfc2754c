# jwtlic: signed license tokens

from jwtlic.client.token_verifier import TokenVerifier
from jwtlic.common.crypto import normalize_key
from jwtlic.common.exceptions import (
    KeyFormatError,
    LicenseTokenError,
    SigningError,
    VerificationError,
)
from jwtlic.common.models import Algorithm, LicenseClaims, ParsedToken
from jwtlic.server.token_signer import TokenSigner
from jwtlic.tokens import (
    is_token_exp_date_matching,
    is_token_valid,
    parse_token,
    sign_token,
)

__all__ = [
    "Algorithm",
    "KeyFormatError",
    "LicenseClaims",
    "LicenseTokenError",
    "ParsedToken",
    "SigningError",
    "TokenSigner",
    "TokenVerifier",
    "VerificationError",
    "is_token_exp_date_matching",
    "is_token_valid",
    "normalize_key",
    "parse_token",
    "sign_token",
]

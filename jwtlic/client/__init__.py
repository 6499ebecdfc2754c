# Token consuming side: verification and parsing
from jwtlic.client.token_verifier import TokenVerifier

__all__ = ["TokenVerifier"]

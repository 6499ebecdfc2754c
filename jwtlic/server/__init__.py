# Token issuing side: signing and key generation
from jwtlic.server.keygen import KeyGenerator
from jwtlic.server.token_signer import TokenSigner

__all__ = ["KeyGenerator", "TokenSigner"]

import pytest

from jwtlic.server.keygen import KeyGenerator

HS256_SECRET = "a-shared-secret-long-enough-for-hmac-sha256-signing-0123456789"


@pytest.fixture(scope="session")
def rsa_keys() -> tuple[str, str]:
    """RSA key pair shared by the whole test session."""
    return KeyGenerator().generate_key_pair()


@pytest.fixture(scope="session")
def private_key(rsa_keys: tuple[str, str]) -> str:
    return rsa_keys[0]


@pytest.fixture(scope="session")
def public_key(rsa_keys: tuple[str, str]) -> str:
    return rsa_keys[1]


@pytest.fixture(scope="session")
def other_public_key() -> str:
    """Public key of an unrelated pair, for signature mismatch checks."""
    return KeyGenerator().generate_key_pair()[1]


@pytest.fixture
def hs256_secret() -> str:
    return HS256_SECRET

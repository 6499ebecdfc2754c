"""
RSA key pair generator for license signing.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from jwtlic.common.config import Config

logger = logging.getLogger(__name__)


class KeyGenerator:
    """Key generator for creating RS256 signing keys."""

    def __init__(self, keys_dir: Path | None = None, config: Config | None = None):
        self.config = config or Config()
        self.keys_dir = keys_dir or self.config.KEYS_DIR

    def generate_key_pair(self) -> tuple[str, str]:
        """Return a fresh (private, public) PEM pair.

        The private key uses the ``RSA PRIVATE KEY`` (PKCS#1) layout and the
        public key the ``PUBLIC KEY`` (SubjectPublicKeyInfo) layout.
        """
        private_key = rsa.generate_private_key(
            public_exponent=self.config.RSA_PUBLIC_EXPONENT,
            key_size=self.config.RSA_KEY_SIZE,
        )

        private_pem = private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption(),
        )
        public_pem = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        return private_pem.decode().strip(), public_pem.decode().strip()

    def generate_keys(self) -> tuple[Path, Path]:
        """Generate and save license private/public keys."""
        logger.info("Generating RSA-%d license keys...", self.config.RSA_KEY_SIZE)

        private_pem, public_pem = self.generate_key_pair()

        # Ensure directory exists
        private_path = self.keys_dir / self.config.PRIVATE_KEY_PATH.name
        public_path = self.keys_dir / self.config.PUBLIC_KEY_PATH.name
        self.keys_dir.mkdir(parents=True, exist_ok=True)

        # Save keys
        with private_path.open("w") as f:
            f.write(private_pem + "\n")
        private_path.chmod(0o600)

        with public_path.open("w") as f:
            f.write(public_pem + "\n")

        logger.info("Keys generated and saved:")
        logger.info("  Private: %s", private_path)
        logger.info("  Public: %s", public_path)
        logger.info("Keep the private key secure!")
        return private_path, public_path

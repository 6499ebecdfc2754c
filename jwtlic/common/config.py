"""
Configuration settings for the license token system.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path


class Config:
    """Central configuration class for all system settings."""

    def __init__(self) -> None:
        # Token settings
        self.DEFAULT_ALGORITHM: str = os.getenv("JWTLIC_ALGORITHM", "RS256").upper()
        self.EXPIRY_TOLERANCE_MS: int = 2000  # Absorbs 1s granularity of exp

        # Key generation settings
        self.RSA_KEY_SIZE: int = 2048
        self.RSA_PUBLIC_EXPONENT: int = 65537

        # File paths
        self.BASE_DIR: Path = Path(__file__).parent.parent
        self.KEYS_DIR: Path = Path(
            os.getenv("JWTLIC_KEYS_DIR", str(self.BASE_DIR / "keys"))
        )
        self.PRIVATE_KEY_PATH: Path = self.KEYS_DIR / "license_private.key"
        self.PUBLIC_KEY_PATH: Path = self.KEYS_DIR / "license_public.key"

        # Logging
        level_name = os.getenv("JWTLIC_LOG_LEVEL", "INFO").upper()
        self.LOG_LEVEL: int = getattr(logging, level_name, logging.INFO)

    def get_private_key(self) -> str:
        """Load the signing key from JWTLIC_PRIVATE_KEY or the keys directory."""
        return self._load_key("JWTLIC_PRIVATE_KEY", self.PRIVATE_KEY_PATH)

    def get_public_key(self) -> str:
        """Load the verification key from JWTLIC_PUBLIC_KEY or the keys directory."""
        return self._load_key("JWTLIC_PUBLIC_KEY", self.PUBLIC_KEY_PATH)

    @staticmethod
    def _load_key(env_var: str, path: Path) -> str:
        # Env values often arrive space-joined or with escaped newlines;
        # callers normalize before use.
        value = os.getenv(env_var)
        if value:
            return value
        try:
            with path.open() as f:
                return f.read()
        except FileNotFoundError as err:
            msg = (
                f"Key not found in ${env_var} or at {path}. "
                "Run 'jwtlic keygen' to generate one."
            )
            raise ValueError(msg) from err

"""Common cryptographic utilities.
"""

from __future__ import annotations

import re

from jwtlic.common.exceptions import KeyFormatError

PUBLIC_KEY_TYPE = "PUBLIC KEY"
RSA_PRIVATE_KEY_TYPE = "RSA PRIVATE KEY"

_SEPARATOR_RE = re.compile(r"(?:\s|\\n)+")


class KeyNormalizer:
    """Canonicalize PEM keys pasted with mangled line breaks.

    Keys that travel through environment variables or config files tend to lose
    their newlines: they come back space-joined, with literal ``\\n`` escapes,
    or with blank lines in between. PyJWT needs the exact PEM layout, so every
    variant is rebuilt into ``BEGIN`` line, base64 body lines, ``END`` line.
    """

    KEY_TYPES = (PUBLIC_KEY_TYPE, RSA_PRIVATE_KEY_TYPE)

    @staticmethod
    def begin_marker(key_type: str) -> str:
        return f"-----BEGIN {key_type}-----"

    @staticmethod
    def end_marker(key_type: str) -> str:
        return f"-----END {key_type}-----"

    @classmethod
    def detect_key_type(cls, raw_key: str) -> str:
        """Return the PEM type named by the key's leading marker."""
        if not isinstance(raw_key, str):
            msg = f"Key must be a PEM string, got {type(raw_key).__name__}"
            raise KeyFormatError(msg)
        stripped = raw_key.strip()
        for key_type in cls.KEY_TYPES:
            if stripped.startswith(cls.begin_marker(key_type)):
                return key_type
        expected = " or ".join(cls.begin_marker(t) for t in cls.KEY_TYPES)
        msg = f"Unsupported key format: expected key to start with {expected}"
        raise KeyFormatError(msg)

    @classmethod
    def normalize(cls, raw_key: str) -> str:
        """Rebuild ``raw_key`` as a canonical PEM block."""
        key_type = cls.detect_key_type(raw_key)
        begin = cls.begin_marker(key_type)
        end = cls.end_marker(key_type)

        body = raw_key.strip()[len(begin) :]
        end_index = body.rfind(end)
        if end_index != -1:
            body = body[:end_index]

        # One newline per separator run, so blank lines collapse as well.
        body = _SEPARATOR_RE.sub("\n", body).strip()
        return f"{begin}\n{body}\n{end}"


def normalize_key(raw_key: str) -> str:
    """Return ``raw_key`` as canonical PEM text, raising KeyFormatError otherwise."""
    return KeyNormalizer.normalize(raw_key)

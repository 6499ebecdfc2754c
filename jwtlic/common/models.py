"""
Pydantic models for license claims and parsed tokens.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from jwtlic.common.timeutils import as_aware

DEFAULT_EXPIRY_TOLERANCE_MS = 2000


class Algorithm(str, Enum):
    RS256 = "RS256"  # Asymmetric, PEM keys
    HS256 = "HS256"  # Symmetric, shared secret

    @property
    def is_asymmetric(self) -> bool:
        return self is Algorithm.RS256

    @classmethod
    def resolve(cls, value: Algorithm | str) -> Algorithm:
        """Map an algorithm name to a member, raising ValueError if unsupported."""
        try:
            return cls(value)
        except ValueError as err:
            supported = ", ".join(member.value for member in cls)
            msg = f"Unsupported algorithm {value!r}; expected one of {supported}"
            raise ValueError(msg) from err


class LicenseClaims(BaseModel):
    """License-specific claims carried in a token.

    Every field is optional and stays ``None`` when absent. Falsy values such
    as ``plan_id=0`` are kept as given. Claims not listed here are preserved
    as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    plan_id: int | None = None
    email: str | None = None
    uid: str | None = None
    plan_name: str | None = None
    image: str | None = None
    limits: dict[str, Any] | None = None
    permissions: list[str] | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ParsedToken(BaseModel):
    """Decoded claims of a signature-checked token."""

    claims: dict[str, Any] = Field(default_factory=dict)
    issued_at: datetime | None = None
    expires_at: datetime | None = None
    token: str = ""

    @property
    def is_valid(self) -> bool:
        """Whether the token is unexpired right now; evaluated on every access."""
        if self.expires_at is None:
            return True
        return datetime.now(tz=timezone.utc) <= as_aware(self.expires_at)

    @property
    def license(self) -> LicenseClaims:
        return LicenseClaims.model_validate(self.claims)

    def __getitem__(self, name: str) -> Any:
        return self.claims[name]

    def __contains__(self, name: object) -> bool:
        return name in self.claims

    def get(self, name: str, default: Any = None) -> Any:
        return self.claims.get(name, default)

    def expiry_matches(
        self,
        expected: datetime,
        tolerance_ms: int = DEFAULT_EXPIRY_TOLERANCE_MS,
    ) -> bool:
        """Check that ``expires_at`` lies within ``tolerance_ms`` of ``expected``.

        Tokens without an expiry never match. The bound is inclusive.
        """
        if self.expires_at is None:
            return False
        drift = abs(as_aware(self.expires_at) - as_aware(expected))
        return drift <= timedelta(milliseconds=tolerance_ms)

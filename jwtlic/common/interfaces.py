"""
Interfaces and shared type aliases.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Mapping, Protocol, Union

from jwtlic.common.models import LicenseClaims

Expiry = Union[datetime, timedelta, int, str, None]
Payload = Union[Mapping[str, Any], LicenseClaims]


class ErrorObserver(Protocol):
    """Receives verification failures that would otherwise be swallowed."""

    def __call__(self, error: Exception) -> None: ...

"""Kernel security – AuthToken."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping


@dataclasses.dataclass(frozen=True)
class AuthToken:
    """Caller identity already authenticated upstream.

    No expiry or signature checks happen here; the fingerprint is trusted.
    """
    fingerprint: str

    def __str__(self) -> str:
        return self.fingerprint

    @classmethod
    def from_value(cls, value: Any) -> "AuthToken | None":
        """Coerce a transport ``_auth`` value into a token.

        Accepts an :class:`AuthToken`, a mapping carrying a ``fingerprint``
        key, or an object with a ``fingerprint`` attribute.  Anything else,
        including a missing or non-string fingerprint, yields ``None``.
        """
        if value is None or isinstance(value, AuthToken):
            return value
        if isinstance(value, Mapping):
            fingerprint = value.get("fingerprint")
        else:
            fingerprint = getattr(value, "fingerprint", None)
        if not isinstance(fingerprint, str):
            return None
        return cls(fingerprint)


__all__ = ["AuthToken"]

"""Application dispatch – Message and StreamMeta."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from actiongate.kernel.security.token import AuthToken


def _args(value: Any) -> tuple[Any, ...]:
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return ()


def _flag(raw: Mapping[str, Any], *keys: str) -> bool:
    return any(bool(raw.get(k)) for k in keys)


def _auth(raw: Mapping[str, Any]) -> AuthToken | None:
    value = raw.get("_auth")
    if value is None:
        value = raw.get("auth")
    return AuthToken.from_value(value)


@dataclasses.dataclass(frozen=True)
class Message:
    """Inbound unary request.

    Transport payloads use ``_isSecure`` / ``_auth``; :meth:`from_mapping`
    also accepts ``secure`` / ``auth``.
    """

    action: str | None
    args: tuple[Any, ...] = ()
    secure: bool = False
    auth: AuthToken | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "Message":
        return cls(
            action=raw.get("action"),
            args=_args(raw.get("args")),
            secure=_flag(raw, "_isSecure", "secure"),
            auth=_auth(raw),
        )

    @classmethod
    def coerce(cls, value: "Message | Mapping[str, Any]") -> "Message":
        if isinstance(value, Message):
            return value
        if not isinstance(value, Mapping):
            return cls(action=None)
        return cls.from_mapping(value)


@dataclasses.dataclass(frozen=True)
class StreamMeta:
    """Metadata of a streaming call.

    ``raw`` is the transport's original mapping; it is what the stream
    handler receives, untouched.
    """

    args: tuple[Any, ...] = ()
    secure: bool = False
    auth: AuthToken | None = None
    raw: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> "StreamMeta":
        if not isinstance(raw, Mapping):
            raw = {}
        return cls(
            args=_args(raw.get("args")),
            secure=_flag(raw, "_isSecure", "secure"),
            auth=_auth(raw),
            raw=raw,
        )


__all__ = ["Message", "StreamMeta"]

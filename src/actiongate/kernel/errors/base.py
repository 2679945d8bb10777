"""Root error class for actiongate."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Error carrying a transport-safe ``code`` alongside its message.

    Subclasses set ``default_code``; ``detail`` holds extra fields for the
    reply payload and ``cause`` the exception being wrapped, if any.
    """

    default_code: str = "ERR"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Reply payload: ``code``, ``message``, ``detail`` and a ``cause`` repr."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)


__all__ = ["BaseError"]

"""Dispatch errors – the uniform failure shapes delivered through a completion.

Every dispatch failure reaches the caller as one of these instances, passed as
the first argument of the completion callable.  The ``code`` doubles as the
message for the fixed-text errors so that transports which only forward the
message string still carry the machine-readable slug.
"""

from __future__ import annotations

from typing import Any

from actiongate.kernel.errors.base import BaseError


class DispatchError(BaseError):
    """Base class for every error delivered by the dispatcher."""

    default_code = "ERR_API"

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or self.default_code, **kwargs)


class NotReadyError(DispatchError):
    """The worker context is not available yet."""

    default_code = "ERR_API_READY"


class ActionNotFoundError(DispatchError):
    """Action is missing, private, not registered or of the wrong kind."""

    default_code = "ERR_API_ACTION_NOTFOUND"

    def __init__(self, action: str | None = None, **kwargs: Any) -> None:
        super().__init__(detail={"action": action}, **kwargs)
        self.action = action


class UnauthorizedError(DispatchError):
    """A secure call was denied by the authorization gate."""

    default_code = "ERR_API_AUTH"


class InvalidCompletionTargetError(DispatchError):
    """The completion supplied by the transport is not callable."""

    default_code = "ERR_API_CB_INVALID"


class ActionFailureError(DispatchError):
    """The invoked handler raised instead of completing."""

    default_code = "ERR_API_ACTION"

    def __init__(self, cause: BaseException, **kwargs: Any) -> None:
        super().__init__(f"{self.default_code}: {cause}", cause=cause, **kwargs)


class ActionError(DispatchError):
    """Domain error reported by a handler through its completion.

    Carries the original error's message; falls back to ``ERR_API_BASE`` when
    the original has none.
    """

    default_code = "ERR_API_BASE"

    @classmethod
    def normalize(cls, error: BaseException) -> "ActionError":
        message = getattr(error, "message", None) or str(error)
        return cls(message or None, cause=error)


__all__ = [
    "ActionError",
    "ActionFailureError",
    "ActionNotFoundError",
    "DispatchError",
    "InvalidCompletionTargetError",
    "NotReadyError",
    "UnauthorizedError",
]

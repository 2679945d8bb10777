"""Kernel – framework-agnostic building blocks: errors and security."""

from actiongate.kernel.errors import (
    ActionError,
    ActionFailureError,
    ActionNotFoundError,
    BaseError,
    DispatchError,
    InvalidCompletionTargetError,
    NotReadyError,
    UnauthorizedError,
)

__all__ = [
    "ActionError",
    "ActionFailureError",
    "ActionNotFoundError",
    "BaseError",
    "DispatchError",
    "InvalidCompletionTargetError",
    "NotReadyError",
    "UnauthorizedError",
]

"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── DispatchError                   (dispatch.py)
        ├── NotReadyError               ERR_API_READY
        ├── ActionNotFoundError         ERR_API_ACTION_NOTFOUND
        ├── UnauthorizedError           ERR_API_AUTH
        ├── InvalidCompletionTargetError ERR_API_CB_INVALID
        ├── ActionFailureError          ERR_API_ACTION
        └── ActionError                 ERR_API_BASE
"""

from actiongate.kernel.errors.base import BaseError
from actiongate.kernel.errors.dispatch import (
    ActionError,
    ActionFailureError,
    ActionNotFoundError,
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

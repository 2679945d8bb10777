"""Application dispatch – CompletionGuard.

Wraps the transport's completion so the caller hears back at most once, no
matter how often the handler calls it.
"""
from __future__ import annotations

import threading
from enum import Enum
from typing import Any, Callable

from actiongate.kernel.errors import ActionError, DispatchError
from actiongate.observability.logging import get_logger

Completion = Callable[..., Any]

logger = get_logger(__name__)


class GuardState(str, Enum):
    UNFIRED = "UNFIRED"
    FIRED = "FIRED"


def normalize_error(error: Any) -> Any:
    """Foreign exceptions become :class:`ActionError`.

    Dispatch errors keep their own code; non-exception values pass through.
    """
    if isinstance(error, DispatchError):
        return error
    if isinstance(error, BaseException):
        return ActionError.normalize(error)
    return error


class CompletionGuard:
    """Single-use completion: ``UNFIRED -> FIRED`` exactly once.

    The first call is forwarded to *complete* with its error normalized.
    Later calls are dropped and logged at critical level; they never raise.
    The state flip happens under a lock, so handlers completing from other
    threads still deliver once.
    """

    def __init__(self, complete: Completion, *, action: str | None = None) -> None:
        self._complete = complete
        self._action = action
        self._state = GuardState.UNFIRED
        self._lock = threading.Lock()
        self.dropped = 0

    @property
    def state(self) -> GuardState:
        return self._state

    @property
    def fired(self) -> bool:
        return self._state is GuardState.FIRED

    def _claim(self) -> bool:
        with self._lock:
            if self._state is GuardState.FIRED:
                self.dropped += 1
                return False
            self._state = GuardState.FIRED
            return True

    def __call__(self, error: Any = None, result: Any = None) -> None:
        if not self._claim():
            logger.critical(
                "callback called twice",
                action=self._action,
                dropped=self.dropped,
                error=repr(error) if error is not None else None,
            )
            return
        self._complete(normalize_error(error), result)


__all__ = ["Completion", "CompletionGuard", "GuardState", "normalize_error"]

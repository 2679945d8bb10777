"""Testing fakes – RecordingCompletion."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class CompletionCall:
    error: Any
    result: Any


class RecordingCompletion:
    """Completion callable that records every ``(error, result)`` it receives."""

    def __init__(self) -> None:
        self.calls: list[CompletionCall] = []

    def __call__(self, error: Any = None, result: Any = None) -> None:
        self.calls.append(CompletionCall(error, result))

    @property
    def count(self) -> int:
        return len(self.calls)

    @property
    def last(self) -> CompletionCall:
        if not self.calls:
            raise AssertionError("completion was never called")
        return self.calls[-1]

    @property
    def error(self) -> Any:
        return self.last.error

    @property
    def result(self) -> Any:
        return self.last.result


__all__ = ["CompletionCall", "RecordingCompletion"]

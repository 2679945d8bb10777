"""Testing fakes – in-memory doubles for the dispatcher's collaborators."""
from actiongate.testing.fakes.completion import CompletionCall, RecordingCompletion
from actiongate.testing.fakes.context import FakeContextProvider
from actiongate.kernel.security.audit import InMemoryAuditLog

__all__ = [
    "CompletionCall",
    "FakeContextProvider",
    "InMemoryAuditLog",
    "RecordingCompletion",
]

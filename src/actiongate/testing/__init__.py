"""Testing support – fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["actiongate.testing.fixtures"]
"""

from actiongate.testing.fakes import (
    CompletionCall,
    FakeContextProvider,
    InMemoryAuditLog,
    RecordingCompletion,
)

__all__ = [
    "CompletionCall",
    "FakeContextProvider",
    "InMemoryAuditLog",
    "RecordingCompletion",
]

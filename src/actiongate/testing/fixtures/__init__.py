"""Testing fixtures – pytest fixtures for the dispatcher.

Enable in ``conftest.py``::

    pytest_plugins = ["actiongate.testing.fixtures"]
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from actiongate.kernel.security import AccessControlStore, AuthorizationGate
from actiongate.testing.fakes import FakeContextProvider, InMemoryAuditLog, RecordingCompletion


@pytest.fixture
def worker_root(tmp_path: Path) -> Path:
    """Worker root with an empty ``sec/`` directory."""
    (tmp_path / "sec").mkdir()
    return tmp_path


@pytest.fixture
def write_acl(worker_root: Path) -> Callable[[Any], Path]:
    """Write a JSON-serialisable ACL document to ``<root>/sec/acl.json``."""

    def _write(document: Any) -> Path:
        path = worker_root / "sec" / "acl.json"
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def context_provider(worker_root: Path) -> FakeContextProvider:
    return FakeContextProvider(worker_root)


@pytest.fixture
def audit_log() -> InMemoryAuditLog:
    return InMemoryAuditLog()


@pytest.fixture
def gate(audit_log: InMemoryAuditLog) -> AuthorizationGate:
    return AuthorizationGate(AccessControlStore(), audit_log=audit_log)


@pytest.fixture
def completion() -> RecordingCompletion:
    return RecordingCompletion()


__all__ = [
    "audit_log",
    "completion",
    "context_provider",
    "gate",
    "worker_root",
    "write_acl",
]

"""Unit tests for the authorization gate."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable
from unittest.mock import MagicMock, patch

from actiongate.config import Context
from actiongate.kernel.security import (
    AccessControlList,
    AccessControlStore,
    AuditLog,
    AuditRecord,
    AuthToken,
    AuthorizationGate,
    FileAuditLog,
    InMemoryAuditLog,
)
from actiongate.observability.logging import DecisionLogger, DecisionOutcome


class _FailingAuditLog(AuditLog):
    def append(self, record: AuditRecord) -> None:
        raise OSError("disk full")

    def records(self) -> list[AuditRecord]:
        return []


class TestAuthorizationGate:
    def test_allows_permitted_fingerprint(
        self, gate: AuthorizationGate, audit_log: InMemoryAuditLog,
        worker_root: Path, write_acl: Callable[[Any], Path],
    ) -> None:
        write_acl({"fp": {"getBalance": True}})
        assert gate.authorize(Context(worker_root), AuthToken("fp"), "getBalance", ()) is True
        assert audit_log.records() == [AuditRecord("fp", "getBalance")]

    def test_denial_is_audited(
        self, gate: AuthorizationGate, audit_log: InMemoryAuditLog,
        worker_root: Path, write_acl: Callable[[Any], Path],
    ) -> None:
        write_acl({"fp": {"getBalance": True}})
        assert gate.authorize(Context(worker_root), AuthToken("fp"), "withdraw", ()) is False
        assert audit_log.records() == [AuditRecord("fp", "withdraw")]

    def test_missing_acl_denies_and_audits(
        self, gate: AuthorizationGate, audit_log: InMemoryAuditLog, worker_root: Path
    ) -> None:
        assert gate.authorize(Context(worker_root), AuthToken("fp"), "x", ()) is False
        assert len(audit_log.records()) == 1

    def test_no_token_denies_without_audit_or_load(self, audit_log: InMemoryAuditLog, worker_root: Path) -> None:
        store = MagicMock(spec=AccessControlStore)
        gate = AuthorizationGate(store, audit_log=audit_log)
        assert gate.authorize(Context(worker_root), None, "x", ()) is False
        store.ensure_loaded.assert_not_called()
        store.is_permitted.assert_not_called()
        assert audit_log.records() == []

    def test_audit_written_before_result_returned(self, worker_root: Path) -> None:
        events: list[str] = []

        class _Log(InMemoryAuditLog):
            def append(self, record: AuditRecord) -> None:
                events.append("audit")
                super().append(record)

        store = AccessControlStore(AccessControlList({"*": True}))
        gate = AuthorizationGate(store, audit_log=_Log())
        result = gate.authorize(Context(worker_root), AuthToken("fp"), "x", ())
        events.append("returned")
        assert result is True
        assert events == ["audit", "returned"]

    def test_audit_failure_does_not_change_decision(self, worker_root: Path) -> None:
        store = AccessControlStore(AccessControlList({"fp": "*"}))
        gate = AuthorizationGate(store, audit_log=_FailingAuditLog())
        assert gate.authorize(Context(worker_root), AuthToken("fp"), "x", ()) is True
        assert gate.authorize(Context(worker_root), AuthToken("other"), "x", ()) is False

    def test_audit_failure_is_logged(self, worker_root: Path) -> None:
        store = AccessControlStore(AccessControlList({"fp": "*"}))
        gate = AuthorizationGate(store, audit_log=_FailingAuditLog())
        with patch("actiongate.kernel.security.gate.logger") as log:
            gate.authorize(Context(worker_root), AuthToken("fp"), "x", ())
        log.error.assert_called_once()
        assert log.error.call_args.args[0] == "audit.write_failed"

    def test_defaults_to_file_audit_log_under_root(
        self, worker_root: Path, write_acl: Callable[[Any], Path]
    ) -> None:
        write_acl({"fp": {"a": True}})
        gate = AuthorizationGate()
        ctx = Context(worker_root)
        gate.authorize(ctx, AuthToken("fp"), "a", ())
        gate.authorize(ctx, AuthToken("fp"), "b", ())
        assert (worker_root / "sec" / "acl.log").read_text(encoding="utf-8") == "fp|a\nfp|b\n"

    def test_file_audit_log_is_reused_per_path(self, worker_root: Path) -> None:
        gate = AuthorizationGate()
        ctx = Context(worker_root)
        first = gate.audit_log_for(ctx)
        assert isinstance(first, FileAuditLog)
        assert gate.audit_log_for(ctx) is first

    def test_unwritable_audit_dir_still_decides(self, tmp_path: Path) -> None:
        gate = AuthorizationGate(AccessControlStore(AccessControlList({"*": True})))
        assert gate.authorize(Context(tmp_path / "no-such-root"), AuthToken("fp"), "x", ()) is True

    def test_decision_is_logged(self, worker_root: Path) -> None:
        decisions = MagicMock(spec=DecisionLogger)
        gate = AuthorizationGate(
            AccessControlStore(AccessControlList({"fp": {"a": True}})),
            audit_log=InMemoryAuditLog(),
            decision_logger=decisions,
        )
        gate.authorize(Context(worker_root), AuthToken("fp"), "b", ())
        decisions.log_decision.assert_called_once_with("fp", "b", DecisionOutcome.DENIED)

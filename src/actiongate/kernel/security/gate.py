"""Kernel security – AuthorizationGate.

Composes the :class:`~actiongate.kernel.security.acl.AccessControlStore` and an
:class:`~actiongate.kernel.security.audit.AuditLog`: every attempt that carries
a token leaves one audit record, written before the decision is returned.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import TYPE_CHECKING, Any, Sequence

from actiongate.kernel.security.acl import AccessControlStore
from actiongate.kernel.security.audit import AuditLog, AuditRecord, FileAuditLog
from actiongate.kernel.security.token import AuthToken
from actiongate.observability.logging import DecisionLogger, DecisionOutcome, get_logger

if TYPE_CHECKING:
    from actiongate.config.context import Context

logger = get_logger(__name__)


class AuthorizationGate:
    """Decide whether a token may invoke an action, auditing the attempt.

    Parameters
    ----------
    store:
        ACL store; a fresh :class:`AccessControlStore` when omitted.
    audit_log:
        Fixed audit log.  When omitted a :class:`FileAuditLog` is opened at
        the context's ``audit_log_path`` and reused for that path.
    decision_logger:
        Structured sink for decisions; defaults to :class:`DecisionLogger`.
    """

    def __init__(
        self,
        store: AccessControlStore | None = None,
        *,
        audit_log: AuditLog | None = None,
        decision_logger: DecisionLogger | None = None,
    ) -> None:
        self.store = store if store is not None else AccessControlStore()
        self._audit_log = audit_log
        self._decisions = decision_logger or DecisionLogger()
        self._file_logs: dict[Path, FileAuditLog] = {}
        self._file_logs_lock = threading.Lock()

    def authorize(
        self,
        context: "Context",
        token: AuthToken | None,
        action: str,
        args: Sequence[Any] = (),  # noqa: ARG002
    ) -> bool:
        """Return ``True`` when *token* may run *action*.

        A missing token is denied without consulting the store and without
        an audit record, since there is no fingerprint to record.
        """
        if token is None:
            logger.info("auth.no_token", action=action)
            return False

        self.store.ensure_loaded(context)
        permitted = self.store.is_permitted(token.fingerprint, action)

        self._audit(context, AuditRecord(token.fingerprint, action))
        self._decisions.log_decision(
            token.fingerprint,
            action,
            DecisionOutcome.ALLOWED if permitted else DecisionOutcome.DENIED,
        )
        return permitted

    def audit_log_for(self, context: "Context") -> AuditLog:
        if self._audit_log is not None:
            return self._audit_log
        path = Path(context.audit_log_path)
        with self._file_logs_lock:
            log = self._file_logs.get(path)
            if log is None:
                log = self._file_logs[path] = FileAuditLog(path)
            return log

    def _audit(self, context: "Context", record: AuditRecord) -> None:
        try:
            self.audit_log_for(context).append(record)
        except Exception as exc:  # noqa: BLE001 – best-effort, never alters the decision
            logger.error(
                "audit.write_failed",
                fingerprint=record.fingerprint,
                action=record.action,
                error=str(exc),
            )


__all__ = ["AuthorizationGate"]

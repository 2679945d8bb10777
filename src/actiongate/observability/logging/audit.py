"""Observability – DecisionLogger.

A dedicated structured-log sink for authorization decisions.  This is the
operator-visible channel; the durable record is the audit log file written by
:class:`~actiongate.kernel.security.audit.FileAuditLog`.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from actiongate.observability.logging.processors import get_logger


class DecisionOutcome(str, Enum):
    """Standardised authorization outcomes."""

    ALLOWED = "allowed"
    DENIED = "denied"


class DecisionLogger:
    """Emit one ``audit.authorization`` event per authorization attempt.

    All entries are emitted at ``WARNING`` level so they pass through even
    restrictive log-level filters.

    Parameters
    ----------
    logger:
        Underlying structlog logger.  Defaults to one named ``audit``.
    """

    def __init__(self, logger: Any = None) -> None:
        self._log = logger if logger is not None else get_logger("audit")

    def log_decision(
        self,
        fingerprint: str,
        action: str,
        outcome: DecisionOutcome | str,
        **extra: Any,
    ) -> None:
        value = outcome.value if isinstance(outcome, DecisionOutcome) else str(outcome)
        self._log.warning(
            "audit.authorization",
            fingerprint=fingerprint,
            action=action,
            outcome=value,
            **extra,
        )


__all__ = ["DecisionLogger", "DecisionOutcome"]

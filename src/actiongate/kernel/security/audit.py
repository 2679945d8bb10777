"""Kernel security – AuditRecord, AuditLog, FileAuditLog, InMemoryAuditLog."""

from __future__ import annotations

import abc
import dataclasses
import threading
from pathlib import Path

SEPARATOR = "|"


# ---------------------------------------------------------------------------
# AuditRecord
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class AuditRecord:
    """One authorization attempt, granted or denied.

    Serialised as ``fingerprint|action`` on its own line.  The outcome is not
    part of the durable record; it goes to the structured decision log.
    """

    fingerprint: str
    action: str

    def to_line(self) -> str:
        return f"{self.fingerprint}{SEPARATOR}{self.action}\n"

    @classmethod
    def from_line(cls, line: str) -> "AuditRecord":
        """Parse a line written by :meth:`to_line`.

        Splits on the last separator, so fingerprints may contain ``|``.
        """
        fingerprint, sep, action = line.rstrip("\n").rpartition(SEPARATOR)
        if not sep:
            raise ValueError(f"not an audit record: {line!r}")
        return cls(fingerprint=fingerprint, action=action)


# ---------------------------------------------------------------------------
# AuditLog port
# ---------------------------------------------------------------------------


class AuditLog(abc.ABC):
    """Port – append-only audit log.

    Use :class:`FileAuditLog` in workers and :class:`InMemoryAuditLog` in
    unit tests.
    """

    @abc.abstractmethod
    def append(self, record: AuditRecord) -> None:
        """Persist *record*.  May raise :class:`OSError`."""

    @abc.abstractmethod
    def records(self) -> list[AuditRecord]:
        """Return every record, oldest first."""


# ---------------------------------------------------------------------------
# FileAuditLog
# ---------------------------------------------------------------------------


class FileAuditLog(AuditLog):
    """Plain-text audit log, one ``fingerprint|action`` line per attempt.

    Appends are serialised with a lock and each record is written with a
    single ``write`` call, so concurrent dispatches never interleave lines.
    The parent directory is expected to exist.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def append(self, record: AuditRecord) -> None:
        line = record.to_line()
        with self._lock:
            with self._path.open("a", encoding="utf-8") as fh:
                fh.write(line)

    def records(self) -> list[AuditRecord]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        return [AuditRecord.from_line(line) for line in text.splitlines() if line]


# ---------------------------------------------------------------------------
# InMemoryAuditLog
# ---------------------------------------------------------------------------


class InMemoryAuditLog(AuditLog):
    """List-backed audit log for unit tests and local development."""

    def __init__(self) -> None:
        self._records: list[AuditRecord] = []

    def append(self, record: AuditRecord) -> None:
        self._records.append(record)

    def records(self) -> list[AuditRecord]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()


__all__ = ["AuditLog", "AuditRecord", "FileAuditLog", "InMemoryAuditLog"]

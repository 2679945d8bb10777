"""Kernel security – access-control list and its lazily loaded store.

The ACL document lives at ``<root>/sec/acl.json``::

    {
        "*": true,                                   # everyone may do anything
        "fp-admin": "*",                             # this fingerprint may do anything
        "fp-ops": {"*": true},                       # same, mapping form
        "fp-reader": {"getBalance": true, "listOrders": 1}
    }

Key additions over a plain dict:

* :class:`AccessControlList` – immutable view with the permission evaluation.
* :class:`AccessControlStore` – single-flight loader with an explicit
  :class:`AclState`, caching the list for the lifetime of the process.
"""

from __future__ import annotations

import json
import threading
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

from actiongate.observability.logging import get_logger

if TYPE_CHECKING:
    from actiongate.config.context import Context

WILDCARD = "*"

logger = get_logger(__name__)


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    return value


# ---------------------------------------------------------------------------
# AccessControlList
# ---------------------------------------------------------------------------


class AccessControlList:
    """Read-only permission table keyed by caller fingerprint.

    Each entry is either the wildcard marker ``"*"`` or a mapping from action
    name to a truthy marker.  A truthy top-level ``"*"`` key grants every
    fingerprint every action.
    """

    def __init__(self, entries: Mapping[str, Any]) -> None:
        self._entries: Mapping[str, Any] = _freeze(entries)

    @classmethod
    def parse(cls, raw: str | bytes) -> "AccessControlList | None":
        """Parse a JSON document; ``None`` when it is not a JSON object.

        Raises :class:`ValueError` on malformed JSON.
        """
        data = json.loads(raw)
        if not isinstance(data, dict):
            return None
        return cls(data)

    @property
    def entries(self) -> Mapping[str, Any]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, fingerprint: object) -> bool:
        return fingerprint in self._entries

    def is_permitted(self, fingerprint: str, action: str) -> bool:
        if self._entries.get(WILDCARD):
            return True

        entry = self._entries.get(fingerprint)
        if not entry:
            return False
        if entry == WILDCARD:
            return True
        if not isinstance(entry, Mapping):
            return False

        if entry.get(WILDCARD):
            return True
        return bool(entry.get(action))


# ---------------------------------------------------------------------------
# AccessControlStore
# ---------------------------------------------------------------------------


class AclState(str, Enum):
    UNLOADED = "UNLOADED"
    LOADING = "LOADING"
    LOADED = "LOADED"


class AccessControlStore:
    """Loads the ACL once per process and answers permission queries.

    Loading is single-flight: concurrent first callers serialize on a lock
    and only the first one reads the document.  A missing, unreadable or
    invalid document leaves the store ``UNLOADED`` with no list, so every
    check denies and the next :meth:`ensure_loaded` tries again.

    Example::

        store = AccessControlStore()
        store.ensure_loaded(context)
        if store.is_permitted(token.fingerprint, "cancelOrder"):
            ...
    """

    def __init__(self, acl: AccessControlList | None = None) -> None:
        self._lock = threading.Lock()
        self._acl = acl
        self._state = AclState.LOADED if acl is not None else AclState.UNLOADED

    @property
    def state(self) -> AclState:
        return self._state

    @property
    def acl(self) -> AccessControlList | None:
        return self._acl

    def ensure_loaded(self, context: "Context") -> None:
        """Load the ACL from *context* unless a list is already cached."""
        if self._state is AclState.LOADED:
            return
        with self._lock:
            if self._state is AclState.LOADED:
                return
            self._state = AclState.LOADING
            acl: AccessControlList | None = None
            try:
                acl = self._load(Path(context.acl_path))
            finally:
                self._acl = acl
                self._state = AclState.LOADED if acl is not None else AclState.UNLOADED

    def invalidate(self) -> None:
        """Drop the cached list; the next :meth:`ensure_loaded` reads again."""
        with self._lock:
            self._acl = None
            self._state = AclState.UNLOADED

    def is_permitted(self, fingerprint: str, action: str) -> bool:
        acl = self._acl
        if acl is None:
            return False
        return acl.is_permitted(fingerprint, action)

    def _load(self, path: Path) -> AccessControlList | None:
        try:
            acl = AccessControlList.parse(self._read_source(path))
        except (OSError, ValueError) as exc:
            logger.error("acl.load_failed", path=str(path), error=str(exc))
            return None
        if acl is None:
            logger.error("acl.load_failed", path=str(path), error="document is not an object")
            return None
        logger.info("acl.loaded", path=str(path), fingerprints=len(acl))
        return acl

    def _read_source(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")


__all__ = ["AccessControlList", "AccessControlStore", "AclState", "WILDCARD"]

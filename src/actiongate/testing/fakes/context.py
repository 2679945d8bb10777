"""Testing fakes – FakeContextProvider."""
from __future__ import annotations

from pathlib import Path

from actiongate.config.context import Context


class FakeContextProvider:
    """Context provider that can be switched between ready and not ready.

    ``calls`` counts :meth:`get_context` invocations, so tests can assert on
    lazy acquisition.
    """

    def __init__(self, root_path: str | Path | None = None) -> None:
        self._context = Context(Path(root_path)) if root_path is not None else None
        self.calls = 0

    @property
    def context(self) -> Context | None:
        return self._context

    def set_root(self, root_path: str | Path) -> None:
        self._context = Context(Path(root_path))

    def make_unready(self) -> None:
        self._context = None

    def get_context(self) -> Context | None:
        self.calls += 1
        return self._context


__all__ = ["FakeContextProvider"]

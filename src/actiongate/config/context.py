"""Config – Context handle supplied by the owning worker."""
from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Protocol, Sequence

from actiongate.config.settings import DispatchSettings, EnvSettingsLoader, SettingsFactory, SettingsLoader


@dataclasses.dataclass(frozen=True)
class Context:
    """Process-wide configuration handle.

    The dispatcher holds a non-owning reference; the worker that supplies it
    stays the source of truth.
    """

    root_path: Path
    acl_file: str = "sec/acl.json"
    audit_file: str = "sec/acl.log"

    def __post_init__(self) -> None:
        if not isinstance(self.root_path, Path):
            object.__setattr__(self, "root_path", Path(self.root_path))

    @property
    def acl_path(self) -> Path:
        return self.root_path / self.acl_file

    @property
    def audit_log_path(self) -> Path:
        return self.root_path / self.audit_file

    @classmethod
    def from_settings(cls, settings: DispatchSettings) -> "Context":
        return cls(
            root_path=Path(settings.root_path),
            acl_file=settings.acl_file,
            audit_file=settings.audit_file,
        )


class ContextProvider(Protocol):
    """Anything that can hand the dispatcher a :class:`Context`.

    Returning ``None`` means the worker is not ready yet.
    """

    def get_context(self) -> Context | None: ...


class SettingsContextProvider:
    """Build the context from :class:`DispatchSettings` on first request.

    Defaults to reading ``ACTIONGATE_*`` environment variables.  The settings
    are resolved once and cached.
    """

    def __init__(
        self,
        loaders: Sequence[SettingsLoader] | None = None,
        *,
        settings: DispatchSettings | None = None,
    ) -> None:
        self._loaders = list(loaders) if loaders is not None else [EnvSettingsLoader()]
        self._settings = settings

    @property
    def settings(self) -> DispatchSettings:
        if self._settings is None:
            self._settings = SettingsFactory.create(DispatchSettings, self._loaders)
        return self._settings

    def get_context(self) -> Context:
        return Context.from_settings(self.settings)


__all__ = ["Context", "ContextProvider", "SettingsContextProvider"]

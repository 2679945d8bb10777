"""Config settings – Settings base class and DispatchSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from actiongate.config.validation.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class DispatchSettings(Settings):
    """Dispatcher configuration, read from ``ACTIONGATE_*`` variables.

    ``root_path`` is the worker root under which the ACL document and the
    audit log live.  The naming rules (private prefix, streaming suffix,
    service separator) are configurable but default to the conventions the
    RPC transport uses.
    """

    _prefix: ClassVar[str] = "ACTIONGATE"

    root_path: str = "."
    private_prefix: str = "_"
    stream_suffix: str = "Stream"
    service_separator: str = ":"
    acl_file: str = "sec/acl.json"
    audit_file: str = "sec/acl.log"

    def _validate(self) -> None:
        for name in ("private_prefix", "stream_suffix", "service_separator", "acl_file", "audit_file"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise InvalidSettingValueError(name, value, "must be a non-empty string")


__all__ = ["DispatchSettings", "Settings"]

"""Config settings – EnvSettingsLoader, MappingSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Mapping, TypeVar

from actiongate.config.settings.base import Settings
from actiongate.config.validation import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Source of settings values; returns a fully constructed instance."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    The variable for a field is ``<PREFIX>_<FIELD>`` upper-cased, e.g.
    ``ACTIONGATE_ROOT_PATH``.  *environ* defaults to :data:`os.environ`.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            try:
                kwargs[field.name] = self._coerce(raw, field.type)
            except ValueError as exc:
                raise ConfigError(
                    f"{env_key}={raw!r} is not a valid {field.type}",
                    detail={"setting": env_key},
                ) from exc

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"{settings_class.__name__} rejected its values: {exc}") from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:
        origin = getattr(type_hint, "__origin__", None)
        if type_hint is bool or type_hint == "bool":
            return value.lower() in ("1", "true", "yes", "on")
        if type_hint is int or type_hint == "int":
            return int(value)
        if type_hint is float or type_hint == "float":
            return float(value)
        if origin is list:
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


class MappingSettingsLoader(SettingsLoader):
    """Load settings from a plain mapping, e.g. a worker's parsed config section.

    Unknown keys are ignored so a whole config section can be passed in.
    """

    def __init__(self, values: Mapping[str, Any]) -> None:
        self._values = dict(values)

    def load(self, settings_class: type[T]) -> T:
        names = {f.name for f in dataclasses.fields(settings_class)}  # type: ignore[arg-type]
        kwargs = {k: v for k, v in self._values.items() if k in names}
        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"{settings_class.__name__} rejected its values: {exc}") from exc


__all__ = ["EnvSettingsLoader", "MappingSettingsLoader", "SettingsLoader"]

"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from actiongate.config.settings.base import Settings
from actiongate.config.settings.loaders import SettingsLoader
from actiongate.config.validation.errors import (
    ConfigError,
    MissingRequiredSettingError,
)
from actiongate.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

logger = get_logger(__name__)


class SettingsFactory:
    """Build one settings instance from several loaders.

    Each loader yields a complete instance; the last loader that succeeds
    supplies every field, and *overrides* are applied on top.  A loader
    raising :class:`ConfigError` is skipped with a warning.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """Merge *loaders* in order, then *overrides*, and construct *settings_cls*.

        Raises :class:`MissingRequiredSettingError` when a field without a
        default is still unset after the merge.
        """
        merged: dict[str, Any] = {}

        for loader in loaders or []:
            try:
                instance = loader.load(settings_cls)
            except ConfigError as exc:
                logger.warning(
                    "settings.loader_skipped",
                    loader=type(loader).__name__,
                    error=exc.message,
                )
                continue
            for field in dataclasses.fields(instance):  # type: ignore[arg-type]
                merged[field.name] = getattr(instance, field.name)

        if overrides:
            merged.update(overrides)

        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            if field.name in merged:
                continue
            if (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            ):
                raise MissingRequiredSettingError(field.name)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


__all__ = ["SettingsFactory"]

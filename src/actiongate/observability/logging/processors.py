"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class DispatchFieldsProcessor:
    """structlog processor that orders dispatch fields first in each event.

    ``service`` and ``action`` are bound per dispatch through
    :mod:`structlog.contextvars`; moving them to the front keeps rendered
    lines greppable by service.
    """

    FIELDS = ("service", "action")

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        head = {k: event_dict.pop(k) for k in self.FIELDS if k in event_dict}
        if not head:
            return event_dict
        head.update(event_dict)
        return head


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["DispatchFieldsProcessor", "get_logger"]

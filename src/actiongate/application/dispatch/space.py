"""Application dispatch – Space, the addressing context handed to actions."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class Space:
    """Service that invoked an action, plus its namespace segments.

    ``build_space("rest:api:v1").segments == ("rest", "api", "v1")``
    """
    service: str
    segments: tuple[str, ...]


def build_space(service: str, message: Any = None, separator: str = ":") -> Space:  # noqa: ARG001
    """Split *service* on *separator*; segment contents are not validated."""
    return Space(service=service, segments=tuple(service.split(separator)))


__all__ = ["Space", "build_space"]

"""Application dispatch – @action declaration, ActionRegistry, ActionResolver.

Actions are declared explicitly and collected once, when the registry is
built for a handler instance; resolving a name is a dictionary lookup.

Usage::

    class WalletApi(ActionHandler):
        @action
        def getBalance(self, space, account_id, done):
            done(None, self.ledger.balance(account_id))

        @action
        def tailLedgerStream(self, space, req, res, meta, done):
            ...
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Callable, Iterator, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

_MARKER = "__action_name__"


def action(fn: F | None = None, *, name: str | None = None) -> Any:
    """Mark a handler method as an externally invokable action.

    Works bare (``@action``) or with an explicit wire name
    (``@action(name="getBalance")``).
    """

    def decorator(func: F) -> F:
        setattr(func, _MARKER, name or func.__name__)
        return func

    if fn is not None:
        return decorator(fn)
    return decorator


class ActionKind(str, Enum):
    UNARY = "UNARY"
    STREAMING = "STREAMING"


@dataclasses.dataclass(frozen=True)
class ActionDescriptor:
    """Registered action: wire name, callable and invocation shape."""

    name: str
    func: Callable[..., Any]
    kind: ActionKind

    @property
    def is_streaming(self) -> bool:
        return self.kind is ActionKind.STREAMING


class ActionRegistry:
    """Mapping from action name to :class:`ActionDescriptor`.

    A name is classified as streaming iff it ends with *stream_suffix*.
    Names starting with *private_prefix* are refused at registration.
    """

    def __init__(self, *, private_prefix: str = "_", stream_suffix: str = "Stream") -> None:
        self.private_prefix = private_prefix
        self.stream_suffix = stream_suffix
        self._actions: dict[str, ActionDescriptor] = {}

    @classmethod
    def from_handler(
        cls,
        handler: object,
        *,
        private_prefix: str = "_",
        stream_suffix: str = "Stream",
    ) -> "ActionRegistry":
        """Collect every ``@action`` member of *handler*'s class, bound to *handler*."""
        registry = cls(private_prefix=private_prefix, stream_suffix=stream_suffix)
        for attr in dir(type(handler)):
            member = getattr(type(handler), attr, None)
            name = getattr(member, _MARKER, None)
            if name is None:
                continue
            registry.register(name, getattr(handler, attr))
        return registry

    def classify(self, name: str) -> ActionKind:
        if name.endswith(self.stream_suffix):
            return ActionKind.STREAMING
        return ActionKind.UNARY

    def register(self, name: str, func: Callable[..., Any]) -> ActionDescriptor:
        if not isinstance(name, str) or not name:
            raise ValueError("action name must be a non-empty string")
        if name.startswith(self.private_prefix):
            raise ValueError(f"action {name!r} uses the private prefix {self.private_prefix!r}")
        if not callable(func):
            raise ValueError(f"action {name!r} is not callable")
        descriptor = ActionDescriptor(name=name, func=func, kind=self.classify(name))
        self._actions[name] = descriptor
        return descriptor

    def get(self, name: str) -> ActionDescriptor | None:
        return self._actions.get(name)

    @property
    def names(self) -> list[str]:
        return sorted(self._actions)

    def __contains__(self, name: object) -> bool:
        return name in self._actions

    def __iter__(self) -> Iterator[ActionDescriptor]:
        return iter(self._actions.values())

    def __len__(self) -> int:
        return len(self._actions)


class ActionResolver:
    """Decide whether a requested name is an invokable action."""

    def __init__(self, registry: ActionRegistry) -> None:
        self._registry = registry

    def resolve(self, name: Any) -> ActionDescriptor | None:
        """Return the descriptor, or ``None`` for empty, private or unknown names."""
        if not isinstance(name, str) or not name:
            return None
        if name.startswith(self._registry.private_prefix):
            return None
        return self._registry.get(name)

    def resolve_stream(self, name: Any) -> ActionDescriptor | None:
        """Like :meth:`resolve`, but unary actions count as not found."""
        descriptor = self.resolve(name)
        if descriptor is None or not descriptor.is_streaming:
            return None
        return descriptor


__all__ = [
    "ActionDescriptor",
    "ActionKind",
    "ActionRegistry",
    "ActionResolver",
    "action",
]

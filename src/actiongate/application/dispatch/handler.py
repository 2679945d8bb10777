"""Application dispatch – ActionHandler, the handler namespace base class."""
from __future__ import annotations

from typing import Any, Mapping

from actiongate.application.dispatch.completion import Completion
from actiongate.application.dispatch.dispatcher import Dispatcher
from actiongate.application.dispatch.message import Message
from actiongate.application.dispatch.registry import ActionRegistry
from actiongate.config.context import ContextProvider
from actiongate.config.settings import DispatchSettings
from actiongate.kernel.errors import DispatchError
from actiongate.kernel.security import AuthorizationGate


class ActionHandler:
    """Base class for a service's action namespace.

    Subclasses declare actions with :func:`~actiongate.application.dispatch.action`
    and override :meth:`init` for setup.  *caller* is the owning worker; it
    supplies the context through ``get_context()``.

    Example::

        class PingApi(ActionHandler):
            @action
            def ping(self, space, payload, done):
                done(None, {"service": space.service, "echo": payload})

        api = PingApi(worker)
        api.handle("rest:ping", {"action": "ping", "args": ["hi"]}, reply)
    """

    def __init__(
        self,
        caller: ContextProvider,
        opts: Mapping[str, Any] | None = None,
        *,
        settings: DispatchSettings | None = None,
        gate: AuthorizationGate | None = None,
    ) -> None:
        self.caller = caller
        self.opts: dict[str, Any] = dict(opts or {})
        self.settings = settings or DispatchSettings()
        self.registry = ActionRegistry.from_handler(
            self,
            private_prefix=self.settings.private_prefix,
            stream_suffix=self.settings.stream_suffix,
        )
        self.dispatcher = Dispatcher(self.registry, caller, gate=gate, settings=self.settings)

        self.init()

    def init(self) -> None:
        """Hook for subclasses; runs at the end of construction."""

    def handle(
        self,
        service: str,
        message: Message | Mapping[str, Any],
        complete: Completion,
    ) -> DispatchError | None:
        return self.dispatcher.handle(service, message, complete)

    def handle_stream(
        self,
        service: str,
        action: str,
        request_stream: Any,
        response_stream: Any,
        meta: Mapping[str, Any] | None,
        complete: Completion,
    ) -> DispatchError | None:
        return self.dispatcher.handle_stream(service, action, request_stream, response_stream, meta, complete)

    def is_context_ready(self) -> bool:
        return self.dispatcher.is_context_ready()

    def clear_context(self) -> None:
        self.dispatcher.clear_context()


__all__ = ["ActionHandler"]

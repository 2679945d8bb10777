"""Application dispatch – Dispatcher.

Orchestrates one inbound call::

    context ready?  -> ERR_API_READY
    action valid?   -> ERR_API_ACTION_NOTFOUND
    complete ok?    -> ERR_API_CB_INVALID
    secure & denied -> ERR_API_AUTH
    invoke handler  -> raises? ERR_API_ACTION: <message>

Every outcome reaches the caller through ``complete``; nothing raised by a
handler escapes :meth:`Dispatcher.handle` or :meth:`Dispatcher.handle_stream`.
"""
from __future__ import annotations

import asyncio
import inspect
from typing import Any, Mapping

import structlog

from actiongate.application.dispatch.completion import Completion, CompletionGuard
from actiongate.application.dispatch.message import Message, StreamMeta
from actiongate.application.dispatch.registry import ActionDescriptor, ActionRegistry, ActionResolver
from actiongate.application.dispatch.space import build_space
from actiongate.config.context import Context, ContextProvider
from actiongate.config.settings import DispatchSettings
from actiongate.kernel.errors import (
    ActionFailureError,
    ActionNotFoundError,
    DispatchError,
    InvalidCompletionTargetError,
    NotReadyError,
    UnauthorizedError,
)
from actiongate.kernel.security import AuthorizationGate
from actiongate.observability.logging import get_logger

logger = get_logger(__name__)


class Dispatcher:
    """Resolve, authorize and invoke actions of one handler namespace.

    Parameters
    ----------
    registry:
        Actions this dispatcher may invoke.
    provider:
        Source of the :class:`~actiongate.config.context.Context`, pulled
        lazily on the first call and again after :meth:`clear_context`.
    gate:
        Authorization gate for secure calls.
    settings:
        Naming conventions (service separator); defaults to
        :class:`DispatchSettings`.
    """

    def __init__(
        self,
        registry: ActionRegistry,
        provider: ContextProvider,
        *,
        gate: AuthorizationGate | None = None,
        settings: DispatchSettings | None = None,
    ) -> None:
        self._registry = registry
        self._resolver = ActionResolver(registry)
        self._provider = provider
        self._gate = gate if gate is not None else AuthorizationGate()
        self._settings = settings or DispatchSettings()
        self._context: Context | None = None
        self._tasks: set[asyncio.Task[Any]] = set()

    # ------------------------------------------------------------------
    # Context
    # ------------------------------------------------------------------

    @property
    def context(self) -> Context | None:
        return self._context

    @property
    def gate(self) -> AuthorizationGate:
        return self._gate

    @property
    def actions(self) -> list[str]:
        return self._registry.names

    def is_context_ready(self) -> bool:
        return self._context is not None

    def clear_context(self) -> None:
        self._context = None

    def reload_acl(self) -> None:
        """Drop the cached ACL so the next secure call reads it again."""
        self._gate.store.invalidate()

    def _acquire_context(self) -> Context | None:
        if self._context is None:
            self._context = self._provider.get_context()
        return self._context

    # ------------------------------------------------------------------
    # Unary
    # ------------------------------------------------------------------

    def handle(
        self,
        service: str,
        message: Message | Mapping[str, Any],
        complete: Completion,
    ) -> DispatchError | None:
        """Dispatch a unary call.

        Returns ``None`` normally.  When *complete* is not callable the
        resulting error cannot be delivered and is returned instead.
        """
        msg = Message.coerce(message)
        with structlog.contextvars.bound_contextvars(service=service, action=msg.action):
            context = self._acquire_context()
            if context is None:
                return self._fail(complete, NotReadyError())

            descriptor = self._resolver.resolve(msg.action)
            if descriptor is None:
                return self._fail(complete, ActionNotFoundError(msg.action))

            if not callable(complete):
                return self._fail(complete, InvalidCompletionTargetError())

            if msg.secure and not self._gate.authorize(context, msg.auth, descriptor.name, msg.args):
                return self._fail(complete, UnauthorizedError())

            space = build_space(service, msg, self._settings.service_separator)
            guard = CompletionGuard(complete, action=descriptor.name)
            self._invoke(descriptor, guard, space, *msg.args, guard)
            return None

    def _invoke(self, descriptor: ActionDescriptor, guard: CompletionGuard, *args: Any) -> None:
        try:
            outcome = descriptor.func(*args)
            if inspect.isawaitable(outcome):
                self._await(outcome, descriptor, guard)
        except Exception as exc:  # noqa: BLE001 – the only broad catch around handler code
            logger.exception("dispatch.action_failed", error=str(exc))
            guard(ActionFailureError(exc))

    def _await(self, awaitable: Any, descriptor: ActionDescriptor, guard: CompletionGuard) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(_as_coroutine(awaitable))
            return

        task = loop.create_task(_as_coroutine(awaitable), name=f"action:{descriptor.name}")

        def _done(t: asyncio.Task[Any]) -> None:
            if t.cancelled():
                return
            exc = t.exception()
            if exc is not None:
                logger.error("dispatch.action_failed", action=descriptor.name, error=str(exc), exc_info=exc)
                guard(ActionFailureError(exc))

        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        task.add_done_callback(_done)

    # ------------------------------------------------------------------
    # Streaming
    # ------------------------------------------------------------------

    def handle_stream(
        self,
        service: str,
        action: str,
        request_stream: Any,
        response_stream: Any,
        meta: Mapping[str, Any] | None,
        complete: Completion,
    ) -> DispatchError | None:
        """Dispatch a streaming call.

        No completion guard is layered here: stream handlers own their
        termination and every call they make is forwarded.  *meta* reaches
        the handler unchanged.  A handler that raises before completing is
        reported once as :class:`ActionFailureError`; one that raises after
        completing is only logged.
        """
        stream_meta = StreamMeta.from_mapping(meta)
        with structlog.contextvars.bound_contextvars(service=service, action=action):
            context = self._acquire_context()
            if context is None:
                return self._fail(complete, NotReadyError())

            descriptor = self._resolver.resolve_stream(action)
            if descriptor is None:
                return self._fail(complete, ActionNotFoundError(action))

            if not callable(complete):
                return self._fail(complete, InvalidCompletionTargetError())

            if stream_meta.secure and not self._gate.authorize(
                context, stream_meta.auth, descriptor.name, stream_meta.args
            ):
                return self._fail(complete, UnauthorizedError())

            space = build_space(service, None, self._settings.service_separator)
            completed = False

            def _complete(*args: Any, **kwargs: Any) -> Any:
                nonlocal completed
                completed = True
                return complete(*args, **kwargs)

            try:
                descriptor.func(space, request_stream, response_stream, meta, _complete)
            except Exception as exc:  # noqa: BLE001
                logger.exception("dispatch.stream_failed", error=str(exc), completed=completed)
                if not completed:
                    return self._fail(complete, ActionFailureError(exc))
            return None

    # ------------------------------------------------------------------
    # Delivery
    # ------------------------------------------------------------------

    def _fail(self, complete: Any, error: DispatchError) -> DispatchError | None:
        if not callable(complete):
            logger.error("dispatch.completion_invalid", code=error.code)
            return error
        logger.info("dispatch.rejected", code=error.code)
        try:
            complete(error, None)
        except Exception as exc:  # noqa: BLE001
            logger.exception("dispatch.completion_raised", code=error.code, error=str(exc))
        return None


async def _as_coroutine(awaitable: Any) -> Any:
    return await awaitable


__all__ = ["Dispatcher"]

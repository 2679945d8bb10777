"""Application dispatch – action resolution, completion guard, dispatcher."""
from actiongate.application.dispatch.completion import Completion, CompletionGuard, GuardState, normalize_error
from actiongate.application.dispatch.dispatcher import Dispatcher
from actiongate.application.dispatch.handler import ActionHandler
from actiongate.application.dispatch.message import Message, StreamMeta
from actiongate.application.dispatch.registry import (
    ActionDescriptor,
    ActionKind,
    ActionRegistry,
    ActionResolver,
    action,
)
from actiongate.application.dispatch.space import Space, build_space

__all__ = [
    "ActionDescriptor",
    "ActionHandler",
    "ActionKind",
    "ActionRegistry",
    "ActionResolver",
    "Completion",
    "CompletionGuard",
    "Dispatcher",
    "GuardState",
    "Message",
    "Space",
    "StreamMeta",
    "action",
    "build_space",
    "normalize_error",
]

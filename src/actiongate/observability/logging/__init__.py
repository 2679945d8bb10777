"""Observability – structured logging helpers."""
from actiongate.observability.logging.processors import DispatchFieldsProcessor, get_logger
from actiongate.observability.logging.factory import JsonLoggerFactory
from actiongate.observability.logging.audit import DecisionLogger, DecisionOutcome

__all__ = [
    "DecisionLogger",
    "DecisionOutcome",
    "DispatchFieldsProcessor",
    "JsonLoggerFactory",
    "get_logger",
]

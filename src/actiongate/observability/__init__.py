"""Observability – structured logging for dispatch and authorization."""
from actiongate.observability.logging import (
    DecisionLogger,
    DecisionOutcome,
    JsonLoggerFactory,
    get_logger,
)

__all__ = ["DecisionLogger", "DecisionOutcome", "JsonLoggerFactory", "get_logger"]

"""Observability – structured logging helpers."""
from slugsmith.observability.logging.factory import JsonLoggerFactory
from slugsmith.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]

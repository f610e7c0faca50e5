"""Observability – structlog configuration and logger helper."""
from tableview.observability.logging.factory import JsonLoggerFactory
from tableview.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]

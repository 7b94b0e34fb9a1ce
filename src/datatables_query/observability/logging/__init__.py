"""Observability – structlog configuration and logger helpers."""
from datatables_query.observability.logging.factory import JsonLoggerFactory, configure_logging
from datatables_query.observability.logging.processors import RegexPatternProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "RegexPatternProcessor",
    "configure_logging",
    "get_logger",
]

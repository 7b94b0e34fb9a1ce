"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

import re
from typing import Any

import structlog


def _render(value: Any) -> Any:
    if isinstance(value, re.Pattern):
        flags = "i" if value.flags & re.IGNORECASE else ""
        return f"/{value.pattern}/{flags}"
    if isinstance(value, dict):
        return {k: _render(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_render(v) for v in value]
    return value


class RegexPatternProcessor:
    """structlog processor that renders compiled regexes as ``/pattern/flags``.

    MongoDB filters carry :class:`re.Pattern` values, which JSON renderers
    would otherwise fall back to ``repr`` for.

    Usage::

        structlog.configure(processors=[RegexPatternProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return {key: _render(value) for key, value in event_dict.items()}


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["RegexPatternProcessor", "get_logger"]

"""Application query – numeric coercion and the Validity Checker.

DataTables posts ``draw``/``start``/``length`` and ``order[i][column]`` as
text. Coercion follows JavaScript's ``Number()`` so the same descriptors are
accepted and rejected as by browser-side tooling.
"""
from __future__ import annotations

import math
import re
from typing import Any

__all__ = ["is_nan_or_undefined", "to_number"]

NAN = float("nan")

# StringNumericLiteral: ASCII digits only, no "_" separators, no "inf"/"nan"
_INFINITY_RE = re.compile(r"[+-]?Infinity")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
# below the interpreter's int/str conversion limit; longer runs go through float()
_MAX_INT_DIGITS = 4000
# unsigned only: Number("-0x10") is NaN
_RADIX_PATTERNS = (
    (re.compile(r"0[xX][0-9a-fA-F]+"), 16),
    (re.compile(r"0[oO][0-7]+"), 8),
    (re.compile(r"0[bB][01]+"), 2),
)


def to_number(value: Any) -> int | float:
    """Coerce *value* the way ``Number(value)`` does.

    Strings are trimmed and read as decimal (``"1e2"``, ``".5"``), as
    ``0x``/``0o``/``0b`` literals, or as ``Infinity``; out-of-range exponents
    give ``±inf``. Integral results come back as ``int`` so they can be handed
    straight to ``skip``/``limit`` and echoed as ``draw``. The one deliberate
    difference from ``Number()``: ``None`` is ``NaN``, not ``0``.
    """
    if value is None:
        return NAN
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else value
    if isinstance(value, str):
        return _parse_text(value.strip())
    return NAN


def _parse_text(text: str) -> int | float:
    if not text:
        return 0
    if _INFINITY_RE.fullmatch(text):
        return -math.inf if text.startswith("-") else math.inf
    for pattern, base in _RADIX_PATTERNS:
        if pattern.fullmatch(text):
            return int(text[2:], base)
    if _INTEGER_RE.fullmatch(text) and len(text) <= _MAX_INT_DIGITS:
        return int(text)
    if not _DECIMAL_RE.fullmatch(text):
        return NAN
    # overflow gives ±inf, as in Number("1e400")
    number = float(text)
    return int(number) if number.is_integer() else number


def _is_invalid(value: Any) -> bool:
    if value is None or value is False or value == "":
        return True
    number = to_number(value)
    return isinstance(number, float) and math.isnan(number)


def is_nan_or_undefined(*values: Any) -> bool:
    """Return ``True`` if any of *values* is missing or not a number.

    ``0`` is valid; ``None``, ``""``, ``False`` and ``NaN`` are not.
    """
    return any(_is_invalid(value) for value in values)

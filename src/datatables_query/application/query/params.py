"""Application query – DataTables request descriptor wire types.

The flags ``searchable`` and ``orderable`` travel as the *strings*
``"true"``/``"false"`` and are kept that way; see
:func:`~datatables_query.application.query.builders.get_searchable_fields`.
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any, TypedDict

from datatables_query.kernel.errors import InvalidRequestError

__all__ = [
    "ColumnParams",
    "DatatablesParams",
    "OrderParams",
    "SearchParams",
    "parse_flat_params",
]


class SearchParams(TypedDict, total=False):
    value: str
    regex: str


class ColumnParams(TypedDict, total=False):
    data: str
    name: str
    searchable: str
    orderable: str
    search: SearchParams


class OrderParams(TypedDict, total=False):
    column: str
    dir: str


class DatatablesParams(TypedDict, total=False):
    draw: str | int
    start: str | int
    length: str | int
    search: SearchParams
    columns: list[ColumnParams]
    order: list[OrderParams]


_KEY_RE = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])*)$")
_SEGMENT_RE = re.compile(r"\[([^\[\]]*)\]")


def _split_key(key: str) -> list[str]:
    match = _KEY_RE.match(key)
    if match is None:
        return [key]
    return [match.group(1), *_SEGMENT_RE.findall(match.group(2))]


def _insert(node: dict[str, Any], segments: list[str], value: Any) -> None:
    head, *rest = segments
    if not rest:
        node[head] = value
        return
    child = node.get(head)
    if not isinstance(child, dict):
        child = {}
        node[head] = child
    _insert(child, rest, value)


def _listify(node: Any, path: str = "") -> Any:
    """Turn dicts whose keys are all decimal indexes into index-ordered lists.

    The indexes must run ``0..n-1``: ``order[i][column]`` refers to
    ``columns`` by position, so a missing slot cannot be closed up.
    """
    if not isinstance(node, dict):
        return node
    converted = {k: _listify(v, f"{path}[{k}]" if path else k) for k, v in node.items()}
    if converted and all(k.isascii() and k.isdigit() for k in converted):
        indexed = {int(k): v for k, v in converted.items()}
        for position in range(len(indexed)):
            if position not in indexed:
                raise InvalidRequestError(
                    f"{path}[{position}] is missing; indexes must be contiguous from 0",
                    field=f"{path}[{position}]",
                )
        return [indexed[position] for position in range(len(indexed))]
    return converted


def parse_flat_params(
    items: Mapping[str, Any] | Iterable[tuple[str, Any]],
) -> DatatablesParams:
    """Nest DataTables' bracketed GET parameters into a descriptor dict.

    ``columns[0][data]=name&order[0][dir]=asc&search[value]=x`` becomes::

        {"columns": [{"data": "name"}], "order": [{"dir": "asc"}],
         "search": {"value": "x"}}

    Values are left untouched (strings stay strings). Repeated keys keep the
    last value. Raises :class:`InvalidRequestError` naming the first missing
    key when list indexes have a gap (``columns[0]``, ``columns[2]``).
    """
    pairs = items.items() if isinstance(items, Mapping) else items
    root: dict[str, Any] = {}
    for key, value in pairs:
        _insert(root, _split_key(key), value)
    return _listify(root)  # type: ignore[no-any-return]

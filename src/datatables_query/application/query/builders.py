"""Application query – translate a DataTables descriptor into MongoDB parameters.

Each builder returns a :class:`~datatables_query.kernel.types.Result`:
``Ok`` with the store-native value, or ``Err`` with an
:class:`~datatables_query.kernel.errors.InvalidRequestError` describing why
the descriptor cannot be served.
"""
from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

from datatables_query.application.query.validity import is_nan_or_undefined, to_number
from datatables_query.kernel.errors import InvalidRequestError
from datatables_query.kernel.types import Err, Ok, Result

__all__ = [
    "build_find_parameters",
    "build_select_parameters",
    "build_sort_parameters",
    "get_searchable_fields",
]


def _json_flag(value: Any) -> Any:
    if value is None:
        raise ValueError("flag is missing")
    # JSON.parse stringifies non-string input first
    text = value if isinstance(value, str) else json.dumps(value)
    return json.loads(text)


def get_searchable_fields(params: Mapping[str, Any]) -> list[str]:
    """Return the ``data`` of every column whose ``searchable`` flag parses true.

    Column order is preserved. ``searchable`` is JSON text (``"true"`` /
    ``"false"``); anything that is not valid JSON raises
    :class:`InvalidRequestError`.
    """
    fields: list[str] = []
    for index, column in enumerate(params["columns"]):
        if not isinstance(column, Mapping):
            raise InvalidRequestError(f"columns[{index}] must be an object", field=f"columns[{index}]")
        try:
            searchable = _json_flag(column.get("searchable"))
        except (TypeError, ValueError) as exc:
            raise InvalidRequestError(
                f"columns[{index}].searchable is not a JSON boolean: {column.get('searchable')!r}",
                field=f"columns[{index}].searchable",
                cause=exc,
            ) from exc
        if searchable:
            fields.append(column.get("data"))
    return fields


def build_find_parameters(params: Mapping[str, Any] | None) -> Result[dict[str, Any], InvalidRequestError]:
    """Build a MongoDB filter from ``search.value`` and the searchable columns.

    - Empty search text: ``{}``, every document matches.
    - One searchable column: ``{field: /text/i}``.
    - Otherwise: ``{"$or": [{field1: /text/i}, {field2: /text/i}, ...]}``;
      with no searchable column the ``$or`` list is empty.

    The search text is used as a regular expression as-is; ``search.regex``
    is ignored.
    """
    if not params or not isinstance(params.get("columns"), list):
        return Err(InvalidRequestError("columns must be a list", field="columns"))
    if not isinstance(params.get("search"), Mapping):
        return Err(InvalidRequestError("search is required", field="search"))
    search_text = params["search"].get("value")
    if search_text is None:
        return Err(InvalidRequestError("search.value is required", field="search.value"))

    if search_text == "":
        return Ok({})

    try:
        search_regex = re.compile(str(search_text), re.IGNORECASE)
    except re.error as exc:
        return Err(
            InvalidRequestError(
                f"search.value is not a valid regular expression: {exc}",
                field="search.value",
                cause=exc,
            )
        )

    searchable_fields = get_searchable_fields(params)

    if len(searchable_fields) == 1:
        return Ok({searchable_fields[0]: search_regex})

    return Ok({"$or": [{field: search_regex} for field in searchable_fields]})


def build_sort_parameters(params: Mapping[str, Any] | None) -> Result[str, InvalidRequestError]:
    """Build a single-field sort directive from ``order[0]``.

    ``order[0].column`` indexes ``columns``; the column's ``data`` is returned
    as-is when ``order[0].dir == "asc"`` and prefixed with ``-`` for any other
    direction. A column whose ``orderable`` is the string ``"false"`` cannot be
    sorted on.
    """
    if not params or not isinstance(params.get("order"), list) or not params["order"]:
        return Err(InvalidRequestError("order must be a non-empty list", field="order"))

    first = params["order"][0]
    if not isinstance(first, Mapping):
        return Err(InvalidRequestError("order[0] must be an object", field="order[0]"))

    sort_column = to_number(first.get("column"))
    sort_order = first.get("dir")
    columns = params.get("columns")

    if is_nan_or_undefined(sort_column) or not isinstance(sort_column, int):
        return Err(InvalidRequestError("order[0].column must be an integer", field="order[0].column"))
    if not isinstance(columns, list):
        return Err(InvalidRequestError("columns must be a list", field="columns"))
    if sort_column < 0 or sort_column >= len(columns):
        return Err(
            InvalidRequestError(
                f"order[0].column {sort_column} is out of range for {len(columns)} columns",
                field="order[0].column",
            )
        )

    column = columns[sort_column]
    if not isinstance(column, Mapping):
        return Err(InvalidRequestError(f"columns[{sort_column}] must be an object", field=f"columns[{sort_column}]"))
    if column.get("orderable") == "false":
        return Err(
            InvalidRequestError(f"columns[{sort_column}] is not orderable", field=f"columns[{sort_column}].orderable")
        )

    sort_field = column.get("data")
    if not sort_field:
        return Err(InvalidRequestError(f"columns[{sort_column}].data is empty", field=f"columns[{sort_column}].data"))

    if sort_order == "asc":
        return Ok(sort_field)
    return Ok(f"-{sort_field}")


def build_select_parameters(params: Mapping[str, Any] | None) -> Result[dict[str, int], InvalidRequestError]:
    """Project every listed column, whatever its searchable/orderable flags."""
    if not params or not isinstance(params.get("columns"), list):
        return Err(InvalidRequestError("columns must be a list", field="columns"))
    if not all(isinstance(column, Mapping) for column in params["columns"]):
        return Err(InvalidRequestError("every column must be an object", field="columns"))
    return Ok({column.get("data"): 1 for column in params["columns"]})

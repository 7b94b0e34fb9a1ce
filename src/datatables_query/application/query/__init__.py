"""Application query – DataTables descriptor → MongoDB query translation."""
from datatables_query.application.query.builders import (
    build_find_parameters,
    build_select_parameters,
    build_sort_parameters,
    get_searchable_fields,
)
from datatables_query.application.query.params import (
    ColumnParams,
    DatatablesParams,
    OrderParams,
    SearchParams,
    parse_flat_params,
)
from datatables_query.application.query.response import PaginatedResponse
from datatables_query.application.query.service import DatatablesQuery
from datatables_query.application.query.store import DocumentStore
from datatables_query.application.query.validity import is_nan_or_undefined, to_number

__all__ = [
    "ColumnParams",
    "DatatablesParams",
    "DatatablesQuery",
    "DocumentStore",
    "OrderParams",
    "PaginatedResponse",
    "SearchParams",
    "build_find_parameters",
    "build_select_parameters",
    "build_sort_parameters",
    "get_searchable_fields",
    "is_nan_or_undefined",
    "parse_flat_params",
    "to_number",
]

"""Application query – DatatablesQuery orchestrator.

Validates a DataTables descriptor, then reads the unfiltered count, the
filtered count and one page of documents from a :class:`DocumentStore`.
"""
from __future__ import annotations

import asyncio
import math
from collections.abc import Awaitable, Mapping
from typing import Any, TypeVar

from datatables_query.application.query.builders import (
    build_find_parameters,
    build_select_parameters,
    build_sort_parameters,
    get_searchable_fields,
)
from datatables_query.application.query.response import PaginatedResponse
from datatables_query.application.query.store import DocumentStore
from datatables_query.application.query.validity import is_nan_or_undefined, to_number
from datatables_query.kernel.errors import InvalidRequestError, StoreError
from datatables_query.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)

PAGINATION_ERROR = "Some parameters are missing or in a wrong state. Could be any of draw, start or length"
BUILDER_ERROR = "Invalid findParameters or sortParameters or selectParameters"


class DatatablesQuery:
    """Serve DataTables server-side requests from one document store.

    Usage::

        query = DatatablesQuery(MongoCollectionStore(db.users))
        page = await query.run(request_json)
        return page.to_dict()

    Parameters
    ----------
    store:
        The collection to query; bound for the lifetime of the instance.
    concurrent:
        Issue the two counts and the page fetch together instead of one after
        another. The response is the same either way.
    """

    get_searchable_fields = staticmethod(get_searchable_fields)
    is_nan_or_undefined = staticmethod(is_nan_or_undefined)
    build_find_parameters = staticmethod(build_find_parameters)
    build_sort_parameters = staticmethod(build_sort_parameters)
    build_select_parameters = staticmethod(build_select_parameters)

    def __init__(self, store: DocumentStore, *, concurrent: bool = False) -> None:
        self._store = store
        self._concurrent = concurrent

    @property
    def store(self) -> DocumentStore:
        return self._store

    async def run(self, params: Mapping[str, Any] | None) -> PaginatedResponse:
        """Answer one DataTables request.

        Raises
        ------
        InvalidRequestError
            ``draw``/``start``/``length`` are missing or not numbers, or the
            search, order or columns cannot be turned into a query.
        StoreError
            A count or find failed; the store's exception is the ``cause``.
        """
        if params is None:
            params = {}
        if not isinstance(params, Mapping):
            raise self._reject(InvalidRequestError("DataTables parameters must be an object"))

        draw = to_number(params.get("draw"))
        start = to_number(params.get("start"))
        length = to_number(params.get("length"))

        try:
            find_result = build_find_parameters(params)
        except InvalidRequestError as exc:
            self._reject(exc)
            raise
        sort_result = build_sort_parameters(params)
        select_result = build_select_parameters(params)

        if is_nan_or_undefined(draw, start, length) or not all(
            math.isfinite(n) for n in (start, length)
        ):
            raise self._reject(
                InvalidRequestError(PAGINATION_ERROR, detail={"draw": draw, "start": start, "length": length})
            )

        failures = [r.unwrap_err() for r in (find_result, sort_result, select_result) if r.is_err()]
        if failures:
            raise self._reject(
                InvalidRequestError(BUILDER_ERROR, errors=[failure.to_dict() for failure in failures])
            )

        find_parameters = find_result.unwrap()
        sort_parameters = sort_result.unwrap()
        select_parameters = select_result.unwrap()
        logger.debug(
            "datatables.query",
            filter=find_parameters,
            sort=sort_parameters,
            projection=select_parameters,
        )

        reads = (
            ("count_total", lambda: self._store.count({})),
            ("count_filtered", lambda: self._store.count(find_parameters)),
            (
                "find",
                lambda: self._store.find(
                    find_parameters,
                    projection=select_parameters,
                    skip=int(start),
                    limit=int(length),
                    sort=sort_parameters,
                ),
            ),
        )
        if self._concurrent:
            results = await self._gather(*(self._call(operation, read()) for operation, read in reads))
        else:
            results = [await self._call(operation, read()) for operation, read in reads]
        records_total, records_filtered, data = results

        logger.debug(
            "datatables.page",
            draw=draw,
            records_total=records_total,
            records_filtered=records_filtered,
            returned=len(data),
        )
        return PaginatedResponse(
            draw=draw,
            records_total=records_total,
            records_filtered=records_filtered,
            data=data,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _reject(exc: InvalidRequestError) -> InvalidRequestError:
        logger.warning("datatables.rejected", **exc.to_dict())
        return exc

    @staticmethod
    async def _call(operation: str, awaitable: Awaitable[T]) -> T:
        try:
            return await awaitable
        except Exception as exc:
            logger.error("datatables.store_failed", operation=operation, error=repr(exc))
            raise StoreError(operation, exc) from exc

    @staticmethod
    async def _gather(*coros: Awaitable[Any]) -> list[Any]:
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(coro) for coro in coros]  # type: ignore[arg-type]
        except ExceptionGroup as failed:
            # first store failure wins; the other reads were cancelled
            raise failed.exceptions[0]
        return [task.result() for task in tasks]


__all__ = ["BUILDER_ERROR", "PAGINATION_ERROR", "DatatablesQuery"]

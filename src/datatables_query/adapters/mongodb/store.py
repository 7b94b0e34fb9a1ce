"""MongoDB adapter — MongoCollectionStore."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from pymongo import ASCENDING, DESCENDING

from datatables_query.application.query import DatatablesQuery

if TYPE_CHECKING:
    from datatables_query.config.settings import DatatablesSettings

# matches no document; the server rejects ``{"$or": []}``
MATCH_NOTHING: dict[str, Any] = {"_id": {"$in": []}}


class MongoCollectionStore:
    """:class:`~datatables_query.application.query.DocumentStore` over a
    **motor** ``AsyncIOMotorCollection``.

    Sort directives arrive as ``"field"`` or ``"-field"`` and are translated
    to ``(field, ASCENDING | DESCENDING)``.  Compiled :class:`re.Pattern`
    values in filters are encoded by the driver as BSON regexes, flags
    included.

    Usage::

        client = AsyncIOMotorClient("mongodb://localhost:27017")
        store = MongoCollectionStore(client["app"]["users"])
        page = await DatatablesQuery(store).run(params)
    """

    def __init__(self, collection: Any) -> None:
        self._col = collection

    @property
    def collection(self) -> Any:
        return self._col

    # ------------------------------------------------------------------
    # DocumentStore interface
    # ------------------------------------------------------------------

    async def count(self, filter: dict[str, Any]) -> int:
        return await self._col.count_documents(self._normalise(filter))

    async def find(
        self,
        filter: dict[str, Any],
        *,
        projection: dict[str, int],
        skip: int,
        limit: int,
        sort: str,
    ) -> list[dict[str, Any]]:
        field, direction = self._sort_key(sort)
        cursor = (
            self._col.find(self._normalise(filter), projection)
            .sort(field, direction)
            .skip(skip)
            .limit(limit)
        )
        return [doc async for doc in cursor]

    # ------------------------------------------------------------------
    # Translation helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _sort_key(sort: str) -> tuple[str, int]:
        if sort.startswith("-"):
            return sort[1:], DESCENDING
        return sort, ASCENDING

    @staticmethod
    def _normalise(filter: dict[str, Any]) -> dict[str, Any]:
        if filter.get("$or") == [] and len(filter) == 1:
            return copy.deepcopy(MATCH_NOTHING)
        return filter


def connect(settings: DatatablesSettings, client: Any = None) -> MongoCollectionStore:
    """Return a store for ``settings.database``/``settings.collection``.

    A fresh ``AsyncIOMotorClient`` is created from ``settings.mongo_url``
    unless *client* is given.
    """
    if client is None:
        from motor.motor_asyncio import AsyncIOMotorClient

        client = AsyncIOMotorClient(settings.mongo_url)
    return MongoCollectionStore(client[settings.database][settings.collection])


def create_query(settings: DatatablesSettings, client: Any = None) -> DatatablesQuery:
    """Build a :class:`DatatablesQuery` for the configured collection."""
    return DatatablesQuery(connect(settings, client), concurrent=settings.concurrent_queries)


__all__ = ["MATCH_NOTHING", "MongoCollectionStore", "connect", "create_query"]

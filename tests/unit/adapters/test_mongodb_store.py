"""Unit tests for the MongoDB adapter — no running MongoDB required."""
from __future__ import annotations

import asyncio
import re
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

from pymongo import ASCENDING, DESCENDING

from datatables_query import DatatablesQuery
from datatables_query.adapters.mongodb import MATCH_NOTHING, MongoCollectionStore, connect, create_query
from datatables_query.config import DatatablesSettings


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _FakeCursor:
    """Chainable stand-in for a motor cursor."""

    def __init__(self, docs: list[dict[str, Any]]) -> None:
        self._docs = docs
        self.sort = MagicMock(return_value=self)
        self.skip = MagicMock(return_value=self)
        self.limit = MagicMock(return_value=self)

    def __aiter__(self) -> Any:
        return self._iter()

    async def _iter(self) -> Any:
        for doc in self._docs:
            yield doc


def _make_store(docs: list[dict[str, Any]] | None = None) -> tuple[MongoCollectionStore, MagicMock, _FakeCursor]:
    cursor = _FakeCursor(docs or [])
    collection = MagicMock()
    collection.count_documents = AsyncMock(return_value=7)
    collection.find = MagicMock(return_value=cursor)
    return MongoCollectionStore(collection), collection, cursor


def _settings(**overrides: Any) -> DatatablesSettings:
    return DatatablesSettings(database="app", collection="users", **overrides)


# ---------------------------------------------------------------------------
# MongoCollectionStore
# ---------------------------------------------------------------------------


class TestMongoCollectionStore:
    def test_count_delegates_to_count_documents(self) -> None:
        async def run() -> None:
            store, collection, _ = _make_store()
            pattern = re.compile("bob", re.IGNORECASE)
            assert await store.count({"name": pattern}) == 7
            collection.count_documents.assert_awaited_once_with({"name": pattern})
        asyncio.run(run())

    def test_empty_or_becomes_match_nothing(self) -> None:
        async def run() -> None:
            store, collection, _ = _make_store()
            await store.count({"$or": []})
            collection.count_documents.assert_awaited_once_with(MATCH_NOTHING)
        asyncio.run(run())

    def test_non_empty_or_is_untouched(self) -> None:
        async def run() -> None:
            store, collection, _ = _make_store()
            filter = {"$or": [{"a": 1}, {"b": 2}]}
            await store.count(filter)
            collection.count_documents.assert_awaited_once_with(filter)
        asyncio.run(run())

    def test_find_ascending(self) -> None:
        async def run() -> None:
            docs = [{"_id": 1, "name": "Alice"}]
            store, collection, cursor = _make_store(docs)
            result = await store.find({}, projection={"name": 1}, skip=10, limit=5, sort="name")
            assert result == docs
            collection.find.assert_called_once_with({}, {"name": 1})
            cursor.sort.assert_called_once_with("name", ASCENDING)
            cursor.skip.assert_called_once_with(10)
            cursor.limit.assert_called_once_with(5)
        asyncio.run(run())

    def test_find_descending_strips_prefix(self) -> None:
        async def run() -> None:
            store, _, cursor = _make_store()
            await store.find({}, projection={}, skip=0, limit=10, sort="-email")
            cursor.sort.assert_called_once_with("email", DESCENDING)
        asyncio.run(run())

    def test_find_with_empty_or(self) -> None:
        async def run() -> None:
            store, collection, _ = _make_store()
            await store.find({"$or": []}, projection={}, skip=0, limit=10, sort="name")
            assert collection.find.call_args.args[0] == MATCH_NOTHING
        asyncio.run(run())

    def test_match_nothing_filter_is_built_from_constant(self) -> None:
        with patch.dict(MATCH_NOTHING, {"_id": {"$in": ["sentinel"]}}):
            rewritten = MongoCollectionStore._normalise({"$or": []})
            assert rewritten == {"_id": {"$in": ["sentinel"]}}
        assert MATCH_NOTHING == {"_id": {"$in": []}}

    def test_match_nothing_constant_is_not_shared(self) -> None:
        rewritten = MongoCollectionStore._normalise({"$or": []})
        rewritten["_id"]["$in"].append(1)
        assert MATCH_NOTHING == {"_id": {"$in": []}}

    def test_drives_datatables_query(self) -> None:
        async def run() -> None:
            store, _, _ = _make_store([{"name": "Alice"}])
            params = {
                "draw": "4",
                "start": "0",
                "length": "10",
                "search": {"value": ""},
                "columns": [{"data": "name", "searchable": "true", "orderable": "true"}],
                "order": [{"column": "0", "dir": "asc"}],
            }
            page = await DatatablesQuery(store).run(params)
            assert page.to_dict() == {
                "draw": 4,
                "recordsTotal": 7,
                "recordsFiltered": 7,
                "data": [{"name": "Alice"}],
            }
        asyncio.run(run())


# ---------------------------------------------------------------------------
# connect / create_query
# ---------------------------------------------------------------------------


class TestConnect:
    def test_uses_given_client(self) -> None:
        client = MagicMock()
        store = connect(_settings(), client)
        client.__getitem__.assert_called_once_with("app")
        client.__getitem__.return_value.__getitem__.assert_called_once_with("users")
        assert store.collection is client["app"]["users"]

    def test_create_query_honours_concurrency_setting(self) -> None:
        query = create_query(_settings(concurrent_queries=True), MagicMock())
        assert isinstance(query, DatatablesQuery)
        assert isinstance(query.store, MongoCollectionStore)
        assert query._concurrent is True

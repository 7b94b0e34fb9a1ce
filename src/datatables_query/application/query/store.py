"""Application query – DocumentStore port."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ["DocumentStore"]


@runtime_checkable
class DocumentStore(Protocol):
    """The read primitives a DataTables query needs from a collection.

    ``sort`` is a single field name, prefixed with ``-`` for descending order.
    Implementations apply sort, then skip, then limit, then projection.
    """

    async def count(self, filter: dict[str, Any]) -> int: ...

    async def find(
        self,
        filter: dict[str, Any],
        *,
        projection: dict[str, int],
        skip: int,
        limit: int,
        sort: str,
    ) -> list[dict[str, Any]]: ...

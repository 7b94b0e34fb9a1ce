"""Application query – PaginatedResponse."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class PaginatedResponse:
    """One page of documents plus the counts DataTables needs for its pager."""

    draw: int | float
    records_total: int
    records_filtered: int
    data: list[dict[str, Any]]

    def to_dict(self) -> dict[str, Any]:
        """Return the DataTables wire shape (camelCase keys)."""
        return {
            "draw": self.draw,
            "recordsTotal": self.records_total,
            "recordsFiltered": self.records_filtered,
            "data": self.data,
        }


__all__ = ["PaginatedResponse"]

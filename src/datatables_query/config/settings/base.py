"""Config settings – Settings base class and DatatablesSettings."""
from __future__ import annotations

import dataclasses
import logging

from datatables_query.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class DatatablesSettings(Settings):
    """Where the DataTables collection lives and how queries are run.

    Read from ``DATATABLES_*`` environment variables, e.g.
    ``DATATABLES_DATABASE=app DATATABLES_COLLECTION=users``.
    """

    _prefix: dataclasses.ClassVar[str] = "DATATABLES"

    database: str
    collection: str
    mongo_url: str = "mongodb://localhost:27017"
    concurrent_queries: bool = False
    log_level: str = "INFO"
    json_logs: bool = True

    def _validate(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "not a logging level name")
        if not self.database:
            raise InvalidSettingValueError("database", self.database, "must not be empty")
        if not self.collection:
            raise InvalidSettingValueError("collection", self.collection, "must not be empty")


__all__ = ["DatatablesSettings", "Settings"]

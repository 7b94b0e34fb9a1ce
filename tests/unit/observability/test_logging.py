"""Unit tests for logging configuration and processors."""
from __future__ import annotations

import asyncio
import json
import logging
import re
from typing import Any

import pytest
import structlog

from datatables_query import DatatablesQuery
from datatables_query.config import DatatablesSettings
from datatables_query.observability.logging import (
    JsonLoggerFactory,
    RegexPatternProcessor,
    configure_logging,
    get_logger,
)
from datatables_query.testing import InMemoryDocumentStore


@pytest.fixture(autouse=True)
def _reset_logging() -> Any:
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)


class TestRegexPatternProcessor:
    def test_renders_nested_patterns(self) -> None:
        pattern = re.compile("bob", re.IGNORECASE)
        event = {"event": "q", "filter": {"$or": [{"name": pattern}, {"email": pattern}]}}
        out = RegexPatternProcessor()(None, "debug", event)
        assert out["filter"] == {"$or": [{"name": "/bob/i"}, {"email": "/bob/i"}]}

    def test_case_sensitive_pattern_has_no_flag(self) -> None:
        out = RegexPatternProcessor()(None, "info", {"f": re.compile("x")})
        assert out["f"] == "/x/"

    def test_other_values_untouched(self) -> None:
        event = {"event": "page", "returned": 3, "sort": "-name"}
        assert RegexPatternProcessor()(None, "info", dict(event)) == event


class TestJsonLoggerFactory:
    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.DEBUG)
        get_logger("tests").info("datatables.page", records_total=5, filter={"name": re.compile("a", re.I)})
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "datatables.page"
        assert payload["records_total"] == 5
        assert payload["filter"] == {"name": "/a/i"}
        assert payload["level"] == "info"
        assert "timestamp" in payload

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.WARNING)
        get_logger("tests").debug("hidden")
        assert capsys.readouterr().err == ""

    def test_configure_from_settings(self) -> None:
        configure_logging(DatatablesSettings(database="app", collection="users", log_level="debug", json_logs=False))
        assert logging.getLogger().level == logging.DEBUG

    def test_get_logger_binds_values(self) -> None:
        JsonLoggerFactory.configure(logging.INFO)
        logger = get_logger("tests", collection="users")
        assert logger is not None


class TestQueryEvents:
    def test_run_logs_query_and_page(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.DEBUG)
        store = InMemoryDocumentStore([{"_id": 1, "name": "Alice"}, {"_id": 2, "name": "Bob"}])
        params = {
            "draw": "1",
            "start": "0",
            "length": "10",
            "search": {"value": "ali"},
            "columns": [{"data": "name", "searchable": "true", "orderable": "true"}],
            "order": [{"column": "0", "dir": "asc"}],
        }
        asyncio.run(DatatablesQuery(store).run(params))

        events = [json.loads(line) for line in capsys.readouterr().err.strip().splitlines()]
        by_name = {e["event"]: e for e in events}
        assert by_name["datatables.query"]["filter"] == {"name": "/ali/i"}
        assert by_name["datatables.query"]["sort"] == "name"
        assert by_name["datatables.page"]["records_filtered"] == 1
        assert by_name["datatables.page"]["returned"] == 1

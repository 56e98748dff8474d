from __future__ import annotations

import json
import logging

from hwsampler.logging import JsonFormatter


def test_json_formatter_copies_structured_extras() -> None:
    record = logging.LogRecord("hwsampler.collectors.base", logging.WARNING, __file__, 1, "sample skipped: %s", ("gone",), None)
    record.collector = "cpu"
    record.code = "source_unavailable"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["message"] == "sample skipped: gone"
    assert payload["collector"] == "cpu"
    assert payload["code"] == "source_unavailable"
    assert "interface" not in payload

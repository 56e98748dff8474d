"""Tests for status formatters."""

from __future__ import annotations

import json

import pytest

from hwsampler.formatters import JsonFormatter, TableFormatter, get_formatter
from hwsampler.state import Status

STATUS = Status(
    cpu_name="Intel(R) Core(TM) i7",
    cpu_core_count=8,
    interface_name="eth0",
    total_memory_bytes=16 * 1024**3,
    used_memory_bytes=4 * 1024**3,
    cpu_usage_percent=83.3333,
    rx_bits_per_second=1_500_000,
    tx_bits_per_second=250_000,
)


def test_get_formatter() -> None:
    assert isinstance(get_formatter("json"), JsonFormatter)
    assert isinstance(get_formatter("table"), TableFormatter)
    with pytest.raises(ValueError):
        get_formatter("xml")


def test_table_line() -> None:
    line = TableFormatter().format(STATUS)
    assert line == "CPU used: 83%  RAM used: 25%  Rx: 1500 Kbps   Tx: 250 Kbps"


def test_table_header() -> None:
    header = TableFormatter().header(STATUS)
    assert "Intel(R) Core(TM) i7 (8 cores)" in header
    assert "16.00 GB" in header
    assert "eth0" in header


def test_json_line() -> None:
    fmt = JsonFormatter()
    payload = json.loads(fmt.format(STATUS))
    assert payload["cpu_usage_percent"] == 83.33
    assert payload["memory_percent"] == 25.0
    assert payload["rx_bits_per_second"] == 1_500_000
    assert payload["interface_name"] == "eth0"
    assert "timestamp" in payload
    assert fmt.header(STATUS) is None

"""JSON formatter."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import UTC, datetime

from ..state import Status
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Format status as a single JSON line."""

    def format(self, status: Status) -> str:
        payload = {
            "timestamp": datetime.now(UTC).isoformat(timespec="seconds"),
            **asdict(status),
            "memory_percent": round(status.memory_percent, 2),
        }
        payload["cpu_usage_percent"] = round(status.cpu_usage_percent, 2)
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))

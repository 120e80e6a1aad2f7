"""Structured logging of event delivery outcomes."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from core.event_bus import EventBus
from core.event_channel import EventChannel, SendResult


class DeliveryLogger:
    """Records each ``SendResult`` to the log and, optionally, as JSON lines."""

    def __init__(self, log_path: Path | None = None) -> None:
        self.log_path = log_path
        if self.log_path is not None:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self.logger = logging.getLogger("learnos.delivery")

    def attach(self, event_bus: EventBus) -> None:
        for topic in EventChannel.TOPICS:
            event_bus.subscribe(topic, self.record)

    @staticmethod
    def to_record(result: SendResult) -> dict[str, Any]:
        return {
            "timestamp": datetime.now(UTC).isoformat(),
            "status": result.status.value,
            "app": result.event.app,
            "type": result.event.type.value,
            "session_id": result.event.session_id,
            "error": result.error,
        }

    def record(self, result: SendResult) -> None:
        """Append one delivery record."""
        record = self.to_record(result)
        line = json.dumps(record, ensure_ascii=True)
        self.logger.info(line)
        if self.log_path is not None:
            with self.log_path.open("a", encoding="utf-8") as fh:
                fh.write(line + "\n")

"""Interaction event models sent to the personalization backend."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EventType(str, Enum):
    """Closed vocabulary of interaction events."""

    OPEN_APP = "open_app"
    ACTION = "action"
    DISCOVERY = "discovery"
    MILESTONE = "milestone"


class EventDraft(BaseModel):
    """An event as emitted by an app, before the session id is attached."""

    model_config = ConfigDict(frozen=True)

    app: str
    type: EventType
    payload: dict[str, Any] = Field(default_factory=dict)

    def stamp(self, session_id: str) -> Event:
        """Attach the session id, forming a complete event."""
        return Event(app=self.app, type=self.type, payload=self.payload, session_id=session_id)


class Event(EventDraft):
    """A complete event, ready for ``POST /event``."""

    session_id: str

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

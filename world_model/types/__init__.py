"""Typed desktop payload models."""

from world_model.types.app_descriptor import DEFAULT_SUGGESTIONS, AppDescriptor, SuggestionResponse
from world_model.types.events import Event, EventDraft, EventType
from world_model.types.session import Session

__all__ = [
    "AppDescriptor",
    "DEFAULT_SUGGESTIONS",
    "Event",
    "EventDraft",
    "EventType",
    "Session",
    "SuggestionResponse",
]

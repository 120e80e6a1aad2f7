"""Desktop state schema."""

from __future__ import annotations

from dataclasses import dataclass, field

from world_model.types import DEFAULT_SUGGESTIONS, AppDescriptor


@dataclass
class DesktopState:
    """Shell-owned snapshot: the suggestion list and the single open app."""

    suggestions: tuple[AppDescriptor, ...] = field(default_factory=lambda: DEFAULT_SUGGESTIONS)
    open_app: AppDescriptor | None = None

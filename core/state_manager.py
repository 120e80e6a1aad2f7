"""Shell-level state holder for suggestions and the open window."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from world_model.desktop_state import DesktopState
from world_model.types import AppDescriptor

logger = logging.getLogger("learnos.state")


class StateManager:
    """Wraps desktop state and exposes the only mutation paths.

    ``replace_suggestions`` is the single writer of the suggestion list and
    ``set_open_app`` the single writer of the open-app slot.
    """

    def __init__(self, suggestions: Iterable[AppDescriptor] | None = None) -> None:
        self.state = DesktopState()
        if suggestions is not None:
            self.state.suggestions = tuple(suggestions)

    @property
    def suggestions(self) -> tuple[AppDescriptor, ...]:
        return self.state.suggestions

    @property
    def open_app(self) -> AppDescriptor | None:
        return self.state.open_app

    def replace_suggestions(self, suggestions: Iterable[AppDescriptor]) -> None:
        """Swap the whole suggestion list at once."""
        self.state.suggestions = tuple(suggestions)
        logger.debug("Suggestions replaced: %s", [app.id for app in self.state.suggestions])

    def set_open_app(self, app: AppDescriptor | None) -> None:
        self.state.open_app = app

    def find_suggestion(self, app_id: str) -> AppDescriptor | None:
        for app in self.state.suggestions:
            if app.id == app_id:
                return app
        return None

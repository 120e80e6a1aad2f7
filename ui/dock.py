"""Dock: launch targets projected from the current suggestion list."""

from __future__ import annotations

from dataclasses import dataclass

from core.state_manager import StateManager
from os_controller.window_manager import WindowManager
from ui.icons import Icon, resolve_icon
from world_model.types import AppDescriptor


@dataclass(frozen=True)
class DockItem:
    """One rendered launch target."""

    app: AppDescriptor
    icon: Icon

    @property
    def title(self) -> str:
        return self.app.title

    @property
    def hint(self) -> str | None:
        return self.app.hint


class Dock:
    """Stateless view over the suggestion list plus the launch callback."""

    def __init__(self, state: StateManager, window_manager: WindowManager) -> None:
        self.state = state
        self.window_manager = window_manager

    @property
    def visible(self) -> bool:
        return not self.window_manager.is_open

    def items(self) -> list[DockItem]:
        return [DockItem(app=app, icon=resolve_icon(app.icon)) for app in self.state.suggestions]

    def hint(self, app_id: str) -> str | None:
        """Hint shown when an item is hovered or focused."""
        return self._lookup(app_id).hint

    def launch(self, app_id: str) -> AppDescriptor:
        """Open the suggested app with this id."""
        app = self._lookup(app_id)
        self.window_manager.open(app)
        return app

    def render(self) -> list[str]:
        items = self.items()
        if not items:
            return ["(dock is empty)"]
        return [
            f"{index}. {item.icon.glyph} {item.title}"
            for index, item in enumerate(items, start=1)
        ]

    def _lookup(self, app_id: str) -> AppDescriptor:
        app = self.state.find_suggestion(app_id)
        if app is None:
            raise KeyError(f"'{app_id}' is not in the dock")
        return app

"""Single-slot window manager for the desktop shell."""

from __future__ import annotations

import logging

from core.state_manager import StateManager
from sandboxes.base_sandbox import BaseSandbox, SendFn
from world_model.app_state_registry import AppStateRegistry
from world_model.types import AppDescriptor, EventDraft, EventType


class WindowManager:
    """Tracks the one open app, if any, and its mounted sandbox.

    ``open`` reports ``open_app`` before the window is shown. Opening while
    another app is open replaces it directly, without a close event.
    """

    def __init__(self, state: StateManager, registry: AppStateRegistry, send: SendFn) -> None:
        self.state = state
        self.registry = registry
        self.send = send
        self.sandbox: BaseSandbox | None = None
        self.logger = logging.getLogger("learnos.window_manager")

    @property
    def open_app(self) -> AppDescriptor | None:
        return self.state.open_app

    @property
    def is_open(self) -> bool:
        return self.state.open_app is not None

    def open(self, app: AppDescriptor) -> None:
        """Open ``app``, replacing whatever is open."""
        self.send(EventDraft(app=app.id, type=EventType.OPEN_APP))

        current = self.state.open_app
        keep_sandbox = current is not None and current.id == app.id
        self.state.set_open_app(app)
        if keep_sandbox:
            self.logger.debug("Re-opened %s; keeping its state", app.id)
            return

        self.sandbox = self.registry.create(app.id, self.send)
        if self.sandbox is None:
            self.logger.info("No sandbox registered for '%s'; showing an empty window.", app.id)
            return
        self.sandbox.mount()

    def close(self) -> None:
        """Close the open window; a no-op when nothing is open."""
        if self.state.open_app is None:
            return
        self.logger.debug("Closed %s", self.state.open_app.id)
        self.state.set_open_app(None)
        self.sandbox = None

"""Registry mapping dock app ids to sandbox widgets."""

from __future__ import annotations

from sandboxes.base_sandbox import BaseSandbox, SendFn
from sandboxes.forces import Forces
from sandboxes.number_play import NumberPlay
from sandboxes.pattern_garden import PatternGarden

SandboxFactory = type[BaseSandbox]


class AppStateRegistry:
    """Tracks which sandbox backs each launchable app id."""

    def __init__(self) -> None:
        self._apps: dict[str, SandboxFactory] = {}

    def register(self, app_id: str, factory: SandboxFactory) -> None:
        self._apps[app_id] = factory

    def create(self, app_id: str, send: SendFn) -> BaseSandbox | None:
        """Build a fresh sandbox for an app id, or ``None`` when none is registered."""
        factory = self._apps.get(app_id)
        if factory is None:
            return None
        return factory(send)


def build_default_registry() -> AppStateRegistry:
    """Register the built-in sandboxes under their dock ids."""
    registry = AppStateRegistry()
    registry.register("NumberPlay", NumberPlay)
    registry.register("PatternGarden", PatternGarden)
    registry.register("Forces", Forces)
    return registry

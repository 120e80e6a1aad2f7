"""Top-level desktop orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import httpx

from core.event_bus import EventBus
from core.event_channel import EventChannel
from core.policy_runtime import load_effective_config, resolve_delivery_log_path
from core.session import SessionIdentity
from core.state_manager import StateManager
from os_controller.window_manager import WindowManager
from telemetry.delivery_logger import DeliveryLogger
from ui.dock import Dock
from ui.window import render_window
from world_model.app_state_registry import AppStateRegistry, build_default_registry

HEADLINE = "Play your way to understanding"
TAGLINE = "Open any app. Tinker. Patterns will emerge. The desktop adapts to you."


@dataclass
class Desktop:
    """Holds the wired desktop components for one visit."""

    config: dict[str, Any]
    state: StateManager
    identity: SessionIdentity
    event_bus: EventBus
    channel: EventChannel
    registry: AppStateRegistry
    window_manager: WindowManager
    dock: Dock

    def render(self) -> list[str]:
        """Whole screen: the open window, or the dock when nothing is open."""
        lines = ["LearnOS" + " " * 24 + "Follow your curiosity", ""]
        if self.window_manager.is_open:
            return lines + render_window(self.window_manager)
        lines += [HEADLINE, TAGLINE, ""]
        lines += self.dock.render()
        lines += ["", "* Adaptive mode"]
        return lines

    async def aclose(self) -> None:
        await self.channel.aclose()


class Orchestrator:
    """Creates and wires desktop components."""

    def __init__(
        self,
        root: Path | None = None,
        user_config: Path | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()
        self.user_config = user_config
        self.base_url = base_url
        self.transport = transport

    def build(self) -> Desktop:
        config = load_effective_config(self.root, self.user_config)
        backend_cfg = config.get("backend", {})
        if self.base_url:
            backend_cfg = {**backend_cfg, "base_url": self.base_url}
            config["backend"] = backend_cfg

        state = StateManager()
        identity = SessionIdentity()
        event_bus = EventBus()
        DeliveryLogger(resolve_delivery_log_path(self.root, config)).attach(event_bus)

        timeout = backend_cfg.get("timeout_seconds")
        channel = EventChannel(
            state=state,
            identity=identity,
            base_url=str(backend_cfg["base_url"]),
            event_bus=event_bus,
            timeout_seconds=float(timeout) if timeout is not None else None,
            transport=self.transport,
        )
        registry = build_default_registry()
        window_manager = WindowManager(state=state, registry=registry, send=channel.send)
        dock = Dock(state=state, window_manager=window_manager)

        return Desktop(
            config=config,
            state=state,
            identity=identity,
            event_bus=event_bus,
            channel=channel,
            registry=registry,
            window_manager=window_manager,
            dock=dock,
        )

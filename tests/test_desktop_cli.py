"""Desktop wiring and terminal command tests."""

from __future__ import annotations

import json
import threading
from pathlib import Path

import httpx
import pytest
import typer
from typer.testing import CliRunner

from core.event_channel import DeliveryStatus, SendResult
from core.orchestrator import Desktop, Orchestrator
from ui.cli import commands
from ui.cli.cli import app
from world_model.types import EventDraft, EventType

SUGGESTIONS = {"suggestions": [{"id": "PatternGarden", "title": "Pattern Garden", "icon": "Grid"}]}


class Backend:
    def __init__(self) -> None:
        self.events: list[dict] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.method == "POST":
            self.events.append(json.loads(request.content))
            return httpx.Response(204)
        return httpx.Response(200, json=SUGGESTIONS)


def _desktop(tmp_path: Path, backend: Backend) -> Desktop:
    return Orchestrator(root=tmp_path, transport=httpx.MockTransport(backend)).build()


@pytest.mark.asyncio
async def test_number_play_round_trip_updates_dock(tmp_path: Path) -> None:
    backend = Backend()
    desktop = _desktop(tmp_path, backend)
    assert "1. [+] Number Play" in desktop.render()

    assert commands.execute(desktop, "open 1") == ["Opened Number Play"]
    commands.execute(desktop, "a 3")
    commands.execute(desktop, "b 4")
    assert "  = 7" in desktop.render()

    commands.execute(desktop, "close")
    await desktop.channel.drain()

    assert [(e["app"], e["type"]) for e in backend.events] == [
        ("NumberPlay", "open_app"),
        ("NumberPlay", "action"),
    ]
    assert backend.events[1]["payload"] == {"operation": "add", "values": [3, 4]}
    assert desktop.render()[-3] == "1. [#] Pattern Garden"
    await desktop.aclose()


@pytest.mark.asyncio
async def test_commands_by_id_and_errors(tmp_path: Path) -> None:
    desktop = _desktop(tmp_path, Backend())

    assert commands.execute(desktop, "hint Forces") == ["Find equilibrium"]
    assert commands.execute(desktop, "") == []
    with pytest.raises(KeyError):
        commands.execute(desktop, "open 9")
    with pytest.raises(ValueError):
        commands.execute(desktop, "toggle 3")

    commands.execute(desktop, "open PatternGarden")
    assert "toggle <0-24>" in " ".join(commands.help_lines(desktop))
    with pytest.raises(IndexError):
        commands.execute(desktop, "toggle 30")
    commands.execute(desktop, "toggle 12")
    assert desktop.window_manager.sandbox.active == 1
    await desktop.aclose()


def test_cli_dock_lists_default_apps() -> None:
    result = CliRunner().invoke(app, ["dock"])
    assert result.exit_code == 0
    assert "1. NumberPlay: Number Play (Calculator)" in result.output
    assert "3. Forces: Forces Sandbox (Orbit) - Find equilibrium" in result.output


def test_cli_config_show_reads_extra_file(tmp_path: Path) -> None:
    extra = tmp_path / "extra.yaml"
    extra.write_text("backend:\n  timeout_seconds: 2\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["config", "show", "--config", str(extra)])

    assert result.exit_code == 0
    assert json.loads(result.output)["backend"]["timeout_seconds"] == 2


@pytest.mark.asyncio
async def test_input_is_read_on_a_daemon_thread() -> None:
    seen: list[threading.Thread] = []

    def prompt() -> str:
        seen.append(threading.current_thread())
        return "open 1"

    assert await commands.read_line(prompt) == "open 1"
    assert seen[0] is not threading.main_thread()
    assert seen[0].daemon is True


@pytest.mark.asyncio
@pytest.mark.parametrize("interrupt", [typer.Abort, KeyboardInterrupt, EOFError])
async def test_interrupted_prompt_leaves_desktop_cleanly(
    tmp_path: Path, interrupt: type[BaseException], capsys: pytest.CaptureFixture[str]
) -> None:
    desktop = _desktop(tmp_path, Backend())

    def prompt() -> str:
        raise interrupt()

    await commands._run_desktop(desktop, prompt=prompt)

    assert capsys.readouterr().out.rstrip().endswith("bye")
    assert desktop.channel.pending == 0


@pytest.mark.asyncio
async def test_scripted_session_reports_events(tmp_path: Path) -> None:
    backend = Backend()
    desktop = _desktop(tmp_path, backend)
    lines = iter(["open Forces", "left 4", "right 4", "close", "quit"])

    await commands._run_desktop(desktop, prompt=lambda: next(lines))

    assert [(e["app"], e["type"]) for e in backend.events] == [
        ("Forces", "open_app"),
        ("Sandboxes/Forces", "milestone"),
        ("Sandboxes/Forces", "milestone"),
    ]


@pytest.mark.asyncio
async def test_backend_override_wins_over_config(tmp_path: Path) -> None:
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "default.yaml").write_text(
        "backend:\n  base_url: http://from-config.test\n", encoding="utf-8"
    )
    urls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        urls.append(str(request.url))
        return httpx.Response(200, json={})

    desktop = Orchestrator(
        root=tmp_path, base_url="http://override.test/api", transport=httpx.MockTransport(handler)
    ).build()
    await desktop.channel.deliver(EventDraft(app="Forces", type=EventType.OPEN_APP))
    await desktop.aclose()

    assert desktop.config["backend"]["base_url"] == "http://override.test/api"
    assert urls[0] == "http://override.test/api/event"
    assert urls[1].startswith("http://override.test/api/suggest/")


@pytest.mark.asyncio
async def test_null_timeout_disables_request_timeouts(tmp_path: Path) -> None:
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "default.yaml").write_text(
        "backend:\n  timeout_seconds: null\n", encoding="utf-8"
    )
    timeouts: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        timeouts.append(request.extensions["timeout"])
        return httpx.Response(200, json={})

    desktop = Orchestrator(root=tmp_path, transport=httpx.MockTransport(handler)).build()
    await desktop.channel.deliver(EventDraft(app="Forces", type=EventType.OPEN_APP))
    await desktop.aclose()

    assert desktop.config["backend"]["timeout_seconds"] is None
    assert timeouts
    assert all(value is None for timeout in timeouts for value in timeout.values())


def test_launch_without_event_loop_drops_event_and_still_opens(tmp_path: Path) -> None:
    desktop = _desktop(tmp_path, Backend())
    dropped: list[SendResult] = []
    desktop.event_bus.subscribe("event_dropped", dropped.append)

    desktop.dock.launch("Forces")

    assert desktop.window_manager.open_app is not None
    assert desktop.window_manager.open_app.id == "Forces"
    assert [(r.event.type, r.status) for r in dropped] == [
        (EventType.OPEN_APP, DeliveryStatus.DROPPED),
        (EventType.MILESTONE, DeliveryStatus.DROPPED),
    ]
    assert desktop.channel.pending == 0

"""Typer command handlers."""

from __future__ import annotations

import asyncio
import json
import logging
import threading
from collections.abc import Callable
from pathlib import Path

import typer

from core.orchestrator import Desktop, Orchestrator
from core.policy_runtime import load_effective_config
from world_model.types import DEFAULT_SUGGESTIONS

EXIT_WORDS = {"exit", "quit"}


def _desktop(base_url: str | None = None, config_path: Path | None = None) -> Desktop:
    desktop = Orchestrator(user_config=config_path, base_url=base_url).build()
    level = str(desktop.config.get("logging", {}).get("level", "WARNING")).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    return desktop


def _resolve_app_id(desktop: Desktop, target: str) -> str:
    """Accept a dock position (1-based) or an app id."""
    if target.isdigit():
        items = desktop.dock.items()
        position = int(target)
        if not 1 <= position <= len(items):
            raise KeyError(f"No dock item at position {position}")
        return items[position - 1].app.id
    return target


def help_lines(desktop: Desktop) -> list[str]:
    if not desktop.window_manager.is_open:
        return [
            "open <n|id>   launch an app from the dock",
            "hint <n|id>   show an app's hint",
            "quit          leave the desktop",
        ]
    lines = ["close         close the window"]
    sandbox = desktop.window_manager.sandbox
    if sandbox is not None:
        lines += [f"{usage:<13} {text}" for usage, text in sandbox.commands().items()]
    lines.append("quit          leave the desktop")
    return lines


def execute(desktop: Desktop, line: str) -> list[str]:
    """Apply one line of user input to the desktop and return feedback lines."""
    command, _, argument = line.strip().partition(" ")
    command = command.lower()
    argument = argument.strip()
    if not command:
        return []
    if command == "help":
        return help_lines(desktop)

    if not desktop.window_manager.is_open:
        if command == "open":
            app = desktop.dock.launch(_resolve_app_id(desktop, argument))
            return [f"Opened {app.title}"]
        if command == "hint":
            hint = desktop.dock.hint(_resolve_app_id(desktop, argument))
            return [hint or "(no hint)"]
        raise ValueError(f"Unknown command: {command}. Try 'help'.")

    if command == "close":
        desktop.window_manager.close()
        return []
    sandbox = desktop.window_manager.sandbox
    if sandbox is None:
        raise ValueError("This window has nothing to interact with. Try 'close'.")
    sandbox.handle(command, argument)
    return []


def _prompt_line() -> str:
    return typer.prompt("learnos", default="", show_default=False)


async def read_line(prompt: Callable[[], str] = _prompt_line) -> str:
    """Read one line on a daemon thread.

    An interrupted wait leaves the thread blocked in ``input()``; being a
    daemon, it never holds up interpreter exit.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[str] = loop.create_future()

    def resolve(result: str | None, error: BaseException | None) -> None:
        if future.done():
            return
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(result or "")

    def worker() -> None:
        try:
            line = prompt()
        except BaseException as exc:
            outcome: tuple[str | None, BaseException | None] = (None, exc)
        else:
            outcome = (line, None)
        try:
            loop.call_soon_threadsafe(resolve, *outcome)
        except RuntimeError:
            # Loop already closed; nobody is waiting for this line.
            pass

    threading.Thread(target=worker, name="learnos-input", daemon=True).start()
    return await future


async def _run_desktop(desktop: Desktop, prompt: Callable[[], str] = _prompt_line) -> None:
    try:
        while True:
            typer.echo("\n".join(desktop.render()))
            try:
                line = await read_line(prompt)
            except (typer.Abort, EOFError, KeyboardInterrupt, asyncio.CancelledError):
                break
            if line.strip().lower() in EXIT_WORDS:
                break
            try:
                feedback = execute(desktop, line)
            except (KeyError, IndexError, ValueError) as exc:
                feedback = [f"! {exc}"]
            for message in feedback:
                typer.echo(message)
    finally:
        await desktop.aclose()
    typer.echo("bye")


def run(base_url: str | None = None, config_path: Path | None = None) -> None:
    """Run the interactive desktop until the user quits."""
    try:
        asyncio.run(_run_desktop(_desktop(base_url=base_url, config_path=config_path)))
    except KeyboardInterrupt:
        typer.echo("bye")


def config_show(config_path: Path | None = None) -> None:
    """Show effective runtime config."""
    orchestrator = Orchestrator(user_config=config_path)
    config = load_effective_config(orchestrator.root, config_path)
    typer.echo(json.dumps(config, indent=2))


def dock_show() -> None:
    """Print the default dock, as shown before any personalization."""
    for index, app in enumerate(DEFAULT_SUGGESTIONS, start=1):
        typer.echo(f"{index}. {app.id}: {app.title} ({app.icon}) - {app.hint}")

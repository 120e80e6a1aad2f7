"""CLI entrypoint for the LearnOS desktop."""

from __future__ import annotations

from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="LearnOS adaptive learning desktop")
config_app = typer.Typer(help="Configuration commands")


@app.command("run")
def run_cmd(
    backend: str | None = typer.Option(None, "--backend", help="Personalization backend base URL"),
    config: Path | None = typer.Option(None, "--config", help="Extra YAML config file"),
) -> None:
    """Open the interactive desktop."""
    commands.run(base_url=backend, config_path=config)


@app.command("dock")
def dock_cmd() -> None:
    """Show the default dock."""
    commands.dock_show()


@config_app.command("show")
def config_show_cmd(
    config: Path | None = typer.Option(None, "--config", help="Extra YAML config file"),
) -> None:
    """Show effective configuration."""
    commands.config_show(config_path=config)


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()

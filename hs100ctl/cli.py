"""Typer CLI entrypoint."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from hs100ctl import __version__
from hs100ctl.core.catalog import action_names
from hs100ctl.core.config import DEFAULT_CONFIG_PATH, load_config
from hs100ctl.core.dispatcher import Dispatcher
from hs100ctl.core.errors import Hs100Error

APP_NAME = "hs100ctl"

app = typer.Typer(help="Control TP-Link HS100/HS110 smart plugs on the local network")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        format="%(levelname).1s%(asctime)s %(name)s]  %(message)s",
        datefmt="%H:%M:%S",
        level=logging.DEBUG if debug else logging.WARNING,
    )


@app.command()
def main(
    config: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Configuration file: /path/to/file.yaml"),
    do: str | None = typer.Option(
        None,
        "--do",
        help=f"Action: {', '.join(action_names())} (default: config 'do' or 'on')",
    ),
    device: str | None = typer.Option(None, "--device", help="Device name from config, or 'all'"),
    all_devices: bool = typer.Option(False, "--all", help="Send the action to every configured device"),
    debug: bool = typer.Option(False, "--debug", help="Display debugging information"),
    displayconfig: bool = typer.Option(False, "--displayconfig", help="Display configuration"),
    version: bool = typer.Option(False, "--version", help="Display version information"),
) -> None:
    """Send an action to one or all configured smart plugs."""
    if version:
        typer.echo(f"{APP_NAME} {__version__}")
        return

    _configure_logging(debug)
    try:
        settings = load_config(config)
        if displayconfig:
            for key, value in sorted(settings.settings().items()):
                typer.echo(f"CONFIG: {key} : {value}")
            return

        dispatcher = Dispatcher(settings, debug=debug)
        devices = dispatcher.resolve_devices(device, all_devices=all_devices)
        exit_code = dispatcher.run(do or settings.action, devices)
    except Hs100Error as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None

    if exit_code:
        raise typer.Exit(code=exit_code)


def run() -> None:
    app()


if __name__ == "__main__":
    run()

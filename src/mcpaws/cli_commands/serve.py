"""``mcpaws serve`` — run the server on stdin/stdout."""

from __future__ import annotations

import asyncio
import logging
import sys

import click

from mcpaws.cli_commands._output import console


@click.command()
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), default=None, help="Settings YAML file.")
@click.option("--verbose", "-v", is_flag=True, help="Log at DEBUG level (to stderr).")
@click.option("--telemetry", is_flag=True, help="Export request spans to stderr.")
def serve(config_path: str | None, verbose: bool, telemetry: bool) -> None:
    """Serve MCP requests over stdio until stdin closes."""
    from mcpaws.config.errors import ConfigError
    from mcpaws.config.loader import load_settings
    from mcpaws.config.models import TelemetrySettings
    from mcpaws.runner import ServerRunner

    try:
        settings = load_settings(config_path)
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if telemetry:
        if settings.telemetry is None:
            settings.telemetry = TelemetrySettings(enabled=True)
        else:
            settings.telemetry.enabled = True

    runner = ServerRunner(settings)
    try:
        asyncio.run(runner.run())
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)
    except KeyboardInterrupt:
        pass

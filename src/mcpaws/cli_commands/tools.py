"""``mcpaws tools`` — show the tools a server would expose."""

from __future__ import annotations

import sys

import click

from mcpaws.cli_commands._output import console, print_tools_json, print_tools_table


@click.command()
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), default=None, help="Settings YAML file.")
@click.option("--json", "as_json", is_flag=True, help="Print the tools/list payload as JSON.")
def tools(config_path: str | None, as_json: bool) -> None:
    """List the configured tools and their input schemas."""
    from mcpaws.config.errors import ConfigError
    from mcpaws.config.loader import load_settings
    from mcpaws.runner import ServerRunner

    try:
        server = ServerRunner(load_settings(config_path)).build()
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

    configured = server.registry.list()
    if not configured:
        console.print("[yellow]No tools configured.[/yellow]")
        return

    if as_json:
        print_tools_json(configured)
    else:
        print_tools_table(configured)

"""mcpaws CLI entrypoint."""

from __future__ import annotations

import click

from mcpaws import __version__


@click.group()
@click.version_option(version=__version__, prog_name="mcpaws")
def main() -> None:
    """mcpaws — a Model Context Protocol tool server."""


# Register subcommands
from mcpaws.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()

"""archive-mcp CLI entrypoint."""

from __future__ import annotations

import click

from archive_mcp import __version__


@click.group()
@click.version_option(version=__version__, prog_name="archive-mcp")
def main() -> None:
    """archive-mcp — MCP server for saving conversations."""


# Register subcommands
from archive_mcp.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()

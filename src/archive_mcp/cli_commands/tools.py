"""``archive-mcp tools`` — list the tools this server advertises."""

from __future__ import annotations

import click

from archive_mcp.cli_commands._output import print_tools_table


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Print the tools/list payload as JSON.")
def tools(as_json: bool) -> None:
    """Show the tools returned by ``tools/list``."""
    from archive_mcp.server.app import builtin_descriptors

    print_tools_table(builtin_descriptors(), as_json=as_json)

"""Shared CLI output formatters."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from archive_mcp.config import ServerConfig
    from archive_mcp.protocol.models import ToolDescriptor

console = Console()


def print_banner(config: ServerConfig) -> None:
    """Print the listening addresses before the server starts."""
    base = f"http://{config.host}:{config.port}"
    console.print(f"[green]▶[/green] MCP Server listening on {base}")
    console.print(f"[green]▶[/green] Health check: {base}/mcp/health")
    console.print(f"[green]▶[/green] MCP endpoint: {base}/mcp")
    console.print(f"  Conversation store: {config.store_url}")


def print_tools_table(descriptors: list[ToolDescriptor], *, as_json: bool = False) -> None:
    """Pretty-print tool descriptors as a table, or as a ``tools/list`` payload."""
    if as_json:
        payload = {"tools": [d.model_dump(by_alias=True) for d in descriptors]}
        console.print_json(json.dumps(payload))
        return

    table = Table(title="Registered Tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Required")
    table.add_column("Description")

    for descriptor in descriptors:
        required = descriptor.input_schema.get("required", [])
        table.add_row(
            descriptor.name,
            ", ".join(required) or "-",
            _truncate(descriptor.description),
        )

    console.print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."

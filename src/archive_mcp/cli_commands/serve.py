"""``archive-mcp serve`` — run the MCP HTTP server."""

from __future__ import annotations

import logging
import sys
from typing import Any

import click
import uvicorn
from dotenv import load_dotenv
from rich.markup import escape

from archive_mcp.cli_commands._output import console, print_banner
from archive_mcp.config import ServerConfig
from archive_mcp.errors import ConfigError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@click.command()
@click.option("--host", default=None, help="Interface to bind (overrides HOST).")
@click.option("--port", "-p", type=click.IntRange(1, 65535), default=None, help="Port to listen on (overrides PORT).")
@click.option("--telemetry", is_flag=True, help="Export trace spans to the console.")
def serve(host: str | None, port: int | None, telemetry: bool) -> None:
    """Start the MCP server.

    Reads BASE_URL (required) and the other settings from the environment or
    a ``.env`` file in the working directory.
    """
    from archive_mcp.server.app import create_app

    load_dotenv()

    try:
        config = ServerConfig.from_env()
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        sys.exit(1)

    overrides: dict[str, Any] = {}
    if host is not None:
        overrides["host"] = host
    if port is not None:
        overrides["port"] = port
    if overrides:
        config = config.model_copy(update=overrides)

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )

    if telemetry or config.otlp_endpoint:
        from archive_mcp.utils.telemetry import configure_telemetry

        try:
            configure_telemetry(export_to_console=telemetry, otlp_endpoint=config.otlp_endpoint)
        except ImportError as exc:
            console.print(f"[red]Telemetry error:[/red] {escape(str(exc))}")
            sys.exit(1)

    app = create_app(config)
    print_banner(config)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())

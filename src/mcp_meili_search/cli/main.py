"""Command line entry point for MCP Meili Search."""

import sys

import typer
from dotenv import load_dotenv
from loguru import logger

from .. import __version__
from .commands.inspect_cmd import inspect
from .commands.serve import serve

app = typer.Typer(
    name="mcp-meili-search",
    help="Meilisearch hybrid search as an MCP tool",
    add_completion=False,
    no_args_is_help=True,
)

app.command("serve")(serve)
app.command("inspect")(inspect)


def _configure_logging(level: str) -> None:
    # stdout belongs to the MCP transport
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name} - {message}",
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mcp-meili-search {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        envvar="MEILI_LOG_LEVEL",
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    ),
    env_file: str | None = typer.Option(
        None, "--env-file", help="Load environment variables from this .env file"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Meilisearch hybrid search MCP server."""
    if env_file:
        load_dotenv(env_file, override=True)
    else:
        load_dotenv()
    _configure_logging(log_level)


if __name__ == "__main__":  # pragma: no cover
    app()

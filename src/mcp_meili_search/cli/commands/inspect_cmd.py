"""Inspect command: show the resolved configuration and index metadata."""

import asyncio

import typer
from rich.table import Table

from ...core.client import IndexMetadata, MeiliSearchClient
from ...core.config import EngineConfig
from ...core.exceptions import ConfigError, UpstreamError
from ...core.guidance import describe_filterable_attribute
from ..output import (
    console,
    print_config,
    print_error,
    print_success,
    print_warning,
)


async def _fetch_metadata(config: EngineConfig) -> IndexMetadata:
    async with MeiliSearchClient(config) as client:
        return await client.get_index_metadata()


def inspect(
    host: str | None = typer.Option(None, "--host", help="Meilisearch server host"),
    api_key: str | None = typer.Option(None, "--api-key", help="Meilisearch API key"),
    index: str | None = typer.Option(None, "--index", help="Meilisearch index name"),
    embedder: str | None = typer.Option(None, "--embedder", help="Embedder to use"),
) -> None:
    """Check connectivity and list the index's filterable attributes."""
    try:
        config = EngineConfig.from_sources(
            host=host, api_key=api_key, index=index, embedder=embedder
        )
    except ConfigError as e:
        print_error(f"Error: {e}")
        raise typer.Exit(1)

    print_config(
        {
            "host": config.host,
            "index": config.index,
            "api_key": config.masked_api_key(),
            "embedder": config.embedder,
            "timeout": f"{config.timeout}s",
        },
        title="Resolved Configuration",
    )
    if not config.embedder:
        print_warning("No embedder configured; hybrid_search calls will fail")

    try:
        metadata = asyncio.run(_fetch_metadata(config))
    except UpstreamError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_success(
        f"Connected to index '{config.index}' "
        f"({len(metadata.filterable_attributes)} filterable attributes)"
    )

    table = Table(title="Filterable Attributes", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Attribute", style="cyan")
    for position, name in enumerate(metadata.filterable_attributes, 1):
        table.add_row(str(position), name)
    console.print(table)
    console.print(
        f"\n[bold]filterable_attribute description:[/bold] "
        f"{describe_filterable_attribute(metadata.filterable_attributes)}"
    )

"""Serve command: run the MCP server over stdio."""

import asyncio

import typer
from loguru import logger

from ...core.config import EngineConfig
from ...core.exceptions import ConfigError, MCPMeiliSearchError
from ...mcp.server import run_mcp_server
from ..output import print_error, print_info


def serve(
    host: str | None = typer.Option(
        None, "--host", help="Meilisearch server host (e.g., http://localhost:7700)"
    ),
    api_key: str | None = typer.Option(None, "--api-key", help="Meilisearch API key"),
    index: str | None = typer.Option(None, "--index", help="Meilisearch index name"),
    embedder: str | None = typer.Option(
        None, "--embedder", help="Embedder to use (e.g., openai)"
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", help="Request timeout in seconds (default: 10)"
    ),
) -> None:
    """Start the hybrid search MCP server on stdio.

    Each setting falls back to MEILI_HOST, MEILI_API_KEY, MEILI_INDEX,
    MEILI_EMBEDDER and MEILI_TIMEOUT when the flag is not given.
    """
    try:
        config = EngineConfig.from_sources(
            host=host, api_key=api_key, index=index, embedder=embedder, timeout=timeout
        )
    except ConfigError as e:
        print_error(f"Error: {e}")
        raise typer.Exit(1)

    print_info(f"Serving index '{config.index}' from {config.host} over stdio")
    try:
        asyncio.run(run_mcp_server(config))
    except KeyboardInterrupt:
        logger.info("MCP server stopped")
    except MCPMeiliSearchError as e:
        print_error(f"Server error: {e}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("MCP server crashed")
        print_error(f"Server error: {e}")
        raise typer.Exit(1)

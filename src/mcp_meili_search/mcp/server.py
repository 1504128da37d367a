"""MCP server implementation for MCP Meili Search."""

import asyncio
import sys
from typing import Any

import orjson
from loguru import logger
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import (
    CallToolResult,
    GetPromptResult,
    Prompt,
    TextContent,
    Tool,
)

from .. import __version__
from ..core.client import IndexMetadata, MeiliSearchClient
from ..core.config import EngineConfig
from ..core.exceptions import MCPMeiliSearchError, SerializationError
from ..core.query import build_query
from .prompts import get_prompt_definitions, render_prompt
from .tool_schemas import HYBRID_SEARCH_TOOL, get_tool_schemas

SERVER_NAME = "Meilisearch Hybrid Search MCP Server"
NO_RESULTS_MESSAGE = "no results found - please try with fewer or different keywords"


def _text_result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=text)],
        isError=is_error,
    )


def serialize_hits(hits: list[dict[str, Any]]) -> str:
    """Encode hits as a JSON array string.

    Raises:
        SerializationError: If a hit holds a value JSON cannot represent
    """
    try:
        return orjson.dumps(hits).decode("utf-8")
    except (orjson.JSONEncodeError, TypeError) as e:
        raise SerializationError(
            f"failed to marshal search result to JSON: {e}"
        ) from e


class MeiliHybridSearchServer:
    """MCP server for Meilisearch hybrid search."""

    def __init__(
        self,
        config: EngineConfig,
        client: MeiliSearchClient | None = None,
    ) -> None:
        """Initialize the MCP server.

        Args:
            config: Resolved engine configuration
            client: Meilisearch client. Created from ``config`` if None.
        """
        self.config = config
        self.client = client or MeiliSearchClient(config)
        self.metadata = IndexMetadata()
        self._initialized = False

    async def initialize(self) -> None:
        """Read index metadata once so tool descriptions match the index.

        Raises:
            UpstreamError: If the index settings cannot be read
        """
        if self._initialized:
            return

        self.metadata = await self.client.get_index_metadata()
        self._initialized = True
        logger.info(
            f"MCP server initialized for index '{self.config.index}' at {self.config.host}"
        )
        if not self.config.embedder:
            logger.warning(
                "No embedder configured; hybrid_search calls will fail until "
                "--embedder or MEILI_EMBEDDER is set"
            )

    async def cleanup(self) -> None:
        """Cleanup resources."""
        await self.client.aclose()
        self._initialized = False

    def get_tools(self) -> list[Tool]:
        """Get available MCP tools."""
        return get_tool_schemas(self.metadata)

    def get_prompts(self) -> list[Prompt]:
        """Get available MCP prompts."""
        return get_prompt_definitions()

    def get_prompt(self, name: str, arguments: dict[str, Any] | None) -> GetPromptResult:
        return render_prompt(name, arguments)

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None
    ) -> CallToolResult:
        """Handle tool calls."""
        if name != HYBRID_SEARCH_TOOL:
            return _text_result(f"Unknown tool: {name}", is_error=True)

        try:
            return await self._hybrid_search(arguments or {})
        except MCPMeiliSearchError as e:
            logger.warning(f"hybrid_search failed ({e.kind}): {e}")
            return _text_result(f"{e.kind}: {e}", is_error=True)

    async def _hybrid_search(self, args: dict[str, Any]) -> CallToolResult:
        """Handle hybrid_search tool call."""
        query = build_query(args, self.config)
        hits = await self.client.search(query)

        if not hits:
            return _text_result(NO_RESULTS_MESSAGE)

        logger.debug(f"hybrid_search returned {len(hits)} hits")
        return _text_result(serialize_hits(hits))


def create_mcp_server(mcp_server: MeiliHybridSearchServer) -> Server:
    """Create and configure the MCP server."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        return mcp_server.get_tools()

    # Arguments are validated by build_query so error kinds stay consistent.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
        """Handle tool calls."""
        return await mcp_server.call_tool(name, arguments)

    @server.list_prompts()
    async def list_prompts() -> list[Prompt]:
        """List available prompts."""
        return mcp_server.get_prompts()

    @server.get_prompt()
    async def get_prompt(
        name: str, arguments: dict[str, str] | None
    ) -> GetPromptResult:
        """Render a prompt."""
        return mcp_server.get_prompt(name, arguments)

    return server


async def run_mcp_server(config: EngineConfig) -> None:
    """Run the MCP server using stdio transport.

    Index metadata is read before the transport starts, so a host or index
    that cannot be reached fails the process instead of the first call.
    """
    mcp_server = MeiliHybridSearchServer(config)

    try:
        await mcp_server.initialize()
        server = create_mcp_server(mcp_server)
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream, write_stream, server.create_initialization_options()
            )
    finally:
        await mcp_server.cleanup()


if __name__ == "__main__":
    try:
        asyncio.run(run_mcp_server(EngineConfig.from_sources()))
    except MCPMeiliSearchError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

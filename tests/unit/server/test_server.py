"""End-to-end tests for the hybrid_search MCP tool handler."""

import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from mcp_meili_search.core.client import IndexMetadata, MeiliSearchClient
from mcp_meili_search.core.exceptions import SerializationError, UpstreamError
from mcp_meili_search.mcp.server import (
    NO_RESULTS_MESSAGE,
    MeiliHybridSearchServer,
    create_mcp_server,
    serialize_hits,
)

SPACE_OPERA = {
    "keywords": "space opera",
    "filterable_attribute": "genre",
    "filter_word": "Science Fiction",
}

TWO_HITS = [
    {"id": 11, "title": "Star Wars", "genre": "Science Fiction", "_rankingScore": 0.97},
    {"id": 1891, "title": "Dune", "genre": "Science Fiction", "_rankingScore": 0.93},
]


def _server(config, hits, requests=None) -> MeiliHybridSearchServer:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/settings"):
            return httpx.Response(200, json={"filterableAttributes": ["genre", "author"]})
        if requests is not None:
            requests.append(json.loads(request.content))
        return httpx.Response(200, json={"hits": hits})

    client = MeiliSearchClient(config, transport=httpx.MockTransport(handler))
    return MeiliHybridSearchServer(config, client=client)


class TestHybridSearchTool:
    @pytest.mark.asyncio
    async def test_two_hits(self, config):
        sent: list[dict] = []
        server = _server(config, TWO_HITS, sent)

        result = await server.call_tool("hybrid_search", SPACE_OPERA)

        assert result.isError is False
        assert json.loads(result.content[0].text) == TWO_HITS
        assert sent[0]["filter"] == "genre = 'Science Fiction'"
        await server.cleanup()

    @pytest.mark.asyncio
    async def test_zero_hits(self, config):
        server = _server(config, [])

        result = await server.call_tool("hybrid_search", SPACE_OPERA)

        assert result.isError is False
        assert result.content[0].text == NO_RESULTS_MESSAGE
        await server.cleanup()

    @pytest.mark.asyncio
    async def test_validation_error_is_reported_not_raised(self, config):
        server = _server(config, TWO_HITS)

        result = await server.call_tool("hybrid_search", {"keywords": 7})

        assert result.isError is True
        assert result.content[0].text.startswith("TypeMismatch:")
        await server.cleanup()

    @pytest.mark.asyncio
    async def test_missing_keywords(self, config):
        server = _server(config, TWO_HITS)

        result = await server.call_tool("hybrid_search", None)

        assert result.isError is True
        assert result.content[0].text.startswith("MissingArgument:")
        await server.cleanup()

    @pytest.mark.asyncio
    async def test_missing_embedder(self, config_without_embedder):
        server = _server(config_without_embedder, TWO_HITS)

        result = await server.call_tool("hybrid_search", {"keywords": "x"})

        assert result.isError is True
        assert result.content[0].text.startswith("MissingConfiguration:")
        await server.cleanup()

    @pytest.mark.asyncio
    async def test_upstream_failure(self, config):
        client = MagicMock(spec=MeiliSearchClient)
        client.search = AsyncMock(side_effect=UpstreamError("meilisearch search failed"))
        server = MeiliHybridSearchServer(config, client=client)

        result = await server.call_tool("hybrid_search", {"keywords": "x"})

        assert result.isError is True
        assert result.content[0].text == "UpstreamFailure: meilisearch search failed"

    @pytest.mark.asyncio
    async def test_unknown_tool(self, config):
        server = _server(config, TWO_HITS)

        result = await server.call_tool("delete_index", {})

        assert result.isError is True
        assert "Unknown tool" in result.content[0].text
        await server.cleanup()


class TestInitialization:
    @pytest.mark.asyncio
    async def test_initialize_reads_metadata_into_tools(self, config):
        server = _server(config, [])
        await server.initialize()

        assert server.metadata == IndexMetadata(filterable_attributes=("genre", "author"))
        description = server.get_tools()[0].inputSchema["properties"][
            "filterable_attribute"
        ]["description"]
        assert "Available: genre, author" in description
        await server.cleanup()

    @pytest.mark.asyncio
    async def test_initialize_only_once(self, config):
        client = MagicMock(spec=MeiliSearchClient)
        client.get_index_metadata = AsyncMock(return_value=IndexMetadata(("genre",)))
        server = MeiliHybridSearchServer(config, client=client)

        await server.initialize()
        await server.initialize()

        client.get_index_metadata.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_initialize_failure_propagates(self, config):
        client = MagicMock(spec=MeiliSearchClient)
        client.get_index_metadata = AsyncMock(side_effect=UpstreamError("index not found"))
        server = MeiliHybridSearchServer(config, client=client)

        with pytest.raises(UpstreamError):
            await server.initialize()

    def test_create_mcp_server(self, config):
        client = MagicMock(spec=MeiliSearchClient)
        server = create_mcp_server(MeiliHybridSearchServer(config, client=client))
        assert server.name == "Meilisearch Hybrid Search MCP Server"


class TestSerializeHits:
    def test_round_trips_plain_hits(self):
        assert json.loads(serialize_hits(TWO_HITS)) == TWO_HITS

    def test_unserializable_value(self):
        with pytest.raises(SerializationError):
            serialize_hits([{"id": object()}])

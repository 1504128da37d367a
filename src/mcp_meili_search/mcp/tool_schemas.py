"""MCP tool schema definitions for hybrid search."""

from mcp.types import Tool

from ..core.client import IndexMetadata
from ..core.guidance import describe_filterable_attribute
from ..core.schema import HYBRID_SEARCH_ARGUMENTS, to_json_schema

HYBRID_SEARCH_TOOL = "hybrid_search"


def get_tool_schemas(metadata: IndexMetadata | None = None) -> list[Tool]:
    """Get all MCP tool schema definitions.

    Args:
        metadata: Index metadata read at startup; its filterable attributes
            are listed in the ``filterable_attribute`` description

    Returns:
        List of Tool objects defining available MCP tools
    """
    return [_get_hybrid_search_schema(metadata or IndexMetadata())]


def _get_hybrid_search_schema(metadata: IndexMetadata) -> Tool:
    """Get hybrid_search tool schema."""
    return Tool(
        name=HYBRID_SEARCH_TOOL,
        description="Hybrid search your documents in Meilisearch index",
        inputSchema=to_json_schema(
            HYBRID_SEARCH_ARGUMENTS,
            descriptions={
                "filterable_attribute": describe_filterable_attribute(
                    metadata.filterable_attributes
                )
            },
        ),
    )

"""MCP Meili Search - hybrid Meilisearch search exposed as an MCP tool."""

__version__ = "0.3.0"

from .core.exceptions import MCPMeiliSearchError, MMSError

__all__ = ["MCPMeiliSearchError", "MMSError", "__version__"]

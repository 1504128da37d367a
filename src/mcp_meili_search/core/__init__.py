"""Core request construction, guidance and Meilisearch client."""

from .client import IndexMetadata, MeiliSearchClient
from .config import EngineConfig
from .guidance import describe_filterable_attribute, select_guidance
from .query import HybridSearchQuery, build_query

__all__ = [
    "EngineConfig",
    "HybridSearchQuery",
    "IndexMetadata",
    "MeiliSearchClient",
    "build_query",
    "describe_filterable_attribute",
    "select_guidance",
]

"""Hybrid search query construction and validation."""

from collections.abc import Mapping
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from .config import EngineConfig
from .filters import build_equality_filter
from .schema import (
    DEFAULT_RANKING_SCORE_THRESHOLD,
    DEFAULT_SEMANTIC_RATIO,
    HYBRID_SEARCH_ARGUMENTS,
    decode_arguments,
)


class HybridSearchQuery(BaseModel):
    """A fully validated hybrid search request.

    Instances are frozen and their numeric fields are bounded, so an object
    of this type is always safe to send to Meilisearch.
    """

    model_config = ConfigDict(frozen=True)

    keywords: str = Field(..., min_length=1)
    semantic_ratio: float = Field(default=DEFAULT_SEMANTIC_RATIO, ge=0.0, le=1.0)
    ranking_score_threshold: float = Field(
        default=DEFAULT_RANKING_SCORE_THRESHOLD, ge=0.0, le=0.99
    )
    filter: str | None = None
    embedder: str = Field(..., min_length=1)

    def to_request(self) -> dict[str, Any]:
        """Body for ``POST /indexes/{uid}/search``."""
        body: dict[str, Any] = {
            "q": self.keywords,
            "hybrid": {
                "semanticRatio": self.semantic_ratio,
                "embedder": self.embedder,
            },
            "showRankingScore": True,
            "rankingScoreThreshold": self.ranking_score_threshold,
        }
        if self.filter:
            body["filter"] = self.filter
        return body


def build_query(raw: Mapping[str, Any] | None, config: EngineConfig) -> HybridSearchQuery:
    """Turn raw tool arguments into a ``HybridSearchQuery``.

    Validation order is fixed: keywords, semantic_ratio,
    ranking_score_threshold, the filter pair, then the embedder from
    configuration. The first failure is raised; nothing is returned alongside
    an error.

    Args:
        raw: Argument mapping from the ``hybrid_search`` tool call
        config: Engine configuration (supplies the embedder)

    Returns:
        Validated query

    Raises:
        MissingArgumentError: keywords absent or blank
        TypeMismatchError: keywords not a string, or a bound not a number
        OutOfRangeError: semantic_ratio or ranking_score_threshold out of bounds
        InvalidFilterError: filter attribute/value cannot be expressed safely
        MissingConfigurationError: no embedder configured
    """
    args = decode_arguments(raw, HYBRID_SEARCH_ARGUMENTS)

    filter_expr = build_equality_filter(
        args["filterable_attribute"], args["filter_word"]
    )
    embedder = config.require_embedder()

    query = HybridSearchQuery(
        keywords=args["keywords"],
        semantic_ratio=args["semantic_ratio"],
        ranking_score_threshold=args["ranking_score_threshold"],
        filter=filter_expr,
        embedder=embedder,
    )
    logger.debug(
        f"Built hybrid query: keywords={query.keywords!r} "
        f"ratio={query.semantic_ratio} threshold={query.ranking_score_threshold} "
        f"filter={query.filter!r}"
    )
    return query

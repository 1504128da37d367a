"""Guidance text for the hybrid_search tool and its prompts."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class SearchIntent(StrEnum):
    SEMANTIC = "semantic"
    KEYWORD = "keyword"
    BALANCED = "balanced"


@dataclass(frozen=True)
class Guidance:
    """Ratio recommendation and an illustrative example for one intent."""

    intent: SearchIntent
    ratio_guide: str
    example: str


_GUIDANCE: dict[SearchIntent, Guidance] = {
    SearchIntent.SEMANTIC: Guidance(
        intent=SearchIntent.SEMANTIC,
        ratio_guide="To prioritize semantic search, set semantic_ratio to 0.7 or higher.",
        example=(
            "Example: For the keyword 'database design', documents related to "
            "'data structures' or 'schema design' can also be found."
        ),
    ),
    SearchIntent.KEYWORD: Guidance(
        intent=SearchIntent.KEYWORD,
        ratio_guide="To prioritize keyword search, set semantic_ratio to 0.3 or lower.",
        example=(
            "Example: For the keyword 'Python', only documents containing the "
            "exact word 'Python' will be prioritized."
        ),
    ),
    SearchIntent.BALANCED: Guidance(
        intent=SearchIntent.BALANCED,
        ratio_guide="For balanced results, set semantic_ratio around 0.5.",
        example=(
            "Example: For the keyword 'machine learning', you'll get a mix of "
            "documents containing 'machine learning' and related topics like "
            "'AI' or 'deep learning'."
        ),
    ),
}


def select_guidance(search_type: Any = None) -> Guidance:
    """Return the guidance for ``search_type``.

    Anything that is not exactly ``"semantic"`` or ``"keyword"`` (including
    None and non-string values) gets the balanced guidance.
    """
    if search_type == SearchIntent.SEMANTIC.value:
        return _GUIDANCE[SearchIntent.SEMANTIC]
    if search_type == SearchIntent.KEYWORD.value:
        return _GUIDANCE[SearchIntent.KEYWORD]
    return _GUIDANCE[SearchIntent.BALANCED]


def render_ratio_guide(guidance: Guidance) -> str:
    return (
        "Guide for adjusting the semantic_ratio parameter when using the "
        f"hybrid_search tool:\n\n{guidance.ratio_guide}\n\n{guidance.example}\n\n"
        "Value range: 0.0 (pure keyword) to 1.0 (pure semantic)."
    )


def describe_filterable_attribute(attrs: Sequence[str]) -> str:
    """Description of the ``filterable_attribute`` tool argument.

    Lists the index's filterable attributes in the order the index reports
    them, or falls back to a generic sentence when there are none.
    """
    if not attrs:
        return "Attribute to filter on. Requires filter_word."
    return (
        f"Attribute to filter on (Available: {', '.join(attrs)}). "
        "Requires filter_word."
    )


HYBRID_SEARCH_HELP = """Basic usage of the hybrid_search tool:

1. Basic Search (balanced keyword and semantic):
    hybrid_search(keywords="your search terms")

2. Prioritize Semantic Search:
    hybrid_search(keywords="your search terms", semantic_ratio=0.8)

3. Prioritize Keyword Search:
    hybrid_search(keywords="your search terms", semantic_ratio=0.2)

4. Filtering Results (Optional):
    To filter results based on a specific attribute value, you **must provide both** 'filterable_attribute' and 'filter_word'.
    - 'filterable_attribute': The name of the attribute in your Meilisearch index that is configured as filterable (e.g., "genre", "author", "product_category").
    - 'filter_word': The specific value you want to filter by for the given attribute (e.g., "Drama", "Tolkien", "electronics").

    Syntax:
    hybrid_search(keywords="your search terms", filterable_attribute="attribute_name", filter_word="value_to_filter")

    Examples:
    - Find sci-fi movies:
        hybrid_search(keywords="movie about space", filterable_attribute="genre", filter_word="Science Fiction")
    - Find books by a specific author:
        hybrid_search(keywords="fantasy books", filterable_attribute="author", filter_word="Tolkien")
    - Find documents related to a specific product category:
        hybrid_search(keywords="latest gadgets", filterable_attribute="category", filter_word="Electronics")

5. Result Quality:
    Only hits scoring above ranking_score_threshold (default 0.9, max 0.99) are returned.
    Lower it if you get "no results found".

6. For detailed guidance on semantic_ratio:
    Use: prompts/get(name="adjust_semantic_ratio", arguments={"search_type": "semantic"})
    (Replace "semantic" with "keyword" or omit for balanced guidance)"""

"""MCP prompts guiding the use of the hybrid_search tool."""

from typing import Any

from mcp.types import GetPromptResult, Prompt, PromptArgument, PromptMessage, TextContent

from ..core.guidance import HYBRID_SEARCH_HELP, render_ratio_guide, select_guidance

ADJUST_SEMANTIC_RATIO = "adjust_semantic_ratio"
HYBRID_SEARCH_HELP_PROMPT = "hybrid_search_help"


def get_prompt_definitions() -> list[Prompt]:
    """Prompts advertised in ``prompts/list``."""
    return [
        Prompt(
            name=ADJUST_SEMANTIC_RATIO,
            description="Guide for adjusting the semantic_ratio in Meilisearch hybrid search.",
            arguments=[
                PromptArgument(
                    name="search_type",
                    description=(
                        "The type of search focus ('semantic' or 'keyword'). "
                        "Defaults to 'balanced'."
                    ),
                    required=False,
                )
            ],
        ),
        Prompt(
            name=HYBRID_SEARCH_HELP_PROMPT,
            description="Guide on how to use the hybrid_search tool.",
        ),
    ]


def _text_message(role: str, text: str) -> PromptMessage:
    return PromptMessage(role=role, content=TextContent(type="text", text=text))


def render_prompt(name: str, arguments: dict[str, Any] | None = None) -> GetPromptResult:
    """Render a prompt by name.

    Raises:
        ValueError: If the prompt is unknown
    """
    if name == ADJUST_SEMANTIC_RATIO:
        guidance = select_guidance((arguments or {}).get("search_type"))
        return GetPromptResult(
            description="Meilisearch Hybrid Search Parameter Guide",
            messages=[
                _text_message("user", render_ratio_guide(guidance)),
                _text_message(
                    "assistant",
                    "Understood. I will adjust the semantic_ratio based on the "
                    "search goal to optimize hybrid search results.",
                ),
            ],
        )

    if name == HYBRID_SEARCH_HELP_PROMPT:
        return GetPromptResult(
            description="Basic usage guide for the hybrid_search tool",
            messages=[_text_message("user", HYBRID_SEARCH_HELP)],
        )

    raise ValueError(f"Unknown prompt '{name}'")

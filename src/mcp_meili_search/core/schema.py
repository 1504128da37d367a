"""Declarative argument schema for MCP tool calls.

Each tool argument is described once by an ``ArgumentSpec``. The same specs
drive both the decoding of the raw argument mapping received from the host
and the JSON schema advertised in ``tools/list``, so the bounds a caller is
told about are the bounds that are enforced.
"""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Literal

from .exceptions import MissingArgumentError, OutOfRangeError, TypeMismatchError

ArgumentKind = Literal["string", "number"]

DEFAULT_SEMANTIC_RATIO = 0.5
DEFAULT_RANKING_SCORE_THRESHOLD = 0.9


@dataclass(frozen=True)
class ArgumentSpec:
    """Description of a single tool argument."""

    name: str
    kind: ArgumentKind
    description: str = ""
    required: bool = False
    default: Any = None
    minimum: float | None = None
    maximum: float | None = None


HYBRID_SEARCH_ARGUMENTS: tuple[ArgumentSpec, ...] = (
    ArgumentSpec(
        name="keywords",
        kind="string",
        required=True,
        description=(
            "Placing the most contextually important keywords at the beginning "
            "leads to more relevant results. (Good example: 'v1.13 new features "
            "meilisearch', Bad example: 'new features of meilisearch v1.13')"
        ),
    ),
    ArgumentSpec(
        name="semantic_ratio",
        kind="number",
        default=DEFAULT_SEMANTIC_RATIO,
        minimum=0.0,
        maximum=1.0,
        description=(
            "A value closer to 0 emphasizes keyword search, while closer to 1 "
            "emphasizes vector search. Default is 0.5. If the `_rankingScore` in "
            "results is low, try adjusting to 0.8 or 0.2 to find more relevant "
            "documents"
        ),
    ),
    ArgumentSpec(
        name="ranking_score_threshold",
        kind="number",
        default=DEFAULT_RANKING_SCORE_THRESHOLD,
        minimum=0.0,
        maximum=0.99,
        description=(
            "Returns results with a ranking score bigger than this value. "
            "Default is 0.9."
        ),
    ),
    ArgumentSpec(
        name="filterable_attribute",
        kind="string",
        description="Attribute to filter on. Requires filter_word.",
    ),
    ArgumentSpec(
        name="filter_word",
        kind="string",
        description=(
            "Word or value to filter the attribute by (e.g., 'Drama', 'Tolkien'). "
            "Requires filterable_attribute."
        ),
    ),
)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but JSON true/false is never a ratio
    return isinstance(value, int | float) and not isinstance(value, bool)


def _decode_string(spec: ArgumentSpec, value: Any) -> str | None:
    if value is None:
        if spec.required:
            raise MissingArgumentError(
                spec.name, f"missing required argument: {spec.name}"
            )
        return None

    if not isinstance(value, str):
        if spec.required:
            raise TypeMismatchError(
                spec.name,
                f"argument '{spec.name}' must be a string",
                context={"received_type": type(value).__name__},
            )
        # Optional strings only feed the filter pair, which is silently
        # skipped when incomplete.
        return None

    if spec.required and not value.strip():
        raise MissingArgumentError(
            spec.name, f"argument '{spec.name}' must not be empty"
        )
    return value


def _decode_number(spec: ArgumentSpec, value: Any) -> float | None:
    if value is None:
        if spec.required:
            raise MissingArgumentError(
                spec.name, f"missing required argument: {spec.name}"
            )
        return spec.default

    if not _is_number(value):
        raise TypeMismatchError(
            spec.name,
            f"argument '{spec.name}' must be a number",
            context={"received_type": type(value).__name__},
        )

    number = float(value)
    if not math.isfinite(number):
        raise OutOfRangeError(
            spec.name,
            f"argument '{spec.name}' must be a finite number",
            context={"value": value},
        )
    if (spec.minimum is not None and number < spec.minimum) or (
        spec.maximum is not None and number > spec.maximum
    ):
        raise OutOfRangeError(
            spec.name,
            f"argument '{spec.name}' must be between {spec.minimum} and "
            f"{spec.maximum}, got {value}",
            context={"value": value, "minimum": spec.minimum, "maximum": spec.maximum},
        )
    return number


def decode_arguments(
    raw: Mapping[str, Any] | None, specs: Sequence[ArgumentSpec]
) -> dict[str, Any]:
    """Decode and validate a raw argument mapping against ``specs``.

    Specs are checked in order, so with several bad arguments the first
    declared one is the one reported. Keys not named by any spec are ignored.

    Args:
        raw: Argument mapping as received from the host (may be None)
        specs: Ordered argument specifications

    Returns:
        Dictionary with one entry per spec; absent optional values are the
        spec default (``None`` for strings)

    Raises:
        MissingArgumentError: Required argument absent, null or blank
        TypeMismatchError: Argument of the wrong type
        OutOfRangeError: Number outside its bounds or not finite
    """
    raw = raw or {}
    decoded: dict[str, Any] = {}
    for spec in specs:
        value = raw.get(spec.name)
        if spec.kind == "string":
            decoded[spec.name] = _decode_string(spec, value)
        else:
            decoded[spec.name] = _decode_number(spec, value)
    return decoded


def to_json_schema(
    specs: Sequence[ArgumentSpec],
    descriptions: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Render ``specs`` as a JSON schema object for an MCP ``inputSchema``.

    Args:
        specs: Ordered argument specifications
        descriptions: Per-argument description overrides, used for text that
            depends on live index metadata

    Returns:
        JSON schema dictionary
    """
    descriptions = descriptions or {}
    properties: dict[str, Any] = {}
    for spec in specs:
        prop: dict[str, Any] = {
            "type": spec.kind,
            "description": descriptions.get(spec.name, spec.description),
        }
        if spec.default is not None:
            prop["default"] = spec.default
        if spec.minimum is not None:
            prop["minimum"] = spec.minimum
        if spec.maximum is not None:
            prop["maximum"] = spec.maximum
        properties[spec.name] = prop

    return {
        "type": "object",
        "properties": properties,
        "required": [spec.name for spec in specs if spec.required],
    }

"""Typed exception hierarchy for mcp-meili-search.

Hierarchy
---------
MCPMeiliSearchError (base)
├── ArgumentError                 – tool argument could not be accepted
│   ├── MissingArgumentError      – required argument absent or empty
│   ├── TypeMismatchError         – argument has the wrong JSON type
│   └── OutOfRangeError           – numeric bound violated
│       └── InvalidFilterError    – filter attribute/value not safely expressible
├── ConfigError                   – configuration errors
│   └── MissingConfigurationError – host, index or embedder unresolved
├── SearchError                   – search-time failures
│   └── UpstreamError             – the Meilisearch call itself failed
└── SerializationError            – hits could not be encoded for the response

Every class carries a ``kind`` tag. The MCP boundary reports it alongside the
message so callers can tell a bad argument from a broken index.
"""

from typing import Any

# ── convenience alias so consumers can write ``from mcp_meili_search import MMSError``
MMSError = None  # defined after class below


class MCPMeiliSearchError(Exception):
    """Base exception for MCP Meili Search."""

    kind = "Error"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


# Convenience alias
MMSError = MCPMeiliSearchError  # type: ignore[assignment]


# ── Argument validation ─────────────────────────────────────────────────


class ArgumentError(MCPMeiliSearchError):
    """A tool argument was rejected.

    ``argument`` names the offending parameter as the caller spelled it
    (``semantic_ratio``, not ``semanticRatio``).
    """

    def __init__(
        self,
        argument: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context)
        self.argument = argument


class MissingArgumentError(ArgumentError):
    """Required argument absent, null or blank."""

    kind = "MissingArgument"


class TypeMismatchError(ArgumentError):
    """Argument present but of the wrong type."""

    kind = "TypeMismatch"


class OutOfRangeError(ArgumentError):
    """Numeric argument outside its declared bounds (or not finite)."""

    kind = "OutOfRange"


class InvalidFilterError(OutOfRangeError):
    """Filter attribute or value contains characters that cannot be expressed
    in a Meilisearch filter string."""

    pass


# ── Configuration layer ─────────────────────────────────────────────────


class ConfigError(MCPMeiliSearchError):
    """Configuration / validation errors."""

    kind = "Configuration"


class MissingConfigurationError(ConfigError):
    """A required setting was provided neither as a flag nor as an env var."""

    kind = "MissingConfiguration"


# ── Search layer ────────────────────────────────────────────────────────


class SearchError(MCPMeiliSearchError):
    """Search operation failed."""

    kind = "SearchFailure"


class UpstreamError(SearchError):
    """Meilisearch returned an error or could not be reached.

    ``context["status_code"]`` is set when the server answered with an HTTP
    error status.
    """

    kind = "UpstreamFailure"


# ── Response encoding ───────────────────────────────────────────────────


class SerializationError(MCPMeiliSearchError):
    """Search hits could not be serialized to JSON."""

    kind = "SerializationFailure"

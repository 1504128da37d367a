"""Engine configuration for MCP Meili Search.

The configuration is resolved exactly once, at process start, from command
line flags and environment variables (a flag always wins). The resulting
``EngineConfig`` is frozen and passed explicitly to everything that needs it.
"""

import math
import os

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ConfigError, MissingConfigurationError

# Environment variable names
ENV_HOST = "MEILI_HOST"
ENV_API_KEY = "MEILI_API_KEY"
ENV_INDEX = "MEILI_INDEX"
ENV_EMBEDDER = "MEILI_EMBEDDER"
ENV_TIMEOUT = "MEILI_TIMEOUT"

DEFAULT_TIMEOUT_SECONDS = 10.0


def resolve_setting(flag_value: str | None, env_var: str) -> str | None:
    """Return the flag value if set, otherwise the environment variable.

    Blank strings are treated as unset on both sides, matching how an empty
    ``--host ""`` or ``MEILI_HOST=`` is meant.
    """
    if flag_value is not None and flag_value.strip():
        return flag_value.strip()
    env_value = os.environ.get(env_var)
    if env_value is not None and env_value.strip():
        return env_value.strip()
    return None


class EngineConfig(BaseModel):
    """Immutable snapshot of the server configuration."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(..., min_length=1, description="Meilisearch base URL")
    index: str = Field(..., min_length=1, description="Index uid to search")
    api_key: str | None = Field(default=None, description="Meilisearch API key")
    embedder: str | None = Field(
        default=None, description="Embedder name used for the semantic half"
    )
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)

    @classmethod
    def from_sources(
        cls,
        host: str | None = None,
        api_key: str | None = None,
        index: str | None = None,
        embedder: str | None = None,
        timeout: float | None = None,
    ) -> "EngineConfig":
        """Build the configuration from flag values with env var fallback.

        Raises:
            MissingConfigurationError: If host or index cannot be resolved
            ConfigError: If MEILI_TIMEOUT is not a positive number
        """
        resolved_host = resolve_setting(host, ENV_HOST)
        if resolved_host is None:
            raise MissingConfigurationError(
                "Meilisearch host not provided. "
                f"Use --host flag or set {ENV_HOST} environment variable",
                context={"setting": "host"},
            )

        resolved_index = resolve_setting(index, ENV_INDEX)
        if resolved_index is None:
            raise MissingConfigurationError(
                "Meilisearch index not provided. "
                f"Use --index flag or set {ENV_INDEX} environment variable",
                context={"setting": "index"},
            )

        if timeout is None:
            raw_timeout = resolve_setting(None, ENV_TIMEOUT)
            try:
                timeout = (
                    float(raw_timeout)
                    if raw_timeout is not None
                    else DEFAULT_TIMEOUT_SECONDS
                )
            except ValueError as e:
                raise ConfigError(
                    f"{ENV_TIMEOUT} must be a number of seconds, got {raw_timeout!r}"
                ) from e
        if not math.isfinite(timeout) or timeout <= 0:
            raise ConfigError(f"Timeout must be a positive number, got {timeout}")

        return cls(
            host=resolved_host.rstrip("/"),
            index=resolved_index,
            api_key=resolve_setting(api_key, ENV_API_KEY),
            embedder=resolve_setting(embedder, ENV_EMBEDDER),
            timeout=timeout,
        )

    def require_embedder(self) -> str:
        """Return the configured embedder.

        A missing embedder does not stop the server from starting; it fails
        each search call instead.
        """
        if not self.embedder:
            raise MissingConfigurationError(
                "embedder not provided. "
                f"Use --embedder flag or set {ENV_EMBEDDER} environment variable",
                context={"setting": "embedder"},
            )
        return self.embedder

    def masked_api_key(self) -> str:
        """API key safe for display."""
        if not self.api_key:
            return "(none)"
        if len(self.api_key) <= 8:
            return "****"
        return f"{self.api_key[:4]}…{self.api_key[-4:]}"

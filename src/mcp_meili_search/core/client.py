"""Meilisearch HTTP client used by the MCP server."""

from dataclasses import dataclass
from typing import Any

import httpx
from loguru import logger

from .config import EngineConfig
from .exceptions import UpstreamError
from .query import HybridSearchQuery


@dataclass(frozen=True)
class IndexMetadata:
    """Index settings read once at startup."""

    filterable_attributes: tuple[str, ...] = ()


def _parse_filterable_attributes(raw: Any) -> tuple[str, ...]:
    """Normalize ``filterableAttributes`` from the settings payload.

    Meilisearch returns either plain attribute names or, since v1.14,
    objects carrying ``attributePatterns``. Order is preserved.
    """
    if not isinstance(raw, list):
        return ()

    names: list[str] = []
    for entry in raw:
        if isinstance(entry, str):
            names.append(entry)
        elif isinstance(entry, dict):
            patterns = entry.get("attributePatterns") or []
            names.extend(p for p in patterns if isinstance(p, str))
    return tuple(names)


class MeiliSearchClient:
    """Thin async client for the two Meilisearch endpoints we use.

    - ``GET /indexes/{uid}/settings`` for the filterable attributes
    - ``POST /indexes/{uid}/search`` for hybrid search
    """

    def __init__(
        self,
        config: EngineConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Engine configuration (host, index, api key, timeout)
            transport: Optional httpx transport, mainly for tests
        """
        self.config = config
        headers = {"Content-Type": "application/json"}
        if config.api_key:
            headers["Authorization"] = f"Bearer {config.api_key}"

        self._client = httpx.AsyncClient(
            base_url=config.host,
            headers=headers,
            timeout=config.timeout,
            transport=transport,
        )

    @property
    def index_path(self) -> str:
        return f"/indexes/{self.config.index}"

    async def __aenter__(self) -> "MeiliSearchClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send a request and return the decoded JSON object.

        ``operation`` names the call in error messages.

        Raises:
            UpstreamError: On timeout, transport failure, HTTP error status or
                a body that is not a JSON object
        """
        try:
            response = await self._client.request(method, path, json=json)
            response.raise_for_status()
            data = response.json()

        except httpx.TimeoutException as e:
            logger.error(f"Meilisearch request timed out after {self.config.timeout}s")
            raise UpstreamError(
                f"meilisearch request timed out after {self.config.timeout} seconds"
            ) from e

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            detail = e.response.text
            try:
                body = e.response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                detail = body.get("message", detail)

            if status_code in (401, 403):
                error_msg = "meilisearch rejected the API key. Check --api-key or MEILI_API_KEY"
            elif status_code == 404:
                error_msg = f"meilisearch index '{self.config.index}' not found"
            else:
                error_msg = (
                    f"meilisearch {operation} failed (HTTP {status_code}): {detail}"
                )

            logger.error(error_msg)
            raise UpstreamError(error_msg, context={"status_code": status_code}) from e

        except httpx.HTTPError as e:
            logger.error(f"Meilisearch request failed: {e}")
            raise UpstreamError(f"meilisearch request failed: {e}") from e

        except ValueError as e:
            raise UpstreamError("meilisearch returned a non-JSON response") from e

        if not isinstance(data, dict):
            raise UpstreamError("meilisearch returned an unexpected response shape")
        return data

    async def get_index_metadata(self) -> IndexMetadata:
        """Read the index's filterable attributes."""
        settings = await self._request(
            "settings request", "GET", f"{self.index_path}/settings"
        )
        metadata = IndexMetadata(
            filterable_attributes=_parse_filterable_attributes(
                settings.get("filterableAttributes")
            )
        )
        logger.debug(
            f"Index '{self.config.index}' filterable attributes: "
            f"{list(metadata.filterable_attributes)}"
        )
        return metadata

    async def search(self, query: HybridSearchQuery) -> list[dict[str, Any]]:
        """Run a hybrid search and return the hits."""
        result = await self._request(
            "search", "POST", f"{self.index_path}/search", json=query.to_request()
        )
        hits = result.get("hits")
        if not isinstance(hits, list):
            raise UpstreamError("meilisearch response is missing the 'hits' list")
        return hits

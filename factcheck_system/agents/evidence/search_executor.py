"""Search executor for evidence queries using the Brave Web Search API.

Runs one query at a time under its own timeout and converts results to
EvidenceItem objects. Every failure (HTTP status, network error, timeout,
malformed payload) comes back as a failed Outcome rather than an exception.
No retries are attempted.

Usage:
    from factcheck_system.agents.evidence.search_executor import SearchExecutor

    executor = SearchExecutor()
    outcome = await executor.search("claim text fact check")
    items = outcome.unwrap_or([])
"""

import asyncio
from typing import Optional

import httpx
import structlog

from factcheck_system.config.settings import settings
from factcheck_system.data_management.schemas import EvidenceItem
from factcheck_system.utils.outcome import Outcome

BRAVE_SEARCH_URL = "https://api.search.brave.com/res/v1/web/search"


class SearchExecutor:
    """Execute web searches against Brave with a per-query timeout.

    The httpx client is created lazily and can be injected for tests.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        result_count: Optional[int] = None,
        client: Optional[httpx.AsyncClient] = None,
        endpoint: str = BRAVE_SEARCH_URL,
    ) -> None:
        """Initialize SearchExecutor.

        Args:
            api_key: Brave subscription token. Falls back to settings.
            timeout: Per-query timeout in seconds. Falls back to settings.
            result_count: Results requested per query. Falls back to settings.
            client: Optional shared httpx.AsyncClient.
            endpoint: Search endpoint URL.
        """
        self.api_key = api_key if api_key is not None else settings.brave_api_key
        self.timeout = timeout if timeout is not None else settings.brave_timeout
        self.result_count = result_count or settings.brave_result_count
        self.endpoint = endpoint
        self._client = client
        self._logger = structlog.get_logger().bind(component="SearchExecutor")

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def search(self, query: str) -> Outcome[list[EvidenceItem]]:
        """Run a single search query.

        Args:
            query: Search query text.

        Returns:
            Outcome holding the mapped evidence items, or the failure reason.
        """
        if not self.api_key:
            return Outcome.failure("BRAVE_API_KEY not configured")

        try:
            payload = await asyncio.wait_for(self._request(query), timeout=self.timeout)
        except asyncio.TimeoutError:
            self._logger.error("search_timeout", query=query[:60], timeout=self.timeout)
            return Outcome.failure(f"search timed out after {self.timeout}s")
        except httpx.HTTPStatusError as e:
            self._logger.error(
                "search_failed",
                query=query[:60],
                status=e.response.status_code,
            )
            return Outcome.failure(f"HTTP error {e.response.status_code}")
        except (httpx.RequestError, ValueError) as e:
            # ValueError covers an undecodable JSON body
            self._logger.error("search_error", query=query[:60], error=str(e))
            return Outcome.failure(e)

        items = self._parse_results(payload)
        self._logger.info("search_executed", query=query[:80], results=len(items))
        return Outcome.success(items)

    async def _request(self, query: str) -> dict:
        client = self._get_client()
        response = await client.get(
            self.endpoint,
            params={"q": query, "count": self.result_count},
            headers={
                "Accept": "application/json",
                "X-Subscription-Token": self.api_key or "",
            },
        )
        response.raise_for_status()
        return response.json()

    @staticmethod
    def _parse_results(payload: object) -> list[EvidenceItem]:
        """Map Brave's web.results entries to EvidenceItem objects."""
        if not isinstance(payload, dict):
            return []
        web = payload.get("web") or {}
        results = web.get("results") if isinstance(web, dict) else None
        if not isinstance(results, list):
            return []

        items: list[EvidenceItem] = []
        for result in results:
            if not isinstance(result, dict):
                continue
            items.append(
                EvidenceItem(
                    title=str(result.get("title") or ""),
                    url=str(result.get("url") or ""),
                    snippet=str(result.get("description") or ""),
                    source="brave",
                )
            )
        return items

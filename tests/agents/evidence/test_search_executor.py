"""Tests for SearchExecutor against a mocked Brave endpoint.

Tests cover:
- Request shape (query params, subscription header)
- Result mapping to EvidenceItem
- Soft failures: missing key, HTTP error, transport error, timeout, bad JSON
"""

import asyncio

import httpx
import pytest

from factcheck_system.agents.evidence.search_executor import SearchExecutor


def _brave_payload(*urls: str) -> dict:
    return {
        "web": {
            "results": [
                {"title": f"Title {u}", "url": u, "description": f"About {u}"}
                for u in urls
            ]
        }
    }


def _executor(handler, **kwargs) -> SearchExecutor:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SearchExecutor(api_key=kwargs.pop("api_key", "test-key"), client=client, **kwargs)


class TestSearchExecutor:
    @pytest.mark.asyncio
    async def test_maps_results(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=_brave_payload("https://reuters.com/a", "https://x.example/b"))

        executor = _executor(handler, result_count=7)
        outcome = await executor.search("moon landing fact check")

        assert outcome.ok
        items = outcome.value
        assert [i.url for i in items] == ["https://reuters.com/a", "https://x.example/b"]
        assert items[0].title == "Title https://reuters.com/a"
        assert items[0].snippet == "About https://reuters.com/a"
        assert items[0].source == "brave"

        request = seen[0]
        assert request.url.params["q"] == "moon landing fact check"
        assert request.url.params["count"] == "7"
        assert request.headers["X-Subscription-Token"] == "test-key"

    @pytest.mark.asyncio
    async def test_missing_web_section(self) -> None:
        executor = _executor(lambda r: httpx.Response(200, json={"query": {}}))
        outcome = await executor.search("q")
        assert outcome.ok
        assert outcome.value == []

    @pytest.mark.asyncio
    async def test_missing_key_makes_no_call(self) -> None:
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json=_brave_payload())

        executor = _executor(handler, api_key="")
        outcome = await executor.search("q")
        assert not outcome.ok
        assert calls == []
        assert executor.configured is False

    @pytest.mark.asyncio
    async def test_http_error_is_soft(self) -> None:
        executor = _executor(lambda r: httpx.Response(429, json={"error": "rate limited"}))
        outcome = await executor.search("q")
        assert not outcome.ok
        assert "429" in outcome.error
        assert outcome.unwrap_or([]) == []

    @pytest.mark.asyncio
    async def test_transport_error_is_soft(self) -> None:
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        outcome = await _executor(handler).search("q")
        assert not outcome.ok
        assert "connection refused" in outcome.error

    @pytest.mark.asyncio
    async def test_invalid_json_is_soft(self) -> None:
        executor = _executor(lambda r: httpx.Response(200, content=b"<html>oops</html>"))
        outcome = await executor.search("q")
        assert not outcome.ok

    @pytest.mark.asyncio
    async def test_timeout_is_soft(self) -> None:
        executor = SearchExecutor(api_key="k", timeout=0.01)

        async def slow_request(query: str) -> dict:
            await asyncio.sleep(1)
            return _brave_payload("https://late.example")

        executor._request = slow_request  # type: ignore[method-assign]
        outcome = await executor.search("q")
        assert not outcome.ok
        assert "timed out" in outcome.error

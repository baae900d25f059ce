"""Chat gateway client for verdict generation and image inspection.

Talks to an OpenAI-compatible chat-completions endpoint. Both the verdict
generator and the media analyzer go through complete(), which never raises:
non-success statuses, transport errors, timeouts and replies without content
all come back as a failed Outcome.
"""

import asyncio
from typing import Any, Optional

import httpx
import structlog

from factcheck_system.config.settings import settings
from factcheck_system.utils.outcome import Outcome

CHAT_COMPLETIONS_PATH = "/v1/chat/completions"


class GatewayClient:
    """
    Async client for the chat-completion gateway.

    Attributes:
        base_url: Gateway base URL
        token: Bearer token (requests are still attempted without one)
        agent_id: Agent identifier forwarded as a header
        model: Model name sent in each request
        timeout: Per-call timeout in seconds
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        agent_id: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = (base_url or settings.gateway_url).rstrip("/")
        self.token = token if token is not None else settings.gateway_token
        self.agent_id = agent_id or settings.gateway_agent_id
        self.model = model or settings.gateway_model
        self.timeout = timeout if timeout is not None else settings.gateway_timeout
        self._client = client
        self._logger = structlog.get_logger().bind(component="GatewayClient")

        if not self.token:
            self._logger.warning(
                "gateway_token_not_set",
                msg="GATEWAY_TOKEN not set, requests will be sent unauthenticated",
            )

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def complete(
        self,
        messages: list[dict[str, Any]],
        user: str = "factcheck",
    ) -> Outcome[str]:
        """
        Send a chat-completion request and return the reply text.

        Args:
            messages: Chat messages (role/content dicts; content may be a list
                of text and image_url parts)
            user: End-user tag forwarded to the gateway

        Returns:
            Outcome with the first choice's message content, or the failure reason
        """
        body = {"model": self.model, "user": user, "messages": messages}
        self._logger.debug("gateway_request", messages=len(messages))

        try:
            data = await asyncio.wait_for(self._post(body), timeout=self.timeout)
        except asyncio.TimeoutError:
            self._logger.error("gateway_timeout", timeout=self.timeout)
            return Outcome.failure(f"gateway timed out after {self.timeout}s")
        except httpx.HTTPStatusError as e:
            self._logger.error(
                "gateway_error",
                status=e.response.status_code,
                body=e.response.text[:200],
            )
            return Outcome.failure(f"gateway returned status {e.response.status_code}")
        except (httpx.RequestError, ValueError) as e:
            self._logger.error("gateway_request_failed", error=str(e))
            return Outcome.failure(e)

        content = self._extract_content(data)
        if not content:
            return Outcome.failure("gateway reply had no content")
        return Outcome.success(content)

    async def _post(self, body: dict[str, Any]) -> Any:
        headers = {
            "Content-Type": "application/json",
            "x-openclaw-agent-id": self.agent_id,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        client = self._get_client()
        response = await client.post(
            f"{self.base_url}{CHAT_COMPLETIONS_PATH}",
            json=body,
            headers=headers,
        )
        response.raise_for_status()
        return response.json()

    @staticmethod
    def _extract_content(data: Any) -> Optional[str]:
        """Pull choices[0].message.content out of a completion payload."""
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return None
        return content if isinstance(content, str) else None

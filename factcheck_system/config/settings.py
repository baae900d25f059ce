"""Application settings using Pydantic BaseSettings for environment variable management."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Attributes:
        brave_api_key: Brave Web Search subscription token (optional)
        brave_timeout: Per-query search timeout in seconds
        brave_result_count: Results requested per search query
        gateway_url: Base URL of the OpenAI-compatible chat gateway
        gateway_token: Bearer token for the chat gateway
        gateway_agent_id: Agent identifier forwarded to the gateway
        gateway_model: Model name sent in chat-completion requests
        gateway_timeout: Chat/vision call timeout in seconds
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log output format (json for production, console for dev)
    """

    brave_api_key: str | None = Field(
        default=None,
        description="Brave Web Search API key; search is disabled without it"
    )
    brave_timeout: float = Field(
        default=15.0,
        description="Timeout in seconds for each search query"
    )
    brave_result_count: int = Field(
        default=10,
        description="Number of results requested per search query"
    )
    gateway_url: str = Field(
        default="http://localhost:18789",
        description="Chat gateway base URL"
    )
    gateway_token: str | None = Field(
        default=None,
        description="Chat gateway bearer token"
    )
    gateway_agent_id: str = Field(
        default="wolfie",
        description="Agent identifier sent with every gateway request"
    )
    gateway_model: str = Field(
        default="openclaw",
        description="Model identifier for chat-completion requests"
    )
    gateway_timeout: float = Field(
        default=120.0,
        description="Timeout in seconds for verdict and vision calls"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="json",
        description="Log output format: json or console"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    def service_status(self) -> dict[str, str]:
        """Report which external collaborators have credentials configured."""
        return {
            "gateway": "configured" if self.gateway_token else "not configured",
            "brave_search": "configured" if self.brave_api_key else "not configured",
        }


# Singleton instance - import this throughout the application
settings = Settings()

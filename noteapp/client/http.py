"""
HTTP Client.

Async HTTP client for the note server. Requests carry an X-Frontend-ID
header naming the calling front-end. Transport errors are logged and
re-raised untouched.
"""

from typing import Any

import httpx

from noteapp.core.config import get_app_config, get_server_base_url
from noteapp.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


def _get_client_config() -> tuple[str, float, str]:
    """Load base URL, timeout and front-end id from configuration."""
    base_url, timeout = get_server_base_url()
    frontend_id = get_app_config().application.client.frontend_id
    return base_url, timeout, frontend_id


class APIClient:
    """
    HTTP client for note server communication.

    Features:
    - Base URL and timeout from application.yaml (or NOTES_BASE_URL)
    - X-Frontend-ID header for server-side log routing
    - Structured logging of requests/responses

    Usage:
        client = APIClient()
        response = await client.get("/notes")
        response = await client.post("/notes", json={"noteTitle": "test"})
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        frontend_id: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Server base URL. If None, read from configuration.
            timeout: Request timeout in seconds. If None, read from configuration.
            frontend_id: Value of the X-Frontend-ID header. If None, read from configuration.
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests.
        """
        try:
            config_base_url, config_timeout, config_frontend_id = _get_client_config()
        except Exception as e:
            if base_url is None:
                raise RuntimeError(
                    "Could not determine server URL from config/settings/application.yaml"
                ) from e
            config_base_url = base_url
            config_timeout = 30.0
            config_frontend_id = "cli"

        self.base_url = (base_url or config_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config_timeout
        self.frontend_id = frontend_id or config_frontend_id
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"X-Frontend-ID": self.frontend_id},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an HTTP request to the note server.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Absolute URL, usually built by Endpoints
            **kwargs: Additional arguments for httpx

        Returns:
            httpx.Response

        Raises:
            httpx.HTTPError: On transport failure
        """
        client = await self._get_client()

        log_with_source(logger, "client", "debug", "API request", method=method, url=url)

        try:
            response = await client.request(method, url, **kwargs)

            log_with_source(
                logger,
                "client",
                "debug",
                "API response",
                method=method,
                url=url,
                status_code=response.status_code,
            )

            return response

        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "client",
                "error",
                "API request failed",
                method=method,
                url=url,
                error=str(e),
            )
            raise

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        """Make a GET request."""
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        """Make a POST request."""
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> httpx.Response:
        """Make a PUT request."""
        return await self.request("PUT", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        """Make a DELETE request."""
        return await self.request("DELETE", url, **kwargs)


# Module-level client instance
_client: APIClient | None = None


def get_api_client() -> APIClient:
    """Get or create the API client singleton."""
    global _client
    if _client is None:
        _client = APIClient()
    return _client


async def close_api_client() -> None:
    """Close the API client."""
    global _client
    if _client:
        await _client.close()
        _client = None

"""HTTP client for the stats API."""

import logging
from typing import Any

import httpx

from .config import Settings, get_settings
from .endpoints import Endpoint
from .errors import FetchError

logger = logging.getLogger(__name__)


class HTTPClient:
    """
    Async HTTP client that turns an Endpoint into decoded JSON.

    Inside ``async with`` all requests share one connection pool;
    outside of it each request opens a short-lived client:

        async with HTTPClient() as http:
            data = await http.fetch_json(roster_endpoint("2024-25"))

    No retries are attempted. Transport errors, non-2xx responses and
    bodies that are not JSON objects all raise FetchError.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = settings or get_settings()
        self.base_url = settings.base_url.rstrip("/")
        self.headers = {
            "User-Agent": settings.user_agent,
            "Referer": settings.referer,
            "Accept": "application/json",
        }
        self.timeout = settings.timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _make_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def __aenter__(self) -> "HTTPClient":
        self._client = self._make_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch_json(self, endpoint: Endpoint) -> dict[str, Any]:
        """
        Make a GET request for an endpoint.

        Args:
            endpoint: Path, query parameters and extra headers

        Returns:
            JSON response as dict

        Raises:
            FetchError: On transport failure, non-2xx status or non-JSON body
        """
        if self._client is not None:
            return await self._fetch(self._client, endpoint)
        async with self._make_client() as client:
            return await self._fetch(client, endpoint)

    async def _fetch(self, client: httpx.AsyncClient, endpoint: Endpoint) -> dict[str, Any]:
        path = endpoint.path
        logger.debug(f"GET {path} {endpoint.params}")
        try:
            response = await client.get(
                path,
                params=endpoint.params or None,
                headers=endpoint.headers or None,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"HTTP {status} for {path}")
            raise FetchError(f"HTTP {status} for {path}", path=path) from e
        except httpx.RequestError as e:
            logger.error(f"Request error for {path}: {e}")
            raise FetchError(f"Request error for {path}: {e}", path=path) from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Non-JSON response for {path}")
            raise FetchError(f"Non-JSON response for {path}", path=path) from e

        if not isinstance(data, dict):
            logger.error(f"Expected a JSON object from {path}, got {type(data).__name__}")
            raise FetchError(f"Expected a JSON object from {path}, got {type(data).__name__}", path=path)
        return data

"""
Generic async HTTP client wrapper using aiohttp.
Requests are sent once unless the caller opts into retries.
"""

import asyncio
from typing import Optional, Dict, Any
import aiohttp
import logging

logger = logging.getLogger(__name__)


class HttpClientError(Exception):
    """Remote service answered with a 4xx/5xx status."""

    def __init__(self, status: int, payload: Any):
        self.status = status
        self.payload = payload
        super().__init__(f"HTTP {status}: {payload}")


class HttpClient:
    """
    Async HTTP client wrapper using aiohttp.
    Provides get/post/delete methods returning decoded JSON.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: int = 30,
        max_retries: int = 1,
        retry_delay: float = 1.0,
        default_headers: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize HTTP client.

        Args:
            base_url: Optional base URL for all requests
            timeout: Request timeout in seconds
            max_retries: Total attempts for transport failures (1 = no retry)
            retry_delay: Initial delay between retries in seconds
            default_headers: Headers sent with every request
        """
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.max_retries = max(1, max_retries)
        self.retry_delay = retry_delay
        self.default_headers = default_headers or {}
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()

    def _build_url(self, endpoint: str) -> str:
        """Build full URL from endpoint."""
        if self.base_url:
            return f"{self.base_url.rstrip('/')}/{endpoint.lstrip('/')}"
        return endpoint

    def _merge_headers(self, headers: Optional[Dict[str, str]]) -> Dict[str, str]:
        merged = dict(self.default_headers)
        if headers:
            merged.update(headers)
        return merged

    async def _request(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> Dict[str, Any]:
        """
        Send a request and decode the JSON body.

        Transport failures are retried up to max_retries attempts with
        exponential backoff; HTTP error statuses are raised immediately.

        Raises:
            HttpClientError: remote answered with status >= 400
            aiohttp.ClientError / asyncio.TimeoutError: transport failure
        """
        session = await self._get_session()
        last_exception: Optional[BaseException] = None

        for attempt in range(self.max_retries):
            try:
                async with session.request(method, url, **kwargs) as response:
                    payload = await response.json(content_type=None)
                    if response.status >= 400:
                        raise HttpClientError(response.status, payload)
                    return payload
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                last_exception = e
                if attempt < self.max_retries - 1:
                    delay = self.retry_delay * (2 ** attempt)
                    logger.warning(
                        f"Request failed (attempt {attempt + 1}/{self.max_retries}): {e}. Retrying in {delay}s..."
                    )
                    await asyncio.sleep(delay)
                else:
                    logger.error(f"{method} {url} failed after {self.max_retries} attempt(s): {e}")

        raise last_exception

    async def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """Make GET request and return the JSON response."""
        url = self._build_url(endpoint)
        return await self._request("GET", url, params=params, headers=self._merge_headers(headers))

    async def post(
        self,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Make POST request.

        Args:
            endpoint: API endpoint
            data: Form data (sent url-encoded)
            json: JSON data
            headers: Request headers

        Returns:
            JSON response as dictionary
        """
        url = self._build_url(endpoint)
        return await self._request(
            "POST", url, data=data, json=json, headers=self._merge_headers(headers)
        )

    async def delete(
        self,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """Make DELETE request and return the JSON response."""
        url = self._build_url(endpoint)
        return await self._request("DELETE", url, headers=self._merge_headers(headers))

"""
Base class for single-shot JSON API clients (embedding, search, rerank)
"""

import logging
from abc import ABC
from typing import Any, Dict, Optional, Type

import httpx

from core.config import settings
from core.exceptions import ProviderError

logger = logging.getLogger(__name__)


def read_error_body(response: httpx.Response) -> Any:
    """Decoded JSON error body, or raw text when the body is not JSON."""
    try:
        return response.json()
    except ValueError:
        return response.text


class BaseAPIClient(ABC):
    """
    One POST per call, no retries.

    An injected `http_client` is shared and left open on close(); otherwise the
    client creates its own connection and closes it on close().
    """

    error_class: Type[ProviderError] = ProviderError

    def __init__(
        self,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        self.timeout = timeout or settings.request_timeout
        self._client: Optional[httpx.AsyncClient] = http_client
        self._owns_client = http_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client"""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    def _headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json"}

    async def _post(self, url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST payload as JSON; non-2xx raises the client's provider error."""
        client = await self._get_client()
        logger.debug(f"POST {url} ({self.__class__.__name__})")
        response = await client.post(url, json=payload, headers=self._headers())
        if not response.is_success:
            raise self.error_class(response.status_code, read_error_body(response))
        return response.json()

    async def close(self):
        """Close HTTP client"""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

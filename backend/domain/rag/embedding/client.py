"""
Async OpenAI embedding client for query vectorization
"""

import logging
from typing import List, Dict, Any, Optional

import httpx

from core.config import settings
from core.exceptions import (
    EmbeddingError,
    EmbeddingProviderError,
    MalformedResponseError,
)
from domain.rag.base_client import BaseAPIClient

logger = logging.getLogger(__name__)


class OpenAIEmbeddingClient(BaseAPIClient):
    """Async client for OpenAI Embedding API"""

    error_class = EmbeddingProviderError

    def __init__(
        self,
        api_key: str,
        model: str,
        dimensions: Optional[int] = None,
        api_url: str = None,
        timeout: float = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        if not api_key:
            raise EmbeddingError("OpenAI API key not set. Provide openaiAPIKey in the user settings.")
        if not model:
            raise EmbeddingError("OpenAI embedding model not set. Provide openaiEmbeddingModel in the user settings.")

        super().__init__(timeout=timeout, http_client=http_client)
        self.api_key = api_key
        self.model = model
        self.dimensions = dimensions
        self.api_url = api_url or settings.openai_api_url

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    def _build_payload(self, query: str) -> Dict[str, Any]:
        payload = {
            "input": query,
            "model": self.model,
            "truncate": "END",
        }
        if self.dimensions:
            payload["dimensions"] = int(self.dimensions)
        return payload

    @staticmethod
    def _extract_embedding(data: Dict[str, Any]) -> List[float]:
        """First embedding vector of the response (data[0].embedding)."""
        items = data.get("data") if isinstance(data, dict) else None
        if items and items[0].get("embedding"):
            return items[0]["embedding"]
        raise MalformedResponseError("Invalid response from OpenAI API: Embedding not found")

    async def embed_query(self, query: str) -> List[float]:
        """
        Embed a single query string.

        Returns:
            The query embedding vector

        Raises:
            EmbeddingError: On provider error, malformed response or transport
                            failure (original error chained as __cause__)
        """
        try:
            data = await self._post(self.api_url, self._build_payload(query))
            embedding = self._extract_embedding(data)
            logger.debug(f"Embedded query with {self.model}: {len(embedding)} dimensions")
            return embedding
        except Exception as e:
            logger.error(f"Error vectorizing query: {e}")
            raise EmbeddingError(f"Failed to vectorize query: {e}") from e

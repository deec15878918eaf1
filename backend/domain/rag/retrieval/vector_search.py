"""
Pinecone vector index search
"""

import logging
from typing import List, Dict, Any, Optional

import httpx

from core.config import settings
from core.exceptions import RetrievalError, SearchProviderError
from domain.rag.base_client import BaseAPIClient
from domain.rag.retrieval.types import Match

logger = logging.getLogger(__name__)


def normalize_host_url(host_url: str) -> str:
    """Index host as an absolute base URL without trailing slash."""
    host_url = host_url.strip().rstrip("/")
    if not host_url.startswith(("http://", "https://")):
        host_url = f"https://{host_url}"
    return host_url


class PineconeSearchClient(BaseAPIClient):
    """Similarity search against a single Pinecone index host"""

    error_class = SearchProviderError

    def __init__(
        self,
        api_key: str,
        index_host_url: str,
        api_version: str = None,
        timeout: float = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        if not api_key:
            raise RetrievalError("Pinecone API key not set. Provide pineconeAPIKey in the user settings.")
        if not index_host_url:
            raise RetrievalError("Pinecone index host not set. Provide pineconeIndexHostURL in the user settings.")

        super().__init__(timeout=timeout, http_client=http_client)
        self.api_key = api_key
        self.index_host_url = normalize_host_url(index_host_url)
        self.api_version = api_version or settings.default_pinecone_api_version

    def _headers(self) -> Dict[str, str]:
        return {
            "Api-Key": self.api_key,
            "Content-Type": "application/json",
            "X-Pinecone-API-Version": self.api_version,
        }

    async def query(
        self,
        vector: List[float],
        top_k: int = 5,
        namespace: Optional[str] = None
    ) -> Optional[List[Match]]:
        """
        Search the index with a query vector.

        Args:
            vector: Query embedding vector
            top_k: Number of matches to return
            namespace: Optional index namespace

        Returns:
            Matches in index order (highest ranked first), or None when the
            index returned no matches.

        Raises:
            SearchProviderError: On a non-success response
        """
        payload: Dict[str, Any] = {
            "vector": vector,
            "topK": top_k,
            "includeValues": False,
            "includeMetadata": True,
        }
        if namespace:
            payload["namespace"] = namespace

        data = await self._post(f"{self.index_host_url}/query", payload)
        raw_matches = data.get("matches") if isinstance(data, dict) else None
        if not raw_matches:
            logger.info("Pinecone returned no matches")
            return None

        matches = [Match(**raw) for raw in raw_matches]
        logger.debug(f"Pinecone returned {len(matches)} matches (topK={top_k})")
        return matches

"""
Cross-encoder reranking with the Cohere Rerank API
"""

import logging
from typing import List, Dict, Any, Optional

import httpx

from core.config import settings
from core.exceptions import MalformedResponseError, RerankError, RerankProviderError
from domain.rag.base_client import BaseAPIClient
from domain.rag.retrieval.metadata import project_metadata
from domain.rag.retrieval.normalization import format_relevance
from domain.rag.retrieval.types import Match, RelevanceResult

logger = logging.getLogger(__name__)


class CohereReranker(BaseAPIClient):
    """Second-pass relevance scoring of search matches"""

    error_class = RerankProviderError

    def __init__(
        self,
        api_key: str,
        model: str = None,
        api_url: str = None,
        client_name: str = None,
        timeout: float = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        if not api_key:
            raise RerankError("Cohere API key not set. Provide cohereAPIKey in the user settings.")

        super().__init__(timeout=timeout, http_client=http_client)
        self.api_key = api_key
        self.model = model or settings.default_cohere_rerank_model
        self.api_url = api_url or settings.cohere_api_url
        self.client_name = client_name or settings.cohere_client_name

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
            "X-Client-Name": self.client_name,
        }

    async def rerank(
        self,
        query: str,
        matches: List[Match],
        top_n: int = None,
        max_tokens_per_doc: int = None,
        fields: Optional[List[str]] = None
    ) -> List[RelevanceResult]:
        """
        Rerank matches against the query.

        Each match's 'text' metadata field is sent as the candidate document.

        Args:
            query: Original query string
            matches: Matches from vector search
            top_n: Number of results to keep
            max_tokens_per_doc: Per-document truncation limit on the provider side
            fields: Optional metadata allowlist for the returned results

        Returns:
            Results in reranked order, relevance being the provider's
            relevance_score with 2 decimal digits

        Raises:
            RerankError: On provider error, malformed response or transport
                         failure (original error chained as __cause__)
        """
        top_n = top_n or settings.default_cohere_top_n
        max_tokens_per_doc = max_tokens_per_doc or settings.default_cohere_max_tokens_per_doc

        payload = {
            "model": self.model,
            "query": query,
            "documents": [match.metadata.get("text") for match in matches],
            "top_n": top_n,
            "max_tokens_per_doc": max_tokens_per_doc,
        }

        try:
            data = await self._post(self.api_url, payload)
            results = data.get("results") if isinstance(data, dict) else None
            if results is None:
                raise MalformedResponseError("Invalid response from Cohere API: Rerank results not found")

            reranked = []
            for result in results[:top_n]:
                match = matches[result["index"]]
                reranked.append(RelevanceResult(
                    relevance=format_relevance(result["relevance_score"], 2),
                    metadata=project_metadata(match.metadata, fields),
                ))

            logger.debug(f"Reranked {len(matches)} matches with {self.model}, kept {len(reranked)}")
            return reranked
        except Exception as e:
            logger.error(f"Error reranking with Cohere: {e}")
            raise RerankError(f"Failed to rerank with Cohere: {e}") from e

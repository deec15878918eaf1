"""
Retrieval service - orchestrates retrieval: query embedding → vector search → rerank or normalize
"""

import logging
from typing import List, Dict, Any, Optional, Union

import httpx

from core.config import settings
from core.exceptions import RetrievalError
from domain.rag.embedding.client import OpenAIEmbeddingClient
from domain.rag.query_settings import QuerySettings
from domain.rag.retrieval.normalization import normalize_matches
from domain.rag.retrieval.reranker import CohereReranker
from domain.rag.retrieval.types import Match, RelevanceResult
from domain.rag.retrieval.vector_search import PineconeSearchClient
from services.base import BaseService

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "No matching results found in Pinecone."


class RetrievalService(BaseService):
    """
    Orchestrates the query pipeline: embed query → Pinecone search → Cohere
    rerank (when enabled) or score normalization.

    Stateless across queries: provider clients are built from each query's
    user settings and closed when it finishes. A shared `http_client` may be
    injected; it is reused by every provider client and owned by the caller.
    """

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None):
        self.http_client = http_client

    def _embedding_client(self, user_settings: QuerySettings) -> OpenAIEmbeddingClient:
        return OpenAIEmbeddingClient(
            api_key=user_settings.openai_api_key,
            model=user_settings.openai_embedding_model,
            dimensions=user_settings.embedding_dimensions,
            http_client=self.http_client,
        )

    def _search_client(self, user_settings: QuerySettings) -> PineconeSearchClient:
        return PineconeSearchClient(
            api_key=user_settings.pinecone_api_key,
            index_host_url=user_settings.pinecone_index_host_url,
            api_version=user_settings.pinecone_api_version,
            http_client=self.http_client,
        )

    async def _rerank(
        self,
        query: str,
        matches: List[Match],
        user_settings: QuerySettings
    ) -> List[RelevanceResult]:
        async with CohereReranker(
            api_key=user_settings.cohere_api_key,
            model=user_settings.cohere_rerank_model,
            http_client=self.http_client,
        ) as reranker:
            return await reranker.rerank(
                query=query,
                matches=matches,
                top_n=user_settings.cohere_top_n,
                max_tokens_per_doc=user_settings.cohere_max_tokens_per_doc,
                fields=user_settings.metadata_fields,
            )

    async def query(
        self,
        query: str,
        user_settings: Union[QuerySettings, Dict[str, Any]]
    ) -> Union[List[RelevanceResult], str]:
        """
        Run one query through the pipeline.

        Args:
            query: Natural-language query
            user_settings: QuerySettings, or the raw settings bundle (camelCase keys)

        Returns:
            Relevance results in ranked order, or NO_RESULTS_MESSAGE when the
            index returned no matches.

        Raises:
            RetrievalError: If the query is blank, the settings bundle is
                            invalid, or any stage fails. The underlying error
                            (ValidationError, EmbeddingError, RerankError,
                            provider errors) is chained as __cause__.
        """
        if not query or not query.strip():
            raise RetrievalError("query must not be empty")

        try:
            if isinstance(user_settings, dict):
                user_settings = QuerySettings.model_validate(user_settings)

            top_k = user_settings.top_k or settings.default_top_k
            metric = user_settings.similarity_metric or settings.default_similarity_metric

            logger.info(
                f"Querying Pinecone: top_k={top_k}, metric={metric}, "
                f"rerank={user_settings.enable_rerank}"
            )

            async with self._embedding_client(user_settings) as embedder:
                vector = await embedder.embed_query(query)

            async with self._search_client(user_settings) as search_client:
                matches = await search_client.query(
                    vector=vector,
                    top_k=top_k,
                    namespace=user_settings.namespace,
                )

            if matches is None:
                return NO_RESULTS_MESSAGE

            if user_settings.enable_rerank:
                results = await self._rerank(query, matches, user_settings)
            else:
                results = normalize_matches(matches, metric, user_settings.metadata_fields)

            logger.info(f"Returning {len(results)} results")
            return results
        except Exception as e:
            logger.error(f"Error querying Pinecone: {e}")
            raise RetrievalError(f"Failed to query Pinecone: {e}") from e

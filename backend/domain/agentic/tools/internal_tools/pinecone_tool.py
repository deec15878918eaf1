"""
Pinecone query tool (internal) - the plugin entry point
"""

import logging
from typing import Dict, Any, List, Optional, Union

from domain.agentic.tools.base import BaseTool
from domain.rag.query_settings import QuerySettings
from services.retrieval_service import RetrievalService
from core.exceptions import ToolExecutionError

logger = logging.getLogger(__name__)

TOOL_NAME = "query_pinecone_database"


class QueryPineconeTool(BaseTool):
    """
    Semantic search over a Pinecone index.

    Embeds the query with OpenAI, searches the configured index, then either
    reranks the matches with Cohere or normalizes their raw scores to [0, 1]
    according to the index similarity metric.
    """

    def __init__(self, retrieval_service: RetrievalService):
        self.retrieval_service = retrieval_service

    @property
    def name(self) -> str:
        return TOOL_NAME

    @property
    def description(self) -> str:
        return (
            "Search a Pinecone vector database for documents semantically related to the query. "
            "The query is embedded with OpenAI and matched against the configured index. "
            "\n\n"
            "Returns a ranked list of results with:\n"
            "- relevance: score between 0 and 1 as a string (4 decimals, or 2 when Cohere reranking is enabled)\n"
            "- metadata: the stored document metadata, optionally limited to the configured fields\n"
            "\n"
            "Returns 'No matching results found in Pinecone.' when nothing matches."
        )

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "The search query to find semantically similar documents."
                }
            },
            "required": ["query"]
        }

    @property
    def settings_schema(self) -> Dict[str, Any]:
        return QuerySettings.model_json_schema(by_alias=True)

    async def execute(
        self,
        query: str,
        user_settings: Union[QuerySettings, Dict[str, Any], None] = None,
        **kwargs
    ) -> Union[List[Dict[str, Any]], str]:
        """
        Execute a Pinecone query.

        Args:
            query: Search query string.
            user_settings: Credentials and options (QuerySettings or the raw bundle).
            **kwargs: Unused (required by BaseTool interface).

        Returns:
            List of {"relevance": str, "metadata": dict}, or the no-results message.

        Raises:
            ToolExecutionError: If the query fails.
        """
        try:
            results = await self.retrieval_service.query(query, user_settings or {})
        except Exception as e:
            logger.error(f"Error in {TOOL_NAME}: {e}")
            raise ToolExecutionError(str(e)) from e

        if isinstance(results, str):
            return results
        return [result.model_dump() for result in results]


async def query_pinecone_database(
    params: Dict[str, Any],
    user_settings: Optional[Dict[str, Any]] = None
) -> Union[List[Dict[str, Any]], str]:
    """
    Plugin entry point: `params` holds {"query": ...}, `user_settings` the
    credentials/options bundle (pineconeAPIKey, topK, enableRerank, ...).
    """
    tool = QueryPineconeTool(RetrievalService())
    return await tool.execute(query=params.get("query", ""), user_settings=user_settings)

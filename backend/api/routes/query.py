"""
Query endpoints - runs the plugin pipeline over HTTP
"""

import logging
from fastapi import APIRouter, HTTPException, Depends, status

from api.dependencies import get_retrieval_service, get_tool_registry
from api.schemas.query import (
    QueryRequest,
    QueryResponse,
    RelevanceResultSchema,
    ToolInfo,
    ToolsResponse,
)
from domain.agentic.tools.registry import ToolRegistry
from services.retrieval_service import RetrievalService
from core.exceptions import RAGException

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["query"])


@router.post("/query", response_model=QueryResponse, status_code=status.HTTP_200_OK)
async def query_pinecone(
    query_request: QueryRequest,
    retrieval_service: RetrievalService = Depends(get_retrieval_service)
):
    """
    Embed the query, search Pinecone, then rerank or normalize the matches.

    Args:
        query_request: QueryRequest containing:
            - query: str - The search query
            - settings: QuerySettings - Credentials and options (camelCase keys
                        as sent by the plugin host: pineconeAPIKey, topK, ...)

    Returns:
        QueryResponse with ranked results. When the index has no matches,
        results is empty and message holds the no-results text.

    Raises:
        HTTPException: 502 when any pipeline stage fails (detail names the stage
                       and the upstream error)
    """
    try:
        results = await retrieval_service.query(query_request.query, query_request.settings)
    except RAGException as e:
        logger.error(f"Query failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Unexpected error during query: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to query Pinecone: {str(e)}"
        )

    if isinstance(results, str):
        return QueryResponse(query=query_request.query, results=[], num_results=0, message=results)

    return QueryResponse(
        query=query_request.query,
        results=[RelevanceResultSchema(**result.model_dump()) for result in results],
        num_results=len(results),
    )


@router.get("/tools", response_model=ToolsResponse)
async def list_tools(
    tool_registry: ToolRegistry = Depends(get_tool_registry)
):
    """List registered tools with their input and settings schemas."""
    return ToolsResponse(
        tools=[
            ToolInfo(
                name=tool.name,
                description=tool.description,
                input_schema=tool.input_schema,
                settings_schema=tool.settings_schema,
            )
            for tool in tool_registry.get_all_tools()
        ]
    )

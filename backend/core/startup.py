"""
Application startup and initialization logic
"""

import logging
from typing import Optional

import httpx
from fastapi import FastAPI

from core.config import settings
from domain.agentic.tools.registry import ToolRegistry
from services.retrieval_service import RetrievalService

logger = logging.getLogger(__name__)


async def initialize_rag_system(app: FastAPI, http_client: Optional[httpx.AsyncClient] = None):
    """
    Initialize the retrieval service and register its tool.

    A single pooled HTTP client is shared by all queries; it carries no
    per-query state (credentials travel as request headers).
    """
    if http_client is None:
        http_client = httpx.AsyncClient(timeout=settings.request_timeout)
        app.state.owns_http_client = True
    else:
        app.state.owns_http_client = False

    retrieval_service = RetrievalService(http_client=http_client)

    tool_registry = ToolRegistry()
    tool_registry.register_internal_tools(retrieval_service)

    app.state.http_client = http_client
    app.state.retrieval_service = retrieval_service
    app.state.tool_registry = tool_registry
    logger.info("RAG system initialized")


async def cleanup_rag_system(app: FastAPI):
    """Cleanup RAG system resources (shared HTTP connections)."""
    http_client = getattr(app.state, "http_client", None)
    if http_client is not None and getattr(app.state, "owns_http_client", False):
        try:
            await http_client.aclose()
            logger.info("HTTP client closed")
        except Exception as e:
            logger.error(f"Error during HTTP client cleanup: {e}", exc_info=True)
    app.state.http_client = None

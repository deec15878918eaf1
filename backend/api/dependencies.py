"""
FastAPI dependencies
"""

from fastapi import Request
from domain.agentic.tools.registry import ToolRegistry
from services.retrieval_service import RetrievalService


def get_retrieval_service(request: Request) -> RetrievalService:
    return request.app.state.retrieval_service


def get_tool_registry(request: Request) -> ToolRegistry:
    return request.app.state.tool_registry

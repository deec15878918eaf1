"""
Tool system for the retrieval plugin
"""

from domain.agentic.tools.base import BaseTool
from domain.agentic.tools.registry import ToolRegistry
from domain.agentic.tools.internal_tools import QueryPineconeTool, query_pinecone_database

__all__ = [
    "BaseTool",
    "ToolRegistry",
    "QueryPineconeTool",
    "query_pinecone_database",
]

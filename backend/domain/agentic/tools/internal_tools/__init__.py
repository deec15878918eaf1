"""
Internal tools backed by local services
"""

from domain.agentic.tools.internal_tools.pinecone_tool import QueryPineconeTool, query_pinecone_database

__all__ = [
    "QueryPineconeTool",
    "query_pinecone_database",
]

"""
Custom exception hierarchy for the application
"""

import json
from typing import Any


class RAGException(Exception):
    """Base exception for RAG-related errors"""
    pass


class ProviderError(RAGException):
    """
    Non-success HTTP response from an external provider.

    Carries the upstream status code and the raw error body for diagnostics.
    """

    provider: str = "Provider"

    def __init__(self, status_code: int, body: Any):
        self.status_code = status_code
        self.body = body
        detail = body if isinstance(body, str) else json.dumps(body)
        super().__init__(f"{self.provider} API Error: {status_code} - {detail}")


class EmbeddingProviderError(ProviderError):
    """Error response from the embedding provider"""
    provider = "OpenAI"


class SearchProviderError(ProviderError):
    """Error response from the vector search index"""
    provider = "Pinecone"


class RerankProviderError(ProviderError):
    """Error response from the rerank provider"""
    provider = "Cohere"


class MalformedResponseError(RAGException):
    """Success response missing an expected field"""
    pass


class EmbeddingError(RAGException):
    """Error during query embedding"""
    pass


class RerankError(RAGException):
    """Error during reranking"""
    pass


class RetrievalError(RAGException):
    """Error during retrieval operations"""
    pass


class AgenticException(Exception):
    """Base exception for tool system errors"""
    pass


class ToolExecutionError(AgenticException):
    """Error executing a tool"""
    pass

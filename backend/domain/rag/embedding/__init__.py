"""
Query embedding
"""

from domain.rag.embedding.client import OpenAIEmbeddingClient

__all__ = [
    "OpenAIEmbeddingClient",
]

"""
Retrieval pipeline
"""

from domain.rag.retrieval.vector_search import PineconeSearchClient
from domain.rag.retrieval.reranker import CohereReranker
from domain.rag.retrieval.normalization import (
    format_relevance,
    normalize_relevance_score,
    normalize_matches,
)
from domain.rag.retrieval.types import Match, MatchSet, RelevanceResult, SimilarityMetric

__all__ = [
    "PineconeSearchClient",
    "CohereReranker",
    "Match",
    "MatchSet",
    "RelevanceResult",
    "SimilarityMetric",
    "format_relevance",
    "normalize_relevance_score",
    "normalize_matches",
]

"""
Retrieval data types
"""

from enum import Enum
from typing import Dict, Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SimilarityMetric(str, Enum):
    """How the vector index computed the raw match score."""
    COSINE = "cosine"
    EUCLIDEAN = "euclidean"
    DOTPRODUCT = "dotproduct"
    OTHER = "other"


class Match(BaseModel):
    """
    One candidate returned by the vector index.

    `score` range and sign depend on the index metric; `metadata` is whatever
    was stored alongside the vector (a 'text' field is expected for reranking).
    """
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    score: float
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("metadata", mode="before")
    @classmethod
    def _null_metadata(cls, value: Any) -> Any:
        return {} if value is None else value


# Ordered matches from a single search call
MatchSet = List[Match]


class RelevanceResult(BaseModel):
    """
    Standardized relevance result returned to the caller.

    `relevance` is a decimal string: 4 digits after the point when produced by
    score normalization, 2 digits when produced by the reranker.
    """
    model_config = ConfigDict(frozen=True)

    relevance: str
    metadata: Dict[str, Any]

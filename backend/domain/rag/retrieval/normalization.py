"""
Relevance score normalization (cosine, euclidean, dot product, outlier-robust)

Vector indexes score matches on incompatible scales depending on their metric:
  - cosine:     similarity in [-1, 1]
  - euclidean:  distance, unbounded, lower is closer
  - dotproduct: unbounded, higher is closer
  - other:      anything else, possibly with outliers

Each strategy maps a raw score onto [0, 1] using the match set it came from,
and formats it with 4 digits after the decimal point.
"""

import math
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from domain.rag.retrieval.metadata import project_metadata
from domain.rag.retrieval.types import Match, RelevanceResult, SimilarityMetric

# Slope of the logistic curve applied to standardized dot product scores
SIGMOID_SLOPE = 2.0

# Tukey fence multiplier for the interquartile range
IQR_FENCE = 1.5

# Wide enough to hold any finite double at fixed point
_FIXED_POINT = Context(prec=400)


def format_relevance(value: float, digits: int = 4) -> str:
    """
    Fixed-point text with exact ties rounded away from zero (0.125 at 2 digits -> "0.13").

    Rounds the exact binary value of the float, so 0.03125 gives "0.0313"
    where str.format would round half to even. Negative zero prints as zero.
    """
    value = float(value) + 0.0
    if not math.isfinite(value):
        return str(value)
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_FIXED_POINT))


def score_statistics(scores: Sequence[float]) -> Tuple[float, float]:
    """Population mean and standard deviation (divisor n, not n - 1)."""
    scores_np = np.asarray(scores, dtype=float)
    return float(scores_np.mean()), float(scores_np.std())


def tukey_fence(scores: Sequence[float]) -> Tuple[float, float]:
    """
    Outlier bounds [Q1 - 1.5 * IQR, Q3 + 1.5 * IQR].

    Quartiles are read by index from the ascending-sorted scores at
    floor(n * 0.25) and floor(n * 0.75), without interpolation.
    """
    sorted_scores = np.sort(np.asarray(scores, dtype=float))
    n = len(sorted_scores)
    q1 = float(sorted_scores[math.floor(n * 0.25)])
    q3 = float(sorted_scores[math.floor(n * 0.75)])
    iqr = q3 - q1
    return q1 - IQR_FENCE * iqr, q3 + IQR_FENCE * iqr


def min_max_normalize(score: float, low: float, high: float) -> float:
    """Scale score into [0, 1] against [low, high]; a zero-width range gives 1.0"""
    if high == low:
        return 1.0
    return (score - low) / (high - low)


def _cosine(score: float) -> float:
    # [-1, 1] -> [0, 1], then squared to push weak matches toward 0
    base = (1 + score) / 2
    return base ** 2


def _euclidean(score: float, scores: Sequence[float]) -> float:
    mean, std_dev = score_statistics(scores)
    sigma = std_dev or 1.0
    gaussian = float(np.exp(-((score - mean) ** 2) / (2 * sigma ** 2)))
    # Distance from the batch mean, not absolute closeness: score == mean -> 0
    return 1 - gaussian


def _dotproduct(score: float, scores: Sequence[float]) -> float:
    mean, std_dev = score_statistics(scores)
    temperature = std_dev or 1.0
    shifted = (score - mean) / temperature
    return float(1 / (1 + np.exp(-SIGMOID_SLOPE * shifted)))


def _other(score: float, scores: Sequence[float]) -> float:
    low, high = tukey_fence(scores)
    clipped = max(low, min(high, score))
    return min_max_normalize(clipped, low, high)


def _as_metric(metric: Union[SimilarityMetric, str]) -> Optional[SimilarityMetric]:
    try:
        return SimilarityMetric(metric)
    except ValueError:
        return None


def normalize_relevance_score(
    score: float,
    metric: Union[SimilarityMetric, str],
    matches: Sequence[Match]
) -> str:
    """
    Normalize one raw score to a relevance string in [0, 1].

    Args:
        score: Raw score of the match being normalized
        metric: Similarity metric of the index; unknown tags pass the raw
                score through with only fixed formatting
        matches: Full match set the score belongs to (must not be empty)

    Returns:
        Relevance formatted with 4 decimal digits, e.g. "0.5625"

    Raises:
        ValueError: If matches is empty
    """
    if not matches:
        raise ValueError("matches must not be empty")

    scores = [m.score for m in matches]
    kind = _as_metric(metric)

    if kind is SimilarityMetric.COSINE:
        value = _cosine(score)
    elif kind is SimilarityMetric.EUCLIDEAN:
        value = _euclidean(score, scores)
    elif kind is SimilarityMetric.DOTPRODUCT:
        value = _dotproduct(score, scores)
    elif kind is SimilarityMetric.OTHER:
        value = _other(score, scores)
    else:
        value = score

    return format_relevance(value, 4)


def normalize_matches(
    matches: Sequence[Match],
    metric: Union[SimilarityMetric, str],
    fields: Optional[List[str]] = None
) -> List[RelevanceResult]:
    """Normalize every match in search order and project its metadata."""
    return [
        RelevanceResult(
            relevance=normalize_relevance_score(match.score, metric, matches),
            metadata=project_metadata(match.metadata, fields),
        )
        for match in matches
    ]

"""
Service layer (business logic orchestration)
"""

from services.base import BaseService
from services.retrieval_service import RetrievalService, NO_RESULTS_MESSAGE

__all__ = [
    "BaseService",
    "RetrievalService",
    "NO_RESULTS_MESSAGE",
]

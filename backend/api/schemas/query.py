"""
Pydantic models for query endpoints
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Dict, Any, Optional

from domain.rag.query_settings import QuerySettings


class QueryRequest(BaseModel):
    """Request for a Pinecone query"""
    query: str
    settings: QuerySettings = Field(default_factory=QuerySettings)

    @field_validator("query")
    @classmethod
    def _query_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("query must not be empty")
        return value


class RelevanceResultSchema(BaseModel):
    """Single relevance result"""
    relevance: str
    metadata: Dict[str, Any]


class QueryResponse(BaseModel):
    """Response from a Pinecone query"""
    query: str
    results: List[RelevanceResultSchema]
    num_results: int
    message: Optional[str] = None  # Set when the index returned no matches


class ToolInfo(BaseModel):
    """Tool descriptor"""
    name: str
    description: str
    input_schema: Dict[str, Any]
    settings_schema: Dict[str, Any]


class ToolsResponse(BaseModel):
    """Available tools"""
    tools: List[ToolInfo]

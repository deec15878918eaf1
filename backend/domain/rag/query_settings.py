"""
User settings bundle supplied with every query
"""

from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.rag.retrieval.metadata import parse_metadata_fields

_OPTIONAL_FIELDS = (
    "pinecone_api_key",
    "pinecone_index_host_url",
    "top_k",
    "pinecone_api_version",
    "namespace",
    "similarity_metric",
    "openai_api_key",
    "openai_embedding_model",
    "embedding_dimensions",
    "cohere_api_key",
    "cohere_rerank_model",
    "cohere_top_n",
    "cohere_max_tokens_per_doc",
)


class QuerySettings(BaseModel):
    """
    Credentials and options for one query.

    Keys are accepted in the plugin's camelCase form (pineconeAPIKey, topK, ...)
    or by field name. The plugin host sends every value as a string: numbers
    are coerced, blank strings mean "not set", and enableRerank is on only for
    the literal "true". Unset options fall back to core.config defaults when
    the query runs.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    # Pinecone
    pinecone_api_key: Optional[str] = Field(None, alias="pineconeAPIKey")
    pinecone_index_host_url: Optional[str] = Field(None, alias="pineconeIndexHostURL")
    top_k: Optional[int] = Field(None, alias="topK", gt=0)
    pinecone_api_version: Optional[str] = Field(None, alias="pineconeAPIVersion")
    namespace: Optional[str] = None

    # Result shaping
    enable_rerank: bool = Field(False, alias="enableRerank")
    similarity_metric: Optional[str] = Field(None, alias="similarityMetric")
    metadata_fields: Optional[List[str]] = Field(None, alias="metadataFields")

    # OpenAI
    openai_api_key: Optional[str] = Field(None, alias="openaiAPIKey")
    openai_embedding_model: Optional[str] = Field(None, alias="openaiEmbeddingModel")
    embedding_dimensions: Optional[int] = Field(None, alias="embeddingDimensions", gt=0)

    # Cohere
    cohere_api_key: Optional[str] = Field(None, alias="cohereAPIKey")
    cohere_rerank_model: Optional[str] = Field(None, alias="cohereRerankModel")
    cohere_top_n: Optional[int] = Field(None, alias="cohereTopN", gt=0)
    cohere_max_tokens_per_doc: Optional[int] = Field(None, alias="cohereMaxTokensPerDoc", gt=0)

    @field_validator(*_OPTIONAL_FIELDS, mode="before")
    @classmethod
    def _blank_as_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("enable_rerank", mode="before")
    @classmethod
    def _parse_enable_rerank(cls, value: Any) -> bool:
        return value is True or value == "true"

    @field_validator("metadata_fields", mode="before")
    @classmethod
    def _parse_metadata_fields(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_metadata_fields(value)
        if isinstance(value, list):
            return parse_metadata_fields(",".join(str(field) for field in value))
        return value

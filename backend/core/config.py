"""
Unified configuration and settings
Provider endpoints, transport options and per-query defaults
"""

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load environment variables
load_dotenv()


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Values can be set via:
    1. Environment variables (highest priority)
    2. .env file (loaded by load_dotenv())
    3. Default values below (lowest priority)

    Credentials are NOT configured here: they arrive with every query in
    the user settings bundle.
    """

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    # Transport timeout (seconds) for every provider call
    request_timeout: float = 60.0

    # ------------------------
    # Embedding: OpenAI Embedding API
    # ------------------------

    openai_api_url: str = "https://api.openai.com/v1/embeddings"

    # ------------------------
    # Vector Search: Pinecone
    # ------------------------

    default_pinecone_api_version: str = "2024-10"
    default_top_k: int = 5
    default_similarity_metric: str = "cosine"  # cosine, euclidean, dotproduct, other

    # ------------------------
    # Reranking: Cohere Rerank API
    # ------------------------

    cohere_api_url: str = "https://api.cohere.com/v2/rerank"
    cohere_client_name: str = "TypingMindPlugin"
    default_cohere_rerank_model: str = "rerank-v3.5"
    default_cohere_top_n: int = 5
    default_cohere_max_tokens_per_doc: int = 4096

    class Config:
        """
        Pydantic configuration for settings loading.

        - env_file: Which .env file to read
        - env_file_encoding: File encoding
        - extra: What to do with extra fields in .env that aren't in this class
        """
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra .env vars


# Singleton settings instance
settings = Settings()

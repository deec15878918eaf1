"""Shared fixtures: fake provider endpoints behind httpx.MockTransport."""

import json
from typing import Any, Callable, Dict, List, Tuple

import httpx
import pytest

OPENAI_HOST = "api.openai.com"
PINECONE_HOST = "test-index-abc123.svc.pinecone.io"
COHERE_HOST = "api.cohere.com"

CannedResponse = Tuple[int, Any]


def request_json(request: httpx.Request) -> Dict[str, Any]:
    return json.loads(request.content)


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class FakeProviders:
    """Routes requests by host to canned OpenAI / Pinecone / Cohere responses."""

    def __init__(self):
        self.calls: List[httpx.Request] = []
        self.embedding_response: CannedResponse = (
            200, {"data": [{"embedding": [0.1, 0.2, 0.3]}]}
        )
        self.search_response: CannedResponse = (
            200,
            {
                "matches": [
                    {"id": "a", "score": 0.1, "metadata": {"title": "A", "text": "alpha", "url": "u-a"}},
                    {"id": "b", "score": 0.5, "metadata": {"title": "B", "text": "beta", "url": "u-b"}},
                    {"id": "c", "score": 0.9, "metadata": {"title": "C", "text": "gamma"}},
                ]
            },
        )
        self.rerank_response: CannedResponse = (
            200,
            {
                "results": [
                    {"index": 2, "relevance_score": 0.98765},
                    {"index": 0, "relevance_score": 0.5},
                ]
            },
        )

    @property
    def hosts(self) -> List[str]:
        return [request.url.host for request in self.calls]

    def requests_to(self, host: str) -> List[httpx.Request]:
        return [request for request in self.calls if request.url.host == host]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        canned = {
            OPENAI_HOST: self.embedding_response,
            PINECONE_HOST: self.search_response,
            COHERE_HOST: self.rerank_response,
        }.get(request.url.host)
        if canned is None:
            return httpx.Response(404, json={"error": f"unexpected host {request.url.host}"})
        status_code, body = canned
        return httpx.Response(status_code, json=body)


@pytest.fixture
def providers() -> FakeProviders:
    return FakeProviders()


@pytest.fixture
def http_client(providers: FakeProviders) -> httpx.AsyncClient:
    return mock_client(providers)


@pytest.fixture
def user_settings() -> Dict[str, str]:
    """Settings bundle as the plugin host sends it: every value a string."""
    return {
        "pineconeAPIKey": "pc-key",
        "pineconeIndexHostURL": f"https://{PINECONE_HOST}",
        "topK": "3",
        "pineconeAPIVersion": "",
        "namespace": "",
        "enableRerank": "false",
        "similarityMetric": "cosine",
        "metadataFields": "",
        "openaiAPIKey": "sk-test",
        "openaiEmbeddingModel": "text-embedding-3-small",
        "embeddingDimensions": "",
        "cohereAPIKey": "co-key",
        "cohereRerankModel": "",
        "cohereTopN": "2",
        "cohereMaxTokensPerDoc": "",
    }

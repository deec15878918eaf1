"""Tests for the plugin tool surface."""

from unittest.mock import AsyncMock, patch

import pytest

from core.exceptions import ToolExecutionError
from domain.agentic.tools.internal_tools.pinecone_tool import (
    QueryPineconeTool,
    query_pinecone_database,
)
from domain.agentic.tools.registry import ToolRegistry
from services.base import BaseService
from services.retrieval_service import NO_RESULTS_MESSAGE, RetrievalService


class TestQueryPineconeTool:
    def test_descriptor(self, http_client):
        tool = QueryPineconeTool(RetrievalService(http_client=http_client))

        assert tool.name == "query_pinecone_database"
        assert tool.input_schema["required"] == ["query"]
        assert "pineconeAPIKey" in tool.settings_schema["properties"]
        assert "enableRerank" in tool.settings_schema["properties"]

    @pytest.mark.asyncio
    async def test_execute_returns_plain_records(self, http_client, user_settings):
        tool = QueryPineconeTool(RetrievalService(http_client=http_client))

        results = await tool.execute(query="greek letters", user_settings=user_settings)

        assert results[1] == {
            "relevance": "0.5625",
            "metadata": {"title": "B", "text": "beta", "url": "u-b"},
        }

    @pytest.mark.asyncio
    async def test_execute_returns_no_results_message(self, providers, http_client, user_settings):
        providers.search_response = (200, {"matches": []})
        tool = QueryPineconeTool(RetrievalService(http_client=http_client))

        assert await tool.execute(query="q", user_settings=user_settings) == NO_RESULTS_MESSAGE

    @pytest.mark.asyncio
    async def test_execute_wraps_failures(self, providers, http_client, user_settings):
        providers.embedding_response = (500, {"error": "boom"})
        tool = QueryPineconeTool(RetrievalService(http_client=http_client))

        with pytest.raises(ToolExecutionError, match="Failed to query Pinecone: Failed to vectorize query"):
            await tool.execute(query="q", user_settings=user_settings)


class TestPluginEntryPoint:
    @pytest.mark.asyncio
    async def test_query_pinecone_database(self, user_settings):
        with patch.object(
            RetrievalService, "query", new=AsyncMock(return_value=NO_RESULTS_MESSAGE)
        ) as mock_query:
            result = await query_pinecone_database({"query": "hello"}, user_settings)

        assert result == NO_RESULTS_MESSAGE
        mock_query.assert_awaited_once_with("hello", user_settings)


class TestToolRegistry:
    @pytest.mark.asyncio
    async def test_registers_and_executes_retrieval_tool(self, http_client, user_settings):
        registry = ToolRegistry()
        registry.register_internal_tools(RetrievalService(http_client=http_client))

        tools = registry.get_all_tools()
        results = await registry.execute_tool(
            "query_pinecone_database", {"query": "q", "user_settings": user_settings}
        )

        assert [t.name for t in tools] == ["query_pinecone_database"]
        assert len(results) == 3

    def test_ignores_services_without_tool(self):
        class OtherService(BaseService):
            pass

        registry = ToolRegistry()
        registry.register_internal_tools(OtherService())

        assert registry.get_all_tools() == []

    @pytest.mark.asyncio
    async def test_unknown_tool(self):
        with pytest.raises(ToolExecutionError, match="not found"):
            await ToolRegistry().execute_tool("missing", {})

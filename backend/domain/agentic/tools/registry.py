"""
Tool registry - central registry for all tools
"""

import logging
from typing import List, Dict, Any
from domain.agentic.tools.base import BaseTool
from domain.agentic.tools.internal_tools.pinecone_tool import QueryPineconeTool
from services.base import BaseService
from services.retrieval_service import RetrievalService
from core.exceptions import ToolExecutionError

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Central tool registry that manages all tools."""

    def __init__(self):
        self._tools: Dict[str, BaseTool] = {}
        self.logger = logger

    def _register_tool(self, tool: BaseTool):
        """Register a tool"""
        if tool.name in self._tools:
            self.logger.warning(f"Overwriting registered tool {tool.name}.")
        self._tools[tool.name] = tool
        self.logger.info(f"Registered tool: {tool.name}")

    def register_internal_tools(self, service: BaseService):
        """Register internal tools from a service."""
        tool = None
        if isinstance(service, RetrievalService):
            tool = QueryPineconeTool(service)

        if tool is None:
            self.logger.warning(
                f"No tool for service {service.__class__.__name__} found."
            )
            return

        self._register_tool(tool)
        self.logger.info(f"Registered tool from {service.__class__.__name__}: {tool.name}")

    def get_all_tools(self) -> List[BaseTool]:
        """Get all registered tools"""
        return list(self._tools.values())

    async def execute_tool(self, tool_name: str, tool_args: Dict[str, Any]) -> Any:
        """Execute a tool by name."""
        tool = self._tools.get(tool_name)
        if not tool:
            raise ToolExecutionError(f"Tool {tool_name} not found")

        return await tool.execute(**tool_args)

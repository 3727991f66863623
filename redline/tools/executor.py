import logging
from typing import Any, Dict, Iterable, List, Optional

from ..config import Config
from .apply_diff import ApplyDiffTool
from .base import Tool, ToolArgs
from .search_replace import SearchAndReplaceTool

logger = logging.getLogger(__name__)


def default_tools(config: Optional[Config] = None) -> List[Tool]:
    return [ApplyDiffTool(config), SearchAndReplaceTool(config)]


def build_tool_schemas(category: Optional[str] = None, config: Optional[Config] = None) -> List[Dict[str, Any]]:
    """Build the function-calling schema list, optionally for one category."""
    return ToolExecutor(default_tools(config)).schemas(category)


class ToolExecutor:
    """Dispatches tool calls by name."""

    def __init__(self, tools: Optional[Iterable[Tool]] = None, config: Optional[Config] = None):
        self.tools: Dict[str, Tool] = {}
        for tool in tools if tools is not None else default_tools(config):
            self.register(tool)

    def register(self, tool: Tool) -> None:
        if tool.name in self.tools:
            raise ValueError(f"Tool already registered: {tool.name}")
        self.tools[tool.name] = tool

    def schemas(self, category: Optional[str] = None) -> List[Dict[str, Any]]:
        return [
            tool.metadata.to_schema()
            for tool in self.tools.values()
            if category is None or tool.metadata.category == category
        ]

    def execute(self, tool_name: str, args: ToolArgs) -> str:
        tool = self.tools.get(tool_name)
        if not tool:
            return f"Error: Unknown tool '{tool_name}'"

        try:
            return str(tool.execute(args))
        except Exception as exc:
            logger.exception(f"Tool {tool_name} failed")
            return f"Error: {str(exc)}"

from .apply_diff import ApplyDiffTool
from .base import Tool, ToolMetadata
from .executor import ToolExecutor, build_tool_schemas, default_tools
from .search_replace import SearchAndReplaceTool

__all__ = [
    "ApplyDiffTool",
    "SearchAndReplaceTool",
    "Tool",
    "ToolExecutor",
    "ToolMetadata",
    "build_tool_schemas",
    "default_tools",
]

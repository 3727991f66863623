import logging
from typing import Any, Dict, Optional

from ..config import Config
from ..engine import apply_diff
from ..errors import ApplyDiffError, Failure
from ..request import load_args, parse_request
from .base import Tool, ToolArgs, ToolMetadata

logger = logging.getLogger(__name__)


def _search_replace_parameters() -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "path": {
                "type": "string",
                "description": "File path relative to the working directory. File must exist.",
            },
            "search": {
                "type": "string",
                "description": "Text or regex pattern to find.",
            },
            "replace": {
                "type": "string",
                "description": "Replacement text. Can use $1 capture groups when useRegex=true. Empty string deletes.",
            },
            "useRegex": {
                "type": "boolean",
                "description": "Treat search as a regular expression. Default: false.",
            },
            "caseSensitive": {
                "type": "boolean",
                "description": "Match case exactly. Default: true.",
            },
            "multiline": {
                "type": "boolean",
                "description": "In regex mode ^ and $ match at line boundaries. Default: true.",
            },
            "backup": {
                "type": "boolean",
                "description": "Create a .bak backup before modifying the file. Default: true.",
            },
        },
        "required": ["path", "search", "replace"],
    }


class SearchAndReplaceTool(Tool):
    """Replace every occurrence in a file; the whole-file companion of apply_diff."""

    metadata = ToolMetadata(
        name="search_and_replace",
        description=(
            "Performs global find-and-replace throughout an entire file. Use it for simple "
            "substitutions, renaming variables or updating paths. Unlike apply_diff it always "
            "replaces ALL occurrences. Creates a .bak backup by default."
        ),
        parameters=_search_replace_parameters(),
        category="ContentManipulation",
        tags=["write"],
    )

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def execute(self, args: ToolArgs) -> str:
        try:
            raw = load_args(args)
            if not raw.get("path") or not raw.get("search"):
                return "Error: Invalid arguments. Path and search are required."
            request = parse_request(
                {
                    "path": raw.get("path"),
                    "original": raw.get("search"),
                    "replacement": raw.get("replace"),
                    "useRegex": raw.get("useRegex"),
                    "caseSensitive": raw.get("caseSensitive"),
                    "multiline": raw.get("multiline"),
                    "backup": raw.get("backup"),
                },
                {"encoding": self.config.encoding, "backup": self.config.backup},
            )
        except ApplyDiffError as exc:
            logger.warning(f"{exc.kind}: {exc.message}")
            return f"Error: {exc.message}"

        result = apply_diff(request)
        if isinstance(result, Failure):
            return f"Error during search and replace: {result.message}"
        if result.occurrences_found == 0:
            return f"No matches found for '{request.original}' in {result.path}"
        return f"Successfully replaced {result.occurrences_applied} occurrence(s) in {result.path}"

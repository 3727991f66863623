from typing import Any, Dict, Optional

from ..config import Config
from ..engine import run_apply_diff
from .base import Tool, ToolArgs, ToolMetadata


def _apply_diff_parameters() -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "path": {
                "type": "string",
                "description": "Path of an existing file to edit.",
            },
            "original": {
                "type": "string",
                "description": "Text or regular expression to find. Must not be empty.",
            },
            "replacement": {
                "type": "string",
                "description": "Replacement text. Use $1, ${name} or $& for regex groups. Empty string deletes.",
            },
            "useRegex": {
                "type": "boolean",
                "description": "Treat original as a regular expression (^ and $ match at line boundaries; named groups as (?<name>...) or (?P<name>...)). Default: false.",
            },
            "caseSensitive": {
                "type": "boolean",
                "description": "Match case exactly. Default: true.",
            },
            "maxReplacements": {
                "type": "integer",
                "description": "Replace at most this many occurrences, first to last. -1 means all, 0 replaces none.",
            },
            "encoding": {
                "type": "string",
                "description": "Text encoding used to read and write the file, e.g. utf-8, utf-16, ascii.",
            },
            "preview": {
                "type": "boolean",
                "description": "Report the would-be changes without writing the file. Default: false.",
            },
            "previewLines": {
                "type": "integer",
                "description": "Number of change groups to show in preview mode. Default: 3.",
            },
            "rawOutput": {
                "type": "boolean",
                "description": "Return a one-line SUCCESS/FAILED summary instead of a JSON report. Default: false.",
            },
            "backup": {
                "type": "boolean",
                "description": "Write <path>.bak with the original content before changing the file. Default: true.",
            },
        },
        "required": ["path", "original"],
    }


class ApplyDiffTool(Tool):
    """Bounded find-and-replace over one file with preview and backup support."""

    metadata = ToolMetadata(
        name="apply_diff",
        description=(
            "Replaces occurrences of a literal string or regular expression in a file, "
            "optionally bounded to the first N matches. Supports a preview mode that groups "
            "the would-be changes by line without touching the file. Returns a JSON report "
            "by default, or a SUCCESS/FAILED line when rawOutput is true."
        ),
        parameters=_apply_diff_parameters(),
        category="ContentManipulation",
        tags=["write", "diff"],
    )

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def defaults(self) -> Dict[str, Any]:
        return {
            "encoding": self.config.encoding,
            "preview_lines": self.config.preview_lines,
            "raw_output": self.config.raw_output,
            "backup": self.config.backup,
        }

    def execute(self, args: ToolArgs) -> str:
        return run_apply_diff(args, self.defaults())

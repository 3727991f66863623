"""redline: bounded find-and-replace for a single file, with preview and backup."""

from .encoding import Codec, resolve_encoding
from .engine import apply_diff, run_apply_diff
from .errors import ApplyDiffError, EncodingError, Failure, FileAccessError, PatternError, ValidationError
from .formatter import format_result
from .matcher import Occurrence, find_occurrences
from .preview import PreviewGroup, PreviewReport, build_preview
from .replacer import apply_replacements
from .request import ReplacementRequest, parse_request
from .results import ReplacementOutcome

__all__ = [
    "ApplyDiffError",
    "Codec",
    "EncodingError",
    "Failure",
    "FileAccessError",
    "Occurrence",
    "PatternError",
    "PreviewGroup",
    "PreviewReport",
    "ReplacementOutcome",
    "ReplacementRequest",
    "ValidationError",
    "apply_diff",
    "apply_replacements",
    "build_preview",
    "find_occurrences",
    "format_result",
    "parse_request",
    "resolve_encoding",
    "run_apply_diff",
]

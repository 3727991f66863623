import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from .errors import ValidationError
from .preview import DEFAULT_PREVIEW_LINES
from .replacer import UNLIMITED


@dataclass(frozen=True)
class ReplacementRequest:
    """Validated, immutable input of one apply-diff invocation."""

    path: str
    original: str
    replacement: str = ""
    use_regex: bool = False
    case_sensitive: bool = True
    multiline: bool = True
    max_replacements: int = UNLIMITED
    encoding: str = ""
    preview: bool = False
    preview_lines: int = DEFAULT_PREVIEW_LINES
    raw_output: bool = False
    backup: bool = True


# request field -> (wire key, expected type)
FIELDS = {
    "path": ("path", str),
    "original": ("original", str),
    "replacement": ("replacement", str),
    "use_regex": ("useRegex", bool),
    "case_sensitive": ("caseSensitive", bool),
    "multiline": ("multiline", bool),
    "max_replacements": ("maxReplacements", int),
    "encoding": ("encoding", str),
    "preview": ("preview", bool),
    "preview_lines": ("previewLines", int),
    "raw_output": ("rawOutput", bool),
    "backup": ("backup", bool),
}

TYPE_NAMES = {str: "a string", bool: "a boolean", int: "an integer"}


def load_args(args: Union[str, Mapping[str, Any], None]) -> Dict[str, Any]:
    """Accept tool arguments either as a mapping or as a JSON object string."""
    if args is None:
        raise ValidationError("Invalid arguments: expected a JSON object")
    if isinstance(args, str):
        try:
            args = json.loads(args)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Invalid arguments: {exc.msg}") from exc
    if not isinstance(args, Mapping):
        raise ValidationError("Invalid arguments: expected a JSON object")
    return dict(args)


def _check_type(value: Any, key: str, expected: type, source: str = "") -> Any:
    # bool is a subclass of int; reject True/False where a count is expected
    if (expected is int and isinstance(value, bool)) or not isinstance(value, expected):
        raise ValidationError(f"{source}'{key}' must be {TYPE_NAMES[expected]}")
    return value


def parse_request(
    args: Union[str, Mapping[str, Any], None],
    defaults: Optional[Mapping[str, Any]] = None,
) -> ReplacementRequest:
    """Validate wire arguments into a ReplacementRequest.

    Missing optional keys take the value from defaults (keyed by request field
    name) and then the dataclass default. A JSON null counts as missing.
    Defaults are type-checked the same way as wire arguments.
    """
    raw = load_args(args)
    values: Dict[str, Any] = {}
    for field_name, (key, expected) in FIELDS.items():
        if raw.get(key) is not None:
            values[field_name] = _check_type(raw[key], key, expected)
        elif defaults and defaults.get(field_name) is not None:
            values[field_name] = _check_type(defaults[field_name], key, expected, "Configured default for ")

    path = values.get("path")
    if not path or not str(path).strip():
        raise ValidationError("Invalid arguments: 'path' is required")
    original = values.get("original")
    if original is None or original == "":
        raise ValidationError("Invalid arguments: 'original' is required and must not be empty", path=path)

    max_replacements = values.get("max_replacements", UNLIMITED)
    if max_replacements < UNLIMITED:
        raise ValidationError(
            f"'maxReplacements' must be -1 (unlimited) or a non-negative integer, got {max_replacements}",
            path=path,
        )
    preview_lines = values.get("preview_lines", DEFAULT_PREVIEW_LINES)
    if preview_lines < 0:
        raise ValidationError(f"'previewLines' must not be negative, got {preview_lines}", path=path)

    known = {name: values[name] for name in FIELDS if name in values}
    return ReplacementRequest(**known)

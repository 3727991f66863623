import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .errors import PatternError


@dataclass(frozen=True)
class Occurrence:
    """One located match of the search pattern."""

    start: int
    end: int
    line: int
    end_line: int
    text: str
    groups: Tuple[Optional[str], ...] = ()
    named_groups: Dict[str, Optional[str]] = field(default_factory=dict)

    @property
    def length(self) -> int:
        return self.end - self.start


_NAMED_GROUP_RE = re.compile(r"(?<!\\)\(\?<(?![=!])(\w+)>")
_NAMED_BACKREF_RE = re.compile(r"(?<!\\)\\k<(\w+)>")


def translate_named_groups(pattern: str) -> str:
    """Rewrite (?<name>...) and \\k<name> into Python's (?P<name>...) and (?P=name)."""
    pattern = _NAMED_GROUP_RE.sub(r"(?P<\1>", pattern)
    return _NAMED_BACKREF_RE.sub(r"(?P=\1)", pattern)


def compile_pattern(pattern: str, use_regex: bool, case_sensitive: bool = True, multiline: bool = True) -> "re.Pattern[str]":
    """Compile the search pattern; literal patterns are escaped so both modes share one scanner."""
    flags = 0
    if not case_sensitive:
        flags |= re.IGNORECASE
    if not use_regex:
        return re.compile(re.escape(pattern), flags)

    if multiline:
        flags |= re.MULTILINE
    try:
        return re.compile(translate_named_groups(pattern), flags)
    except re.error as exc:
        raise PatternError(f"Invalid regular expression '{pattern}': {exc}") from exc


def find_occurrences(
    text: str,
    pattern: str,
    use_regex: bool = False,
    case_sensitive: bool = True,
    multiline: bool = True,
) -> List[Occurrence]:
    """Return every non-overlapping occurrence in ascending offset order."""
    if not pattern:
        return []

    compiled = compile_pattern(pattern, use_regex, case_sensitive, multiline)
    occurrences: List[Occurrence] = []
    line = 1
    scanned = 0
    for match in compiled.finditer(text):
        start, end = match.span()
        line += text.count("\n", scanned, start)
        scanned = start
        occurrences.append(
            Occurrence(
                start=start,
                end=end,
                line=line,
                end_line=line + match.group(0).count("\n"),
                text=match.group(0),
                groups=match.groups() if use_regex else (),
                named_groups=match.groupdict() if use_regex else {},
            )
        )
    return occurrences

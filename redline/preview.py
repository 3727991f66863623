from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from .matcher import Occurrence
from .replacer import UNLIMITED, bounded, replacement_text

DEFAULT_PREVIEW_LINES = 3


@dataclass
class PreviewGroup:
    """A cluster of changes on the same or adjacent lines."""

    start_line: int
    end_line: int
    before: str = ""
    after: str = ""
    occurrences: List[Occurrence] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "startLine": self.start_line,
            "endLine": self.end_line,
            "occurrences": len(self.occurrences),
            "before": self.before,
            "after": self.after,
        }


@dataclass
class PreviewReport:
    groups: List[PreviewGroup]
    total_groups: int
    total_occurrences: int

    @property
    def truncated(self) -> bool:
        return len(self.groups) < self.total_groups


def _line_starts(text: str) -> List[int]:
    starts = [0]
    index = text.find("\n")
    while index != -1:
        starts.append(index + 1)
        index = text.find("\n", index + 1)
    return starts


def group_occurrences(occurrences: Sequence[Occurrence]) -> List[PreviewGroup]:
    """Cluster occurrences so that changes on touching lines share a group."""
    groups: List[PreviewGroup] = []
    for occurrence in occurrences:
        current = groups[-1] if groups else None
        if current is not None and occurrence.line <= current.end_line + 1:
            current.end_line = max(current.end_line, occurrence.end_line)
            current.occurrences.append(occurrence)
        else:
            groups.append(
                PreviewGroup(
                    start_line=occurrence.line,
                    end_line=occurrence.end_line,
                    occurrences=[occurrence],
                )
            )
    return groups


def _render(group: PreviewGroup, text: str, starts: List[int], template: str, use_regex: bool) -> None:
    span_start = starts[group.start_line - 1]
    span_end = starts[group.end_line] - 1 if group.end_line < len(starts) else len(text)

    pieces: List[str] = []
    cursor = span_start
    for occurrence in group.occurrences:
        pieces.append(text[cursor:occurrence.start])
        pieces.append(replacement_text(template, occurrence, use_regex))
        cursor = occurrence.end
    pieces.append(text[cursor:span_end])

    group.before = text[span_start:span_end]
    group.after = "".join(pieces)


def build_preview(
    text: str,
    occurrences: Sequence[Occurrence],
    template: str,
    preview_lines: int = DEFAULT_PREVIEW_LINES,
    max_replacements: int = UNLIMITED,
    use_regex: bool = False,
) -> PreviewReport:
    """Group the would-be changes and render the first preview_lines groups.

    Only the occurrences an apply would actually replace are previewed, so the
    report honours max_replacements.
    """
    selected = bounded(occurrences, max_replacements)
    groups = group_occurrences(selected)
    shown = groups[: max(preview_lines, 0)]

    starts = _line_starts(text)
    for group in shown:
        _render(group, text, starts, template, use_regex)

    return PreviewReport(groups=shown, total_groups=len(groups), total_occurrences=len(selected))

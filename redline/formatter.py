import json
from typing import Any, Dict, List

from .errors import Failure
from .results import ApplyDiffResult, ReplacementOutcome

SUCCESS = "SUCCESS"
FAILED = "FAILED"
PREVIEW_MARKER = "Preview mode"
CHANGES_LABEL = "Changes preview"


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def summarize(outcome: ReplacementOutcome) -> str:
    """One-sentence description of a successful run."""
    if outcome.is_preview:
        return (
            f"{PREVIEW_MARKER}: {_plural(outcome.occurrences_found, 'occurrence')} found, "
            f"{outcome.occurrences_applied} would be replaced in {outcome.path} (no changes written)"
        )
    if outcome.occurrences_found == 0:
        return f"No occurrences found in {outcome.path}; file left unchanged"
    if outcome.occurrences_applied == 0:
        return f"{_plural(outcome.occurrences_found, 'occurrence')} found, none replaced in {outcome.path}"
    summary = (
        f"Replaced {outcome.occurrences_applied} of "
        f"{_plural(outcome.occurrences_found, 'occurrence')} in {outcome.path}"
    )
    if outcome.backup_path:
        summary += f" (backup: {outcome.backup_path})"
    return summary


def changes_heading(outcome: ReplacementOutcome) -> str:
    report = outcome.preview
    return f"{CHANGES_LABEL} (showing {len(report.groups)} of {_plural(report.total_groups, 'group')})"


def to_report(result: ApplyDiffResult) -> Dict[str, Any]:
    """Structured report as a plain dict."""
    if isinstance(result, Failure):
        report: Dict[str, Any] = {
            "status": FAILED,
            "errorType": result.kind,
            "error": result.message,
        }
        if result.path:
            report["path"] = result.path
        return report

    report = {
        "status": SUCCESS,
        "path": result.path,
        "occurrencesFound": result.occurrences_found,
        "occurrencesApplied": result.occurrences_applied,
        "contentChanged": result.content_changed,
        "message": summarize(result),
    }
    if result.backup_path:
        report["backupPath"] = result.backup_path
    if result.is_preview:
        report["mode"] = PREVIEW_MARKER
        report["changesPreview"] = changes_heading(result)
        report["totalGroups"] = result.preview.total_groups
        report["truncated"] = result.preview.truncated
        report["previewDiff"] = [group.to_dict() for group in result.preview.groups]
    return report


def _prefixed(text: str, marker: str) -> List[str]:
    return [f"  {marker} {line}" for line in text.split("\n")]


def to_raw(result: ApplyDiffResult) -> str:
    """Terminal-facing rendering: a SUCCESS/FAILED line plus, in preview mode, the changes."""
    if isinstance(result, Failure):
        return f"{FAILED}: {result.kind}: {result.message}"

    lines = [f"{SUCCESS}: {summarize(result)}"]
    if result.is_preview:
        lines.append(f"{changes_heading(result)}:")
        for group in result.preview.groups:
            if group.start_line == group.end_line:
                lines.append(f"@@ line {group.start_line} @@")
            else:
                lines.append(f"@@ lines {group.start_line}-{group.end_line} @@")
            lines.extend(_prefixed(group.before, "-"))
            lines.extend(_prefixed(group.after, "+"))
        if result.preview.truncated:
            hidden = result.preview.total_groups - len(result.preview.groups)
            lines.append(f"... ({_plural(hidden, 'more group')})")
    return "\n".join(lines)


def format_result(result: ApplyDiffResult, raw_output: bool = False) -> str:
    if raw_output:
        return to_raw(result)
    return json.dumps(to_report(result), ensure_ascii=False, indent=2)


def is_failure(output: str) -> bool:
    """Tell a failed run apart from a successful one by its rendered output alone."""
    text = output.lstrip()
    if text.startswith(f"{FAILED}:") or text.startswith("Error"):
        return True
    if text.startswith("{"):
        try:
            return json.loads(text).get("status") == FAILED
        except (json.JSONDecodeError, AttributeError):
            return False
    return False

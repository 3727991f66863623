"""Apply-diff orchestrator.

Runs one invocation through validate, resolve encoding, read and match, then
either builds a preview (nothing is written) or replaces, backs up and writes.
Every stage failure ends the run with a Failure; the target file is never
written before its backup has succeeded.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .backup import write_backup
from .encoding import resolve_encoding
from .errors import ApplyDiffError, Failure, FileAccessError
from .formatter import format_result
from .matcher import find_occurrences
from .preview import build_preview
from .replacer import apply_replacements
from .request import ReplacementRequest, load_args, parse_request
from .results import ApplyDiffResult, ReplacementOutcome

logger = logging.getLogger(__name__)


def _target(path: str) -> Path:
    target = Path(path).expanduser()
    if not target.exists():
        raise FileAccessError(f"File not found: {path}", path=path)
    if not target.is_file():
        raise FileAccessError(f"Not a regular file: {path}", path=path)
    return target


def _run(request: ReplacementRequest) -> ReplacementOutcome:
    codec = resolve_encoding(request.encoding)
    logger.debug(f"Resolved encoding '{request.encoding or 'default'}' to {codec.name}")

    target = _target(request.path)
    content = codec.read(target)

    occurrences = find_occurrences(
        content,
        request.original,
        use_regex=request.use_regex,
        case_sensitive=request.case_sensitive,
        multiline=request.multiline,
    )
    found = len(occurrences)
    logger.debug(f"Found {found} occurrence(s) in {target}")

    if request.preview:
        report = build_preview(
            content,
            occurrences,
            request.replacement,
            preview_lines=request.preview_lines,
            max_replacements=request.max_replacements,
            use_regex=request.use_regex,
        )
        return ReplacementOutcome(
            path=str(target),
            occurrences_found=found,
            occurrences_applied=report.total_occurrences,
            content_changed=False,
            preview=report,
        )

    new_content, applied = apply_replacements(
        content,
        occurrences,
        request.replacement,
        max_replacements=request.max_replacements,
        use_regex=request.use_regex,
    )
    changed = new_content != content
    outcome = ReplacementOutcome(
        path=str(target),
        occurrences_found=found,
        occurrences_applied=applied,
        content_changed=changed,
        new_content=new_content,
    )
    if not changed:
        logger.debug(f"No content change for {target}; skipping write")
        return outcome

    # encode up front so an unencodable replacement fails before the backup is made
    data = codec.encode(new_content, str(target))
    if request.backup:
        outcome.backup_path = str(write_backup(target, content, codec))
    codec.write_bytes(target, data)
    logger.info(f"Applied {applied} replacement(s) to {target}")
    return outcome


def apply_diff(request: ReplacementRequest) -> ApplyDiffResult:
    """Run one validated request and return the outcome or a Failure."""
    try:
        return _run(request)
    except ApplyDiffError as exc:
        if exc.path is None:
            exc.path = request.path
        logger.warning(f"{exc.kind}: {exc.message}")
        return Failure.from_error(exc)


def run_apply_diff(
    args: Union[str, Mapping[str, Any], None],
    defaults: Optional[Mapping[str, Any]] = None,
) -> str:
    """Validate raw arguments, apply them and format the result as text."""
    raw_output = (defaults or {}).get("raw_output") is True
    try:
        raw = load_args(args)
    except ApplyDiffError as exc:
        logger.warning(f"{exc.kind}: {exc.message}")
        return format_result(Failure.from_error(exc), raw_output=raw_output)

    if isinstance(raw.get("rawOutput"), bool):
        raw_output = raw["rawOutput"]
    try:
        request = parse_request(raw, defaults)
    except ApplyDiffError as exc:
        logger.warning(f"{exc.kind}: {exc.message}")
        return format_result(Failure.from_error(exc), raw_output=raw_output)
    return format_result(apply_diff(request), raw_output=request.raw_output)

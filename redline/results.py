from dataclasses import dataclass
from typing import Optional, Union

from .errors import Failure
from .preview import PreviewReport


@dataclass
class ReplacementOutcome:
    """Success arm of an engine result."""

    path: str
    occurrences_found: int
    occurrences_applied: int
    content_changed: bool
    backup_path: Optional[str] = None
    new_content: Optional[str] = None
    preview: Optional[PreviewReport] = None

    ok = True

    @property
    def is_preview(self) -> bool:
        return self.preview is not None


ApplyDiffResult = Union[ReplacementOutcome, Failure]

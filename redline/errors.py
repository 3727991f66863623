from dataclasses import dataclass
from typing import Optional


class ApplyDiffError(Exception):
    """Base class for every failure the diff engine reports."""

    kind = "Error"

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path


class ValidationError(ApplyDiffError):
    kind = "ValidationError"


class EncodingError(ApplyDiffError):
    kind = "EncodingError"


class PatternError(ApplyDiffError):
    kind = "PatternError"


class FileAccessError(ApplyDiffError):
    kind = "IOError"


@dataclass(frozen=True)
class Failure:
    """Failure arm of an engine result."""

    kind: str
    message: str
    path: Optional[str] = None

    ok = False

    @classmethod
    def from_error(cls, error: ApplyDiffError) -> "Failure":
        return cls(kind=error.kind, message=error.message, path=error.path)

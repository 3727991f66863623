import codecs
import locale
from dataclasses import dataclass
from pathlib import Path

from .errors import EncodingError, FileAccessError

ALIASES = {
    "unicode": "utf-16",
    "utf16": "utf-16",
    "utf8": "utf-8",
    "latin1": "latin-1",
}


def platform_encoding() -> str:
    return locale.getpreferredencoding(False) or "utf-8"


@dataclass(frozen=True)
class Codec:
    """A resolved text encoding used for every read and write of one invocation."""

    name: str

    def decode(self, data: bytes, path: str = "") -> str:
        try:
            return data.decode(self.name)
        except UnicodeDecodeError as exc:
            raise EncodingError(
                f"Could not decode '{path}' using encoding '{self.name}': {exc.reason}",
                path=path or None,
            ) from exc

    def encode(self, text: str, path: str = "") -> bytes:
        try:
            return text.encode(self.name)
        except UnicodeEncodeError as exc:
            raise EncodingError(
                f"Could not encode content for '{path}' using encoding '{self.name}': {exc.reason}",
                path=path or None,
            ) from exc

    def read(self, path: Path) -> str:
        """Read the whole file as bytes and decode it without newline translation."""
        try:
            data = path.read_bytes()
        except FileNotFoundError as exc:
            raise FileAccessError(f"File not found: {path}", path=str(path)) from exc
        except IsADirectoryError as exc:
            raise FileAccessError(f"Not a regular file: {path}", path=str(path)) from exc
        except OSError as exc:
            raise FileAccessError(f"Failed to read {path}: {exc.strerror or exc}", path=str(path)) from exc
        return self.decode(data, str(path))

    def write(self, path: Path, text: str) -> None:
        self.write_bytes(path, self.encode(text, str(path)))

    def write_bytes(self, path: Path, data: bytes) -> None:
        try:
            path.write_bytes(data)
        except OSError as exc:
            raise FileAccessError(f"Failed to write {path}: {exc.strerror or exc}", path=str(path)) from exc


def resolve_encoding(name: str = "") -> Codec:
    """Map an encoding name to a Codec, falling back to the platform default when empty."""
    requested = (name or "").strip()
    if not requested:
        requested = platform_encoding()

    lookup_name = ALIASES.get(requested.lower(), requested)
    try:
        info = codecs.lookup(lookup_name)
    except LookupError as exc:
        raise EncodingError(f"Invalid encoding: {name}") from exc

    # base64, rot13 and friends are registered as codecs but are not text encodings
    if not getattr(info, "_is_text_encoding", True):
        raise EncodingError(f"Invalid encoding: {name}")

    return Codec(name=info.name)

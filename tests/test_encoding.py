import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from redline.encoding import resolve_encoding
from redline.errors import EncodingError, FileAccessError


class EncodingResolverTests(unittest.TestCase):
    def test_resolves_common_names(self):
        self.assertEqual(resolve_encoding("utf-8").name, "utf-8")
        self.assertEqual(resolve_encoding("UTF-16").name, "utf-16")
        self.assertEqual(resolve_encoding("ascii").name, "ascii")
        self.assertEqual(resolve_encoding("unicode").name, "utf-16")

    def test_empty_name_uses_platform_default(self):
        with patch("redline.encoding.locale.getpreferredencoding", return_value="latin-1"):
            self.assertEqual(resolve_encoding("").name, "iso8859-1")

    def test_unknown_name_is_rejected(self):
        with self.assertRaises(EncodingError) as ctx:
            resolve_encoding("invalid-encoding-name")
        self.assertEqual(str(ctx.exception), "Invalid encoding: invalid-encoding-name")

    def test_binary_transform_is_not_a_text_encoding(self):
        with self.assertRaises(EncodingError):
            resolve_encoding("base64")

    def test_read_preserves_line_endings(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            target = Path(tmp_dir) / "crlf.txt"
            target.write_bytes(b"one\r\ntwo\r\n")
            codec = resolve_encoding("utf-8")

            text = codec.read(target)
            self.assertEqual(text, "one\r\ntwo\r\n")

            codec.write(target, text)
            self.assertEqual(target.read_bytes(), b"one\r\ntwo\r\n")

    def test_undecodable_bytes_raise_encoding_error(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            target = Path(tmp_dir) / "latin.txt"
            target.write_bytes("café".encode("latin-1"))
            with self.assertRaises(EncodingError):
                resolve_encoding("utf-8").read(target)

    def test_unencodable_text_raises_encoding_error(self):
        with self.assertRaises(EncodingError):
            resolve_encoding("ascii").encode("世界", "x.txt")

    def test_missing_file_raises_file_access_error(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            with self.assertRaises(FileAccessError) as ctx:
                resolve_encoding("utf-8").read(Path(tmp_dir) / "missing.txt")
            self.assertEqual(ctx.exception.kind, "IOError")


if __name__ == "__main__":
    unittest.main()

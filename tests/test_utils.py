"""
Tests for shared utilities.
"""

import pandas as pd
import pytest

from leetboard.ingestion.errors import FileReadError
from leetboard.utils import atomic_write_csv, decode_upload, read_upload, validate_input_size


class TestDecodeUpload:
    """Tests for decode_upload function."""

    def test_decodes_utf8(self):
        assert decode_upload("name\nRiyā".encode("utf-8")) == "name\nRiyā"

    def test_strips_bom(self):
        assert decode_upload(b"\xef\xbb\xbfrollNumber,name") == "rollNumber,name"

    def test_invalid_bytes_raise(self):
        with pytest.raises(FileReadError):
            decode_upload(b"\xff\xfe\xfa")

    def test_none_raises(self):
        with pytest.raises(FileReadError):
            decode_upload(None)


class TestReadUpload:
    """Tests for read_upload function."""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "roster.csv"
        path.write_text("rollNumber,name,leetcodeUsername\n", encoding="utf-8")
        assert read_upload(path) == "rollNumber,name,leetcodeUsername\n"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileReadError):
            read_upload(tmp_path / "missing.csv")


class TestValidateInputSize:
    def test_within_limit(self):
        validate_input_size("abc", max_size=3)

    def test_over_limit(self):
        with pytest.raises(ValueError, match="too large"):
            validate_input_size("abcd", max_size=3)


class TestAtomicWriteCsv:
    def test_writes_csv(self, tmp_path):
        path = tmp_path / "out" / "leaderboard.csv"
        atomic_write_csv(pd.DataFrame({'rank': [1, 2]}), path, index=False)
        assert pd.read_csv(path)['rank'].tolist() == [1, 2]
        assert list(path.parent.iterdir()) == [path]

"""
Unit tests for the output writers (stdout stream and explicit file path).
"""

from __future__ import annotations

import io
from pathlib import Path

from certlint.adapters.output_writer import FileOutputWriter, StreamOutputWriter
from certlint.result import ErrorCode
from certlint.testing import ResultAssertions


class TestStreamOutputWriter:
    def test_writes_to_given_stream(self) -> None:
        stream = io.StringIO()

        written = ResultAssertions.assert_success(StreamOutputWriter(stream).write("abc\n"))

        assert written == 4
        assert stream.getvalue() == "abc\n"

    def test_defaults_to_stdout(self, capsys) -> None:
        ResultAssertions.assert_success(StreamOutputWriter().write("TLD_MAP = {}\n"))

        assert capsys.readouterr().out == "TLD_MAP = {}\n"

    def test_closed_stream_is_write_error(self) -> None:
        stream = io.StringIO()
        stream.close()

        result = StreamOutputWriter(stream).write("x")

        ResultAssertions.assert_failure(result, ErrorCode.WRITE_ERROR)


class TestFileOutputWriter:
    def test_creates_missing_file(self, tmp_path: Path) -> None:
        target = tmp_path / "tld_data.py"

        ResultAssertions.assert_success(FileOutputWriter(target).write("new\n"))

        assert target.read_text(encoding="utf-8") == "new\n"

    def test_truncates_existing_file(self, tmp_path: Path) -> None:
        """
        GIVEN a file holding longer previous content
        WHEN new text is written
        THEN only the new text remains
        """
        target = tmp_path / "tld_data.py"
        target.write_text("old content that is much longer\n", encoding="utf-8")

        ResultAssertions.assert_success(FileOutputWriter(target).write("new\n"))

        assert target.read_text(encoding="utf-8") == "new\n"

    def test_missing_directory_is_write_error(self, tmp_path: Path) -> None:
        target = tmp_path / "no" / "such" / "dir" / "tld_data.py"

        result = FileOutputWriter(target).write("x")

        ResultAssertions.assert_failure(result, ErrorCode.WRITE_ERROR)
        ResultAssertions.assert_failure_message_contains(result, "tld_data.py")

    def test_file_not_touched_until_write(self, tmp_path: Path) -> None:
        target = tmp_path / "tld_data.py"

        FileOutputWriter(target)

        assert not target.exists()

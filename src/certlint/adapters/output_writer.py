"""
Output adapters — where the rendered TLD module ends up.

Implements the OutputWriter port twice: standard output (the default) and an
explicit file path that is created if absent and truncated if present. The
file is opened only inside `write`, i.e. after rendering succeeded.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

import structlog

from certlint.result import ErrorCode, Result

log = structlog.get_logger()


class StreamOutputWriter:
    """Write to an already-open text stream (stdout unless told otherwise)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, text: str) -> Result[int]:
        return Result.from_computation(
            lambda: self._do_write(text),
            ErrorCode.WRITE_ERROR,
            "unable to write TLD map to output stream",
        )

    def _do_write(self, text: str) -> int:
        stream = self._stream if self._stream is not None else sys.stdout
        written = stream.write(text)
        stream.flush()
        return written


class FileOutputWriter:
    """Write to a file path, creating or truncating it."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def write(self, text: str) -> Result[int]:
        return Result.from_computation(
            lambda: self._do_write(text),
            ErrorCode.WRITE_ERROR,
            f"unable to write TLD map to {str(self._path)!r}",
        )

    def _do_write(self, text: str) -> int:
        with self._path.open("w", encoding="utf-8") as handle:
            written = handle.write(text)
        log.info("output.written", path=str(self._path), size_chars=written)
        return written

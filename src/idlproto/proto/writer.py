"""Append-only text sink for emitted proto source."""

from __future__ import annotations

import io
from typing import TextIO


class TextWriter:
    """Append-only writer over a text stream.

    Wraps any object with a ``write(str)`` method. When no stream is given an
    in-memory buffer is used and its contents are available from getvalue().

    Example:
        >>> writer = TextWriter()
        >>> writer.write('syntax = "proto3";\\n\\n')
        >>> writer.getvalue()
        'syntax = "proto3";\\n\\n'
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO = stream if stream is not None else io.StringIO()
        self.chars_written = 0

    def write(self, text: str) -> None:
        """Append text to the underlying stream."""
        if text:
            self._stream.write(text)
            self.chars_written += len(text)

    def getvalue(self) -> str:
        """Return everything written so far (in-memory buffers only).

        Raises:
            TypeError: If the writer wraps an external stream
        """
        if not isinstance(self._stream, io.StringIO):
            raise TypeError("getvalue() is only available for in-memory writers")
        return self._stream.getvalue()

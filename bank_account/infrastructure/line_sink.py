"""Module for the LineSink protocol and its stream implementation."""
import sys
from typing import Protocol, TextIO


class LineSink(Protocol):  # pylint: disable=too-few-public-methods
    """Destination of rendered text lines."""

    def write_line(self, text: str) -> None:
        """Write a single line of text."""


class StreamLineSink:  # pylint: disable=too-few-public-methods
    """Line sink writing to a text stream, standard output by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write_line(self, text: str) -> None:
        # sys.stdout is looked up on every write (pytest capsys replaces it)
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"{text}\n")

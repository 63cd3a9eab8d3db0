"""
Streaming reader for newline-delimited compact JSON log events.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Generator, Iterable, Iterator, Optional, Union

from ..dto.event import LogEvent
from ..errors import ArgumentError, StreamFormatError
from .assembler import assemble_event

logger = logging.getLogger(__name__)

# Deepest accepted nesting of arrays and objects, the top-level object included
MAX_DEPTH = 64


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _depth(value: Any) -> int:
    deepest = 0
    pending = [(value, 1)]
    while pending:
        current, depth = pending.pop()
        if isinstance(current, dict):
            current = list(current.values())
        if isinstance(current, list):
            deepest = max(deepest, depth)
            pending.extend((v, depth + 1) for v in current)
    return deepest


def _parse_object(text: str, line_number: int) -> Dict[str, Any]:
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        data = None
    if not isinstance(data, dict) or _depth(data) > MAX_DEPTH:
        raise StreamFormatError(line_number)
    return data


class LogEventReader:
    """
    Reads events from a line source, one JSON object per line.

    The reader owns the source: closing the reader closes the source.
    Blank lines are skipped. A line that fails to decode raises; the caller
    decides whether to keep reading.
    """

    def __init__(self, text: Iterable[str]):
        if text is None:
            raise ArgumentError("text must not be None")
        if isinstance(text, str):
            raise ArgumentError("text must be a line source, not a string; use read_from_string")
        self._text = text
        self._lines: Iterator[str] = iter(text)
        self._line_number = 0
        self._closed = False

    @classmethod
    def open(cls, path: Union[str, Path], encoding: str = "utf-8") -> "LogEventReader":
        """Open a log file for reading"""
        return cls(open(path, "r", encoding=encoding, errors="replace"))

    @property
    def line_number(self) -> int:
        return self._line_number

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        close = getattr(self._text, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "LogEventReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __iter__(self) -> "LogEventReader":
        return self

    def __next__(self) -> LogEvent:
        event = self.try_read()
        if event is None:
            raise StopIteration
        return event

    def try_read(self) -> Optional[LogEvent]:
        """
        Read the next event.

        Returns:
            LogEvent, or None once the source is exhausted

        Raises:
            StreamFormatError: the line is not a complete JSON object
            ClefReaderError: the object is not a valid event
        """
        line = self._next_line()
        while line is not None and not line.strip():
            line = self._next_line()
        if line is None:
            logger.debug("End of input after %d lines", self._line_number)
            return None

        return assemble_event(_parse_object(line, self._line_number), self._line_number)

    def _next_line(self) -> Optional[str]:
        if self._closed:
            return None
        try:
            line = next(self._lines)
        except StopIteration:
            return None
        self._line_number += 1
        return line

    @staticmethod
    def read_from_string(document: str) -> LogEvent:
        """Read a single event from a JSON document"""
        if document is None:
            raise ArgumentError("document must not be None")
        return assemble_event(_parse_object(document, 1), 1)

    @staticmethod
    def read_from_object(obj: Dict[str, Any]) -> LogEvent:
        """Read a single event from an already-decoded JSON object"""
        if not isinstance(obj, dict):
            raise ArgumentError("obj must be a JSON object (dict)")
        return assemble_event(obj, 1)


def read_events(path: Union[str, Path], encoding: str = "utf-8") -> Generator[LogEvent, None, None]:
    """
    Stream events from a log file

    Args:
        path: Log file path
        encoding: Text encoding of the file

    Yields:
        LogEvent: Decoded events, in file order
    """
    with LogEventReader.open(path, encoding=encoding) as reader:
        yield from reader

"""Line sources for the counter.

Every input shape accepted by ``count`` is normalized here into a stream of
decoded lines with their terminators removed. Decoding is strict UTF-8: a
line that does not decode raises ``InvalidEncodingError`` and nothing is
substituted.
"""

import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, Union

# Marker for reading from standard input
STDIN_PATH = "-"

LineSource = Union[str, bytes, bytearray, Iterable[str], Iterable[bytes], IO[Any]]


class InvalidEncodingError(ValueError):
    """Raised when a line of input is not valid UTF-8."""

    def __init__(self, line_number: int, reason: str) -> None:
        """Initialize the error.

        Args:
            line_number: 1-based number of the offending line.
            reason: Decoder message describing the failure.
        """
        super().__init__(f"Invalid UTF-8 at line {line_number}: {reason}")
        self.line_number = line_number
        self.reason = reason


def _split_keepends(data: Any, newline: Any) -> Iterator[Any]:
    """Split on ``newline`` only, keeping the terminator on each piece."""
    start = 0
    while start < len(data):
        end = data.find(newline, start)
        if end == -1:
            yield data[start:]
            return
        yield data[start : end + 1]
        start = end + 1


def _strip_text(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _strip_bytes(line: bytes) -> bytes:
    if line.endswith(b"\n"):
        line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]
    return line


def _decode(raw: bytes, line_number: int) -> str:
    try:
        return _strip_bytes(bytes(raw)).decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(line_number, e.reason) from e


def iter_lines(source: LineSource) -> Iterator[str]:
    """Yield decoded lines from ``source`` with terminators stripped.

    A line ends at ``\\n``; a ``\\r`` directly before it is dropped as well.
    A trailing piece without ``\\n`` is still a line, and empty input yields
    nothing.

    Args:
        source: A ``str``, ``bytes``, binary or text file object, or any
            iterable of ``str``/``bytes`` lines.

    Yields:
        Each line as ``str``.

    Raises:
        InvalidEncodingError: If a line is not valid UTF-8.
        TypeError: If ``source`` is not a supported line source.
    """
    if isinstance(source, str):
        for line in _split_keepends(source, "\n"):
            yield _strip_text(line)
        return

    if isinstance(source, (bytes, bytearray)):
        for number, raw in enumerate(_split_keepends(source, b"\n"), start=1):
            yield _decode(raw, number)
        return

    try:
        iterator = iter(source)
    except TypeError:
        raise TypeError(f"Unsupported line source: {type(source).__name__}") from None

    line_number = 0
    while True:
        try:
            item = next(iterator)
        except StopIteration:
            return
        except UnicodeDecodeError as e:
            # Text streams decode ahead of the line they hand out
            raise InvalidEncodingError(line_number + 1, e.reason) from e
        line_number += 1

        if isinstance(item, str):
            yield _strip_text(item)
        elif isinstance(item, (bytes, bytearray)):
            yield _decode(item, line_number)
        else:
            raise TypeError(f"Line source yielded {type(item).__name__}, expected str or bytes")


@contextmanager
def open_source(path: str | Path) -> Iterator[IO[bytes]]:
    """Open a local input for counting in binary mode.

    Args:
        path: File path, or ``-`` for standard input.

    Yields:
        Binary file object. Standard input is not closed on exit.
    """
    if str(path) == STDIN_PATH:
        yield sys.stdin.buffer
        return
    with open(path, "rb") as f:
        yield f

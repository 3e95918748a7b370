import logging
from contextlib import contextmanager
from typing import Iterator, TextIO

from utilisation.errors import DecodeError, FileOpenError

logger = logging.getLogger(__name__)


@contextmanager
def open_input(path: str) -> Iterator[TextIO]:
    """
    Open the sensor data file for reading.
    The stream is closed on every exit path, including errors raised by the caller.
    """
    try:
        stream = open(path, "r", encoding="utf-8")
    except OSError as e:
        raise FileOpenError(f"Can't open input file {path}: {e.strerror or e}", path=path) from e
    logger.debug(f"Opened input file {path}")
    with stream:
        yield stream


def iter_tokens(stream: TextIO) -> Iterator[str]:
    """
    Yield whitespace-delimited tokens, line by line. Blank lines yield nothing.
    Bytes that are not UTF-8 end the read with a DecodeError, whatever the decode policy.
    """
    try:
        for line in stream:
            yield from line.split()
    except UnicodeDecodeError as e:
        raise DecodeError(f"Input is not valid UTF-8 text ({e.reason})") from e


def format_result(percentage: float) -> str:
    return f"{percentage:f}\n"


def write_result(path: str, percentage: float) -> None:
    """Overwrite the output file with the single result line."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(format_result(percentage))
    except OSError as e:
        raise FileOpenError(f"Can't open output file {path}: {e.strerror or e}", path=path) from e
    logger.debug(f"Result written to {path}")

"""
Line-oriented reader and writer for string sets.

Format: a header line followed by one string per line. The header fixes the
length ``n`` and must match ``^[01*]+$``; it is not part of the set. Every
following line must match ``^[01*]{n}$``. A single trailing newline is
allowed, any other empty line is an error. The writer emits a header of
``n`` wildcards, so a set with no strings still records its length.

Functions:
    parse_string_set(lines): Build a StringSet from text lines.
    read_string_set(stream): Parse an open text stream (e.g. stdin).
    load_string_set(file_path): Parse a file.
    write_string_set(string_set, stream): Inverse of read_string_set.
    save_string_set(string_set, file_path): Inverse of load_string_set.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, TextIO

from wildcsp.domain.errors import DatasetValidationError
from wildcsp.domain.string_set import WILDCARD, StringSet

logger = logging.getLogger(__name__)

FILE_ERROR = "File error"

_HEADER = re.compile(r"^[01*]+$")


def parse_string_set(lines: Iterable[str]) -> StringSet:
    """
    Build a string set from text lines.

    Args:
        lines: Lines with or without their line terminators

    Returns:
        StringSet: Validated set with every line after the header

    Raises:
        DatasetValidationError: On an empty input, an empty line or a line
            that does not match the format fixed by the header
    """
    iterator = iter(lines)
    try:
        header = next(iterator).rstrip("\r\n")
    except StopIteration:
        raise DatasetValidationError("Input is empty") from None

    if not _HEADER.fullmatch(header):
        raise DatasetValidationError(
            f"Line 1 is not a header over {{0,1,*}}: {header!r}"
        )

    string_length = len(header)
    line_format = re.compile(rf"^[01*]{{{string_length}}}$")
    strings = []

    for line_num, line in enumerate(iterator, 2):
        line = line.rstrip("\r\n")
        if not line_format.fullmatch(line):
            raise DatasetValidationError(
                f"Line {line_num} does not match format [01*]{{{string_length}}}: {line!r}"
            )
        strings.append(line)

    logger.info("Read %d strings of length %d", len(strings), string_length)
    return StringSet(string_length, strings)


def read_string_set(stream: TextIO) -> StringSet:
    """Parse a string set from an open text stream."""
    return parse_string_set(stream.read().splitlines())


def load_string_set(file_path: str | Path) -> StringSet:
    """
    Parse a string set from a file.

    Raises:
        FileNotFoundError: If the file does not exist
        DatasetValidationError: If the content is malformed
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    logger.info("Loading string set: %s", file_path)
    with open(file_path, encoding="utf-8") as f:
        return read_string_set(f)


def write_string_set(string_set: StringSet, stream: TextIO) -> None:
    """Write the wildcard header, then one string per line."""
    stream.write(WILDCARD * string_set.string_length + "\n")
    for string in string_set:
        stream.write(string + "\n")


def save_string_set(string_set: StringSet, file_path: str | Path) -> Path:
    """Save a string set to ``file_path``, creating parent directories."""
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding="utf-8") as f:
        write_string_set(string_set, f)
    logger.info("Saved %d strings to %s", string_set.num_strings, file_path)
    return file_path

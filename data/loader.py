"""
File input/output for weather-observation tables.

Reads a delimited text file into decoded lines (sniffing the encoding
from a byte-order mark), checks the header, and writes query exports.
The Table itself never touches the file system.
"""

import logging
import os
import re
from typing import List, Optional

from config import (
    DEFAULT_ENCODING,
    INPUT_SUFFIX,
    REFERENCE_HEADER,
)

logger = logging.getLogger(__name__)

# Only CR, LF and CRLF end a line; other separators stay inside a field
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

# Longest BOMs first so UTF-32 LE is not mistaken for UTF-16 LE
_BOMS = (
    (b"\xff\xfe\x00\x00", "utf-32"),
    (b"\xef\xbb\xbf", "utf-8-sig"),
    (b"\xfe\xff", "utf-16"),
    (b"\xff\xfe", "utf-16"),
    (b"\x2b\x2f\x76", "utf-7"),
)


def sniff_encoding(head: bytes, default: str = DEFAULT_ENCODING) -> str:
    """Pick a codec name from the first bytes of a file.

    Args:
        head: Up to the first four bytes of the file.
        default: Codec used when no byte-order mark is present.
    """
    for bom, encoding in _BOMS:
        if head.startswith(bom):
            return encoding
    return default


def normalize_input_path(name: str) -> str:
    """Append the ``.csv`` suffix to bare file names."""
    name = name.strip()
    if not name:
        raise ValueError("File name must not be empty")
    if not name.endswith(INPUT_SUFFIX):
        name += INPUT_SUFFIX
    return name


def decode_lines(data: bytes, encoding: Optional[str] = None) -> List[str]:
    """Decode raw file bytes into text lines without terminators."""
    if encoding is None:
        encoding = sniff_encoding(data[:4])
    logger.debug("Decoding %d bytes as %s", len(data), encoding)
    text = data.decode(encoding)
    # utf-16/utf-32 codecs consume the BOM; utf-7 does not
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = _LINE_BREAK.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def validate_header(lines: List[str]) -> bool:
    """Check the header line of a loaded file.

    Raises:
        ValueError: If there is no header or it is blank.

    Returns:
        True if the header matches the weatherAUS reference header.
        A different header is accepted but logged as a warning because
        the fixed column positions may then point at the wrong data.
    """
    if not lines or not lines[0].strip():
        raise ValueError("File has no header line")
    if lines[0].strip() != REFERENCE_HEADER:
        logger.warning(
            "Header does not match the weatherAUS layout; data may be read incorrectly"
        )
        return False
    return True


def read_lines(path: str, encoding: Optional[str] = None) -> List[str]:
    """Read a data file into decoded lines and validate its header.

    Args:
        path: Path to the delimited text file.
        encoding: Codec override; sniffed from the BOM when omitted.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be decoded or has no header.
    """
    with open(path, "rb") as f:
        data = f.read()
    try:
        lines = decode_lines(data, encoding)
    except UnicodeDecodeError as e:
        raise ValueError(
            f"File is corrupted or uses an unsupported encoding: {path}"
        ) from e
    validate_header(lines)
    logger.info("Read %d lines from %s", len(lines), path)
    return lines


def write_export(path: str, content: str, encoding: str = DEFAULT_ENCODING) -> str:
    """Write export text to *path*, overwriting any existing file.

    Returns:
        The absolute path that was written.
    """
    if not os.path.basename(path.strip()):
        raise ValueError(f"Invalid file name: {path!r}")
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(content)
    full_path = os.path.abspath(path)
    logger.info("Saved export to %s", full_path)
    return full_path

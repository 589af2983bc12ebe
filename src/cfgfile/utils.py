"""Utility functions for cfgfile."""

import logging
import re
from typing import Sequence

from chardet import detect as guess_codec

logger = logging.getLogger(__name__)

# Comment markers only count when preceded by a space or a TAB
COMMENT_MARKERS = (" ;", "\t;", " #", "\t#")
SEPARATORS = ("=", ":")
FULL_LINE_COMMENT_CHARS = ("#", ";")

# ASCII-only number literals, no underscores and no surrounding whitespace
INT_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def strip_comments(line: str) -> str:
    """Cut a line at its first trailing comment.

    Args:
        line: Raw value text  # (everything after the separator, or a continuation line)

    Returns:
        Text before the earliest whitespace-preceded ``;`` or ``#``
    """
    positions = [pos for pos in (line.find(marker) for marker in COMMENT_MARKERS) if pos != -1]
    if not positions:
        return line
    return line[: min(positions)]


def first_index(text: str, delimiters: Sequence[str] = SEPARATORS) -> int:
    """Find the leftmost position of any delimiter character.

    Args:
        text: Text to scan
        delimiters: Single characters to look for

    Returns:
        Index of the first match, or -1 if none occurs
    """
    for i, char in enumerate(text):
        if char in delimiters:
            return i
    return -1


def decode_bytes(raw: bytes, encoding: str | None = None) -> str:
    """Decode configuration bytes to text.

    Args:
        raw: Undecoded file content
        encoding: Codec to use; guessed when omitted

    Returns:
        Decoded text

    Raises:
        UnicodeDecodeError: If an explicit ``encoding`` does not fit the content
    """
    if encoding is not None:
        return raw.decode(encoding)

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        pass

    codec = guess_codec(raw)
    guessed = codec.get("encoding") if codec else None
    logger.debug("content is not utf-8, chardet guessed %s", codec)
    if guessed:
        try:
            return raw.decode(guessed)
        except (UnicodeDecodeError, LookupError):
            pass

    # latin-1 maps every byte, so it always succeeds
    logger.warning("could not determine encoding (guess: %s), decoding as latin-1", guessed)
    return raw.decode("latin-1")

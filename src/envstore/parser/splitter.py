"""
Entry splitting and the per-line parse pipeline.

A raw line goes through terminator removal, the full-line comment check,
inline comment stripping and the ``=`` split. Anything that is not an entry
comes back as ``None``; malformed lines are never errors.
"""

from __future__ import annotations

from dataclasses import dataclass

from envstore.parser.comments import COMMENT_CHAR, strip_comment
from envstore.parser.normalizer import normalize, strip_line_terminator, truncate_bytes

SEPARATOR = "="
MAX_LINE_LENGTH = 1024


@dataclass(frozen=True)
class ParsedLine:
    """A key and its normalized, not yet resolved, value."""

    key: str
    raw_value: str


def split_entry(line: str) -> ParsedLine | None:
    """
    Split a comment-stripped line at its first ``=``.

    Returns:
        ParsedLine with normalized key and value, or None when the line has
        no separator or the key normalizes to an empty string
    """
    raw_key, sep, raw_value = line.partition(SEPARATOR)
    if not sep:
        return None

    key = normalize(raw_key)
    if not key:
        return None

    return ParsedLine(key=key, raw_value=normalize(raw_value))


def parse_line(raw: str, max_line_length: int = MAX_LINE_LENGTH) -> ParsedLine | None:
    """
    Run one physical line through the whole parse pipeline.

    Args:
        raw: Line as read from the file, terminator included
        max_line_length: Content beyond this many UTF-8 bytes is discarded

    Returns:
        ParsedLine, or None if the line is blank, a comment, or malformed
    """
    line = truncate_bytes(strip_line_terminator(raw), max_line_length)

    if not line or line.startswith(COMMENT_CHAR):
        return None

    return split_entry(strip_comment(line))

"""
Env line parsing: normalization, comment stripping and entry splitting.
"""

from envstore.parser.comments import strip_comment
from envstore.parser.normalizer import normalize, strip_line_terminator, truncate_bytes
from envstore.parser.splitter import MAX_LINE_LENGTH, ParsedLine, parse_line, split_entry

__all__ = [
    "MAX_LINE_LENGTH",
    "ParsedLine",
    "normalize",
    "parse_line",
    "split_entry",
    "strip_comment",
    "strip_line_terminator",
    "truncate_bytes",
]

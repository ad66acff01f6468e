"""
Line normalization.

Strips line terminators, surrounding whitespace and one layer of
surrounding double quotes.
"""

WHITESPACE = " \t\r\n"
QUOTE = '"'


def strip_line_terminator(line: str) -> str:
    """Remove exactly one trailing ``\\r\\n`` or ``\\n`` from a raw line."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def normalize(text: str) -> str:
    """
    Trim whitespace and a single layer of surrounding double quotes.

    Quotes are removed only when both the first and last character of the
    trimmed text are ``"``; a lone unmatched quote is left as-is so that
    truncated or unbalanced lines never fault.

    Args:
        text: Raw key or value text

    Returns:
        Normalized text, possibly empty
    """
    text = text.strip(WHITESPACE)
    if len(text) >= 2 and text[0] == QUOTE and text[-1] == QUOTE:
        return text[1:-1]
    return text


def truncate_bytes(text: str, limit: int) -> str:
    """
    Cut ``text`` so its UTF-8 encoding is at most ``limit`` bytes.

    A multibyte character split by the cut is dropped whole.
    """
    encoded = text.encode("utf-8")
    if len(encoded) <= limit:
        return text
    return encoded[:limit].decode("utf-8", errors="ignore")

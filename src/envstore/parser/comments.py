"""Inline comment stripping that honours double-quoted literals."""

COMMENT_CHAR = "#"


def strip_comment(line: str) -> str:
    """
    Cut ``line`` at the first ``#`` that is not inside a quoted literal.

    Every ``"`` toggles the quoted state. With an odd number of quotes the
    state simply stays toggled to the end of the line.
    """
    inside_quotes = False
    for index, char in enumerate(line):
        if char == '"':
            inside_quotes = not inside_quotes
        elif char == COMMENT_CHAR and not inside_quotes:
            return line[:index]
    return line

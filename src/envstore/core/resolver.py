"""
Placeholder resolution.

Expands ``${name}`` references inside a value in a single forward pass.
Each name is looked up at substitution time, so only entries loaded on
earlier lines resolve to something non-empty. Substituted text is emitted
as-is and never re-scanned, which bounds the work to one pass over the
input no matter what the referenced values contain.
"""

from __future__ import annotations

from collections.abc import Callable

from envstore.parser.normalizer import truncate_bytes

PLACEHOLDER_OPEN = "${"
PLACEHOLDER_CLOSE = "}"
MAX_NAME_LENGTH = 255

Lookup = Callable[[str], "str | None"]


class PlaceholderResolver:
    """
    Resolve ``${name}`` placeholders against a lookup callable.

    Usage:
        resolver = PlaceholderResolver(store.lookup)
        resolver.resolve("${HOST}:${PORT}")
    """

    def __init__(
        self,
        lookup: Lookup,
        max_name_length: int = MAX_NAME_LENGTH,
        keep_unterminated: bool = False,
    ):
        """
        Args:
            lookup: Returns the current value bound to a name, or None
            max_name_length: Names longer than this many UTF-8 bytes are
                truncated before lookup
            keep_unterminated: Emit an unterminated ``${...`` tail literally
                instead of dropping it
        """
        self.lookup = lookup
        self.max_name_length = max_name_length
        self.keep_unterminated = keep_unterminated

    def resolve(self, value: str) -> str:
        """
        Substitute every placeholder in ``value``.

        Unknown names become the empty string. An unterminated ``${`` ends
        the scan; its tail is dropped unless keep_unterminated is set.
        """
        parts: list[str] = []
        position = 0

        while True:
            start = value.find(PLACEHOLDER_OPEN, position)
            if start == -1:
                parts.append(value[position:])
                break

            parts.append(value[position:start])

            end = value.find(PLACEHOLDER_CLOSE, start + len(PLACEHOLDER_OPEN))
            if end == -1:
                if self.keep_unterminated:
                    parts.append(value[start:])
                break

            name = self._cap(value[start + len(PLACEHOLDER_OPEN) : end])
            resolved = self.lookup(name)
            if resolved is not None:
                parts.append(resolved)

            position = end + len(PLACEHOLDER_CLOSE)

        return "".join(parts)

    def _cap(self, name: str) -> str:
        return truncate_bytes(name, self.max_name_length)


def find_placeholders(value: str, max_name_length: int = MAX_NAME_LENGTH) -> list[str]:
    """List the placeholder names referenced by ``value``, in order of appearance."""
    names: list[str] = []
    PlaceholderResolver(lambda name: names.append(name), max_name_length=max_name_length).resolve(value)
    return names

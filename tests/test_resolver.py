"""
Tests for ${NAME} placeholder resolution.
"""

import pytest

from envstore.core.resolver import PlaceholderResolver, find_placeholders


def make_resolver(values, **kwargs):
    return PlaceholderResolver(values.get, **kwargs)


@pytest.mark.unit
class TestResolve:
    def test_no_placeholders(self):
        assert make_resolver({}).resolve("plain value") == "plain value"

    def test_single_placeholder(self):
        assert make_resolver({"A": "foo"}).resolve("${A}") == "foo"

    def test_embedded_placeholder(self):
        resolver = make_resolver({"HOST": "localhost", "PORT": "5432"})
        assert resolver.resolve("postgres://${HOST}:${PORT}/db") == "postgres://localhost:5432/db"

    def test_adjacent_placeholders(self):
        assert make_resolver({"A": "1", "B": "2"}).resolve("${A}${B}") == "12"

    def test_unknown_name_resolves_empty(self):
        assert make_resolver({}).resolve("x${MISSING}y") == "xy"

    def test_empty_name(self):
        assert make_resolver({}).resolve("a${}b") == "ab"

    def test_dollar_without_brace_is_literal(self):
        assert make_resolver({"A": "1"}).resolve("cost $5 and $A") == "cost $5 and $A"

    def test_substituted_text_not_rescanned(self):
        resolver = make_resolver({"A": "${B}", "B": "boom"})
        assert resolver.resolve("${A}") == "${B}"

    def test_self_reference_does_not_loop(self):
        resolver = make_resolver({"A": "${A}${A}"})
        assert resolver.resolve("${A}") == "${A}${A}"

    def test_unterminated_tail_dropped(self):
        assert make_resolver({"A": "1"}).resolve("keep ${A} drop ${B and more") == "keep 1 drop "

    def test_unterminated_tail_kept_when_enabled(self):
        resolver = make_resolver({"A": "1"}, keep_unterminated=True)
        assert resolver.resolve("keep ${A} drop ${B and more") == "keep 1 drop ${B and more"

    def test_nested_open_uses_first_close(self):
        # Name is "${A" up to the first "}", the trailing "}" is literal text
        resolver = make_resolver({"A": "inner", "${A": "odd"})
        assert resolver.resolve("${${A}}") == "odd}"

    def test_long_name_truncated_before_lookup(self):
        seen = []

        def lookup(name):
            seen.append(name)
            return "v"

        resolver = PlaceholderResolver(lookup, max_name_length=255)
        assert resolver.resolve("${" + "N" * 300 + "}") == "v"
        assert seen == ["N" * 255]

    def test_lookup_called_per_placeholder(self):
        calls = []

        def lookup(name):
            calls.append(name)
            return None

        PlaceholderResolver(lookup).resolve("${A}-${B}-${A}")
        assert calls == ["A", "B", "A"]


@pytest.mark.unit
class TestFindPlaceholders:
    def test_lists_names_in_order(self):
        assert find_placeholders("${A}/${B}/${A}") == ["A", "B", "A"]

    def test_ignores_unterminated(self):
        assert find_placeholders("${A} ${B") == ["A"]

    def test_caps_names(self):
        assert find_placeholders("${ABCDEF}", max_name_length=3) == ["ABC"]


@pytest.mark.unit
class TestNameCapInBytes:
    def test_multibyte_name_truncated_by_bytes(self):
        seen = []

        def lookup(name):
            seen.append(name)
            return None

        PlaceholderResolver(lookup, max_name_length=255).resolve("${" + "ü" * 200 + "}")
        # "ü" is two bytes in UTF-8, so 127 characters fit in 255 bytes
        assert seen == ["ü" * 127]
        assert len(seen[0].encode("utf-8")) <= 255

"""
Тесты разбора селекторов на сегменты и аргументов псевдо-классов.
"""

import pytest

from pseudo_select.errors import SelectorSyntaxError
from pseudo_select.parsers.pseudo import (
    PseudoCall,
    SegmentKind,
    coerce_argument,
    parse_arguments,
    parse_pseudo,
    tokenize,
)


def _kinds(selector):
    return [(s.kind, s.text) for s in tokenize(selector)]


class TestCoerceArgument:
    """Тесты приведения аргументов."""

    def test_digits_become_int(self):
        assert coerce_argument("1") == 1
        assert isinstance(coerce_argument("1"), int)
        assert coerce_argument("007") == 7

    def test_other_tokens_stay_strings(self):
        assert coerce_argument("abc") == "abc"
        assert coerce_argument("-1") == "-1"
        assert coerce_argument("1.5") == "1.5"
        assert coerce_argument("1a") == "1a"

    def test_non_ascii_digits_stay_strings(self):
        # Арабско-индийские цифры
        assert coerce_argument("١٢") == "١٢"


class TestParseArguments:
    """Тесты разбора списка аргументов."""

    def test_no_parentheses(self):
        assert parse_arguments(None) == ()

    def test_mixed_arguments(self):
        assert parse_arguments("1, end") == (1, "end")

    def test_empty_tokens_dropped(self):
        assert parse_arguments(" ,2,, ") == (2,)

    def test_whitespace_inside_token(self):
        with pytest.raises(SelectorSyntaxError):
            parse_arguments("#main section")


class TestParsePseudo:
    """Тесты разбора одиночного псевдо-класса."""

    def test_name_only(self):
        assert parse_pseudo(":first") == PseudoCall("first")

    def test_with_argument(self):
        assert parse_pseudo(":eq(1)") == PseudoCall("eq", (1,))

    def test_string_argument(self):
        assert parse_pseudo(":closest(section)") == PseudoCall("closest", ("section",))

    def test_not_a_single_pseudo(self):
        with pytest.raises(SelectorSyntaxError):
            parse_pseudo("section:first")


class TestTokenize:
    """Тесты разбиения селектора на сегменты."""

    def test_plain_only(self):
        assert _kinds("section p") == [(SegmentKind.PLAIN, "section p")]

    def test_pseudo_after_plain(self):
        assert _kinds("section p:first") == [
            (SegmentKind.PLAIN, "section p"),
            (SegmentKind.PSEUDO, ":first"),
        ]

    def test_plain_after_pseudo(self):
        segments = tokenize("table:first tr")
        assert [s.text for s in segments] == ["table", ":first", "tr"]
        assert segments[1].call == PseudoCall("first")
        assert segments[2].position == 12

    def test_adjacent_pseudos(self):
        segments = tokenize("tr:eq(1):slice(0,2)")
        assert [s.call for s in segments[1:]] == [
            PseudoCall("eq", (1,)),
            PseudoCall("slice", (0, 2)),
        ]

    def test_leading_pseudo(self):
        assert _kinds(":last h3") == [
            (SegmentKind.PSEUDO, ":last"),
            (SegmentKind.PLAIN, "h3"),
        ]

    def test_colon_inside_attribute(self):
        assert _kinds('a[href="http://x"]:first') == [
            (SegmentKind.PLAIN, 'a[href="http://x"]'),
            (SegmentKind.PSEUDO, ":first"),
        ]

    def test_escaped_colon(self):
        assert _kinds(r"#a\:b p") == [(SegmentKind.PLAIN, r"#a\:b p")]

    def test_whitespace_in_arguments(self):
        with pytest.raises(SelectorSyntaxError) as exc_info:
            tokenize(".x:closest(#main section) p")
        assert exc_info.value.selector == ".x:closest(#main section) p"

    @pytest.mark.parametrize(
        "selector",
        ["", "   ", "p:", "p:eq(1", "p:has(a:eq(1))", 'a[href="x', "a[href"],
    )
    def test_syntax_errors(self, selector):
        with pytest.raises(SelectorSyntaxError):
            tokenize(selector)

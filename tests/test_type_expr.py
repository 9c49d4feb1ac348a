"""Tests for the documentation type-phrase parser."""

import pytest

from botapigen.parser.type_expr import is_ambiguous, parse_type


class TestScalars:
    @pytest.mark.parametrize(
        ("phrase", "expected"),
        [
            ("String", "string"),
            ("Boolean", "boolean"),
            ("True", "true"),
            ("Integer", "number"),
            ("Float", "number"),
            ("Float number", "number"),
        ],
    )
    def test_alias(self, phrase, expected):
        assert parse_type(phrase) == expected

    def test_named_type_passes_through(self):
        assert parse_type("Message") == "Message"

    def test_link_markup_is_stripped(self):
        assert parse_type('<a href="#message">Message</a>') == "Message"

    def test_surrounding_whitespace(self):
        assert parse_type("  Integer\n") == "number"


class TestSequences:
    def test_array_of_string(self):
        assert parse_type("Array of String") == "string[]"

    def test_nested_array(self):
        assert parse_type('Array of Array of <a href="#photosize">PhotoSize</a>') == "PhotoSize[][]"

    def test_array_of_alternation_is_parenthesized(self):
        assert parse_type("Array of Integer or String") == "(number | string)[]"

    def test_nested_array_of_alternation(self):
        assert parse_type("Array of Array of A or B") == "(A | B)[][]"


class TestAlternation:
    def test_two_alternatives(self):
        assert parse_type("Integer or String") == "number | string"

    def test_three_alternatives(self):
        assert parse_type("InputFile or String or Boolean") == "InputFile | string | boolean"

    def test_alternative_with_array(self):
        assert parse_type("String or Array of String") == "string | string[]"

    def test_linked_alternatives(self):
        phrase = (
            '<a href="#inlinekeyboardmarkup">InlineKeyboardMarkup</a> or '
            '<a href="#replykeyboardmarkup">ReplyKeyboardMarkup</a>'
        )
        assert parse_type(phrase) == "InlineKeyboardMarkup | ReplyKeyboardMarkup"


class TestIdempotency:
    @pytest.mark.parametrize(
        "phrase",
        ["String", "Boolean", "True", "Integer", "Float number", "Message", "InputFile"],
    )
    def test_simple_phrases(self, phrase):
        once = parse_type(phrase)
        assert parse_type(once) == once

    @pytest.mark.parametrize(
        "expr",
        ["number | string", "string[]", "(A | B)[]", "PhotoSize[][]"],
    )
    def test_normalized_expressions_are_fixed_points(self, expr):
        assert parse_type(expr) == expr


class TestAmbiguity:
    def test_array_of_alternation(self):
        assert is_ambiguous("Array of Integer or String") is True

    def test_alternation_with_array_member(self):
        assert is_ambiguous("String or Array of String") is False

    def test_plain(self):
        assert is_ambiguous("Array of String") is False
        assert is_ambiguous("Integer or String") is False

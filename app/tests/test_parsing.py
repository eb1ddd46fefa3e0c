"""
Tests for delimiter resolution and tokenization.
"""

import pytest

from string_calculator.delimiters import (
    DEFAULT_DELIMITERS,
    ParsedInput,
    parse_declaration,
    resolve_delimiters,
)
from string_calculator.tokenizer import build_pattern, tokenize


class TestParseDeclaration:
    """Tests for the text between // and the first newline."""

    @pytest.mark.parametrize("declaration,expected", [
        (";", (";",)),
        ("sep", ("sep",)),
        ("[***]", ("***",)),
        ("[*][%]", ("*", "%")),
        ("[*][%][##][}]", ("*", "%", "##", "}")),
        ("[*][*]", ("*",)),
        ("[][;]", (";",)),
        ("", ()),
        ("[]", ()),
    ])
    def test_declared_delimiters(self, declaration, expected):
        assert parse_declaration(declaration) == expected

    def test_unterminated_bracket_is_literal(self):
        """Should use an unterminated bracket group as plain text."""
        assert parse_declaration("[*") == ("[*",)


class TestResolveDelimiters:
    """Tests for header detection."""

    def test_no_header_uses_defaults(self):
        parsed = resolve_delimiters("1,2\n3")
        assert parsed == ParsedInput(DEFAULT_DELIMITERS, "1,2\n3")

    def test_single_custom_delimiter(self):
        """Should replace comma with the custom delimiter, keeping newline."""
        parsed = resolve_delimiters("//;\n1;2")
        assert parsed.delimiters == (";", "\n")
        assert parsed.body == "1;2"

    def test_bracketed_delimiters(self):
        parsed = resolve_delimiters("//[*][%]\n1*2%3")
        assert parsed.delimiters == ("*", "%", "\n")
        assert parsed.body == "1*2%3"

    def test_header_without_newline_is_body(self):
        """Should not treat "//" without a newline as a header."""
        parsed = resolve_delimiters("//;")
        assert parsed.delimiters == DEFAULT_DELIMITERS
        assert parsed.body == "//;"

    def test_empty_header_uses_defaults(self):
        parsed = resolve_delimiters("//\n1,2")
        assert parsed.delimiters == DEFAULT_DELIMITERS
        assert parsed.body == "1,2"


class TestTokenize:
    """Tests for splitting the body."""

    def test_drops_empty_tokens(self):
        assert tokenize(",1,,2,\n", [",", "\n"]) == ["1", "2"]

    def test_special_characters_are_literal(self):
        """Should never treat delimiter text as a pattern."""
        assert tokenize("1.2", ["*"]) == ["1.2"]
        assert tokenize("1*2", ["*"]) == ["1", "2"]
        assert tokenize("1+2|3", ["+", "|"]) == ["1", "2", "3"]
        assert tokenize("1[]2", ["[]"]) == ["1", "2"]

    def test_strips_whitespace(self):
        assert tokenize(" 1 , 2 ", [","]) == ["1", "2"]

    def test_empty_body(self):
        assert tokenize("", [","]) == []

    def test_requires_a_delimiter(self):
        with pytest.raises(ValueError):
            build_pattern([])

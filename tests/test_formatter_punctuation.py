"""
Punctuation adjacency tests

Tests the lookahead that drops the space before punctuation, and that
the lookahead never touches formatter state.
"""

import pytest

from htmlrender.lib.formatter import Formatter, document_format, punctuation_follows
from htmlrender.lib.tokenizer import tokenize
from htmlrender.models.tokens import TagToken, TextToken
from htmlrender.models.directives import Modifier, TextDirective


def tag(text: str) -> TagToken:
    return next(tokenize(text))


class TestLookahead:
    """Test punctuation_follows directly"""

    def test_punctuation_next(self):
        """Immediate punctuation is found"""
        assert punctuation_follows([TextToken("word"), TextToken(".")], 1)

    def test_word_next(self):
        """A word stops the lookahead"""
        assert not punctuation_follows([TextToken("a"), TextToken("b")], 1)

    def test_skips_style_tags(self):
        """Style and heading tags are looked past"""
        tokens = [TextToken("a"), tag("<i>"), tag("</i>"), tag("</h3>"), TextToken(",")]
        assert punctuation_follows(tokens, 1)

    def test_structural_tag_stops(self):
        """Structural tags end the lookahead like any other non-style tag"""
        assert not punctuation_follows([tag("</body>"), TextToken(".")], 0)

    @pytest.mark.parametrize("stop", ["<br>", "<p>", "</p>", "<hr>", "<q>", "</q>", "<span>"])
    def test_stops_at_printing_tags(self, stop):
        """Tags that print something end the lookahead"""
        assert not punctuation_follows([tag(stop), TextToken(".")], 0)

    def test_closing_quote_keeps_space(self):
        """A word before a closing quote keeps its trailing space"""
        assert not punctuation_follows([tag("</q>"), TextToken("x")], 0)

    def test_end_of_input(self):
        """Nothing left means no punctuation"""
        assert not punctuation_follows([TextToken("a")], 1)
        assert not punctuation_follows([TextToken("a"), tag("</b>")], 1)

    def test_multi_character_not_punctuation(self):
        """Only single-character punctuation counts"""
        assert not punctuation_follows([TextToken("...")], 0)


class TestAdjacentPrinting:
    """Test spacing in formatted output"""

    def test_punctuation_past_style_tag(self):
        """word <b> . prints 'word' without a space before bold '.'"""
        tokens = [TextToken("word"), tag("<b>"), TextToken(".")]
        assert Formatter(tokens).format() == [
            TextDirective("word", Modifier.NONE),
            TextDirective(". ", Modifier.BOLD),
        ]

    def test_sentence(self):
        """Commas and periods attach to the word before them"""
        assert document_format("Hello, world.") == [
            TextDirective("Hello", Modifier.NONE),
            TextDirective(", ", Modifier.NONE),
            TextDirective("world", Modifier.NONE),
            TextDirective(". ", Modifier.NONE),
        ]

    def test_consecutive_punctuation(self):
        """Punctuation followed by punctuation drops its space too"""
        texts = [d.text for d in document_format("Really?!")]
        assert texts == ["Really", "?", "! "]

    def test_closing_style_then_punctuation(self):
        """Bold word before a plain period drops its space"""
        assert document_format("<b>bold</b>.") == [
            TextDirective("bold", Modifier.BOLD),
            TextDirective(". ", Modifier.NONE),
        ]


class TestLookaheadPurity:
    """The probe leaves formatting unchanged"""

    def test_probe_then_format(self):
        """Probing every position first does not alter the output"""
        source = "<h2>Title</h2><p>One <i>two</i>, three <b>four</b>.</p>"
        tokens = list(tokenize(source))
        expected = Formatter(tokens).format()

        formatter = Formatter(tokens)
        for index in range(len(tokens) + 1):
            punctuation_follows(formatter.tokens, index)
        assert formatter.state.current_modifier is Modifier.NONE
        assert formatter.state.line_budget_used == 0
        assert formatter.format() == expected

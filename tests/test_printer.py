"""
Printer tests

Tests directive-to-call mapping and the plain-text printer.
"""

import pytest

from htmlrender.config import AppSettings
from htmlrender.lib.formatter import document_format
from htmlrender.lib.printer import RecordingPrinter, TextPrinter, directives_render
from htmlrender.models.directives import (
    Modifier,
    TextDirective,
    LineBreak,
    ParagraphBreak,
    HorizontalRule,
    Quote,
)


class TestDirectiveMapping:
    """Each directive maps to exactly one printer call"""

    def test_calls_in_order(self):
        """Directives become printer calls in emission order"""
        printer = RecordingPrinter()
        count = directives_render(
            [
                TextDirective("plain ", Modifier.NONE),
                TextDirective("bold", Modifier.BOLD),
                Quote(),
                LineBreak(),
                ParagraphBreak(),
                HorizontalRule(),
            ],
            printer,
        )
        assert count == 6
        assert printer.calls == [
            ("print", ("plain ",)),
            ("printStyled", ("bold", Modifier.BOLD)),
            ("print", ('"',)),
            ("newline", ()),
            ("paragraphBreak", ()),
            ("horizontalRule", ()),
        ]

    def test_unknown_directive(self):
        """Anything else is rejected"""
        with pytest.raises(TypeError, match="Unknown print directive"):
            directives_render(["text"], RecordingPrinter())


class TestTextPrinter:
    """Test plain-text rendering"""

    def test_document(self):
        """Headings, paragraphs and rules lay out on their own lines"""
        printer = TextPrinter(ansi=False, rule="-----")
        directives_render(
            document_format("<h1>Title</h1><p>Hello, <b>world</b>.</p><hr>Bye"), printer
        )
        assert printer.text() == "Title\n\nHello, world.\n\n-----\nBye\n"

    def test_quotes_and_breaks(self):
        """Quote marks print inline, <br> ends the line"""
        printer = TextPrinter(ansi=False, rule="-")
        directives_render(document_format("He said <q>hi</q>.<br>Next"), printer)
        assert printer.text() == 'He said "hi ".\nNext\n'

    def test_closing_quote_then_word(self):
        """A word after a closing quote mark stays separated"""
        printer = TextPrinter(ansi=False, rule="-")
        directives_render(document_format("<q>hello</q> world"), printer)
        assert printer.text() == '"hello " world\n'

    def test_preformatted_lines(self):
        """Each preformatted token lands on its own line"""
        printer = TextPrinter(ansi=False, rule="-")
        directives_render(document_format("<pre>a b</pre>"), printer)
        assert printer.text() == "a\nb\n"

    def test_paragraph_breaks_do_not_stack(self):
        """</p><p> leaves a single blank line"""
        printer = TextPrinter(ansi=False, rule="-")
        directives_render(document_format("<p>one</p><p>two</p>"), printer)
        assert printer.text() == "one\n\ntwo\n"

    def test_empty(self):
        """No directives renders an empty document"""
        assert TextPrinter(ansi=False, rule="-").text() == ""

    def test_ansi_styles(self):
        """Styled text is wrapped in escapes, trailing space left outside"""
        printer = TextPrinter(ansi=True, rule="-")
        printer.printStyled("bold ", Modifier.BOLD)
        printer.print("plain")
        assert printer.text() == "\x1b[1mbold\x1b[0m plain\n"


class TestSettings:
    """Test configuration defaults and environment overrides"""

    def test_defaults(self):
        """Defaults match the shared line budget and an 80 column rule"""
        settings = AppSettings()
        assert settings.line_budget == 2400
        assert settings.rule_make() == "-" * 80

    def test_rule_make(self):
        """Rule uses the configured character and width"""
        assert AppSettings(rule_width=3, rule_char="=").rule_make() == "==="

    def test_environment_override(self, monkeypatch):
        """HTMLRENDER_ variables override defaults"""
        monkeypatch.setenv("HTMLRENDER_LINE_BUDGET", "4800")
        monkeypatch.setenv("HTMLRENDER_ANSI_STYLES", "true")
        settings = AppSettings()
        assert settings.line_budget == 4800
        assert settings.ansi_styles is True

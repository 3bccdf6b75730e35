"""
Renderer boundary for print directives

Maps each print directive to exactly one call on a Printer, in emission
order, and provides two printers:

- RecordingPrinter: keeps the calls it receives (tests, debug dumps)
- TextPrinter: builds a plain-text document, optionally ANSI styled
"""

from typing import Any, Iterable, List, Optional, Protocol, Tuple

from ..models.directives import (
    Modifier,
    PrintDirective,
    TextDirective,
    LineBreak,
    ParagraphBreak,
    HorizontalRule,
    Quote,
)


class Printer(Protocol):
    """Interface the renderer exposes to the formatter"""

    def print(self, text: str) -> None: ...

    def printStyled(self, text: str, modifier: Modifier) -> None: ...

    def newline(self) -> None: ...

    def paragraphBreak(self) -> None: ...

    def horizontalRule(self) -> None: ...


def directive_render(directive: PrintDirective, printer: Printer) -> None:
    """
    Send one directive to the printer

    Raises:
        TypeError: If directive is not a known print directive
    """
    if isinstance(directive, TextDirective):
        if directive.modifier is Modifier.NONE:
            printer.print(directive.text)
        else:
            printer.printStyled(directive.text, directive.modifier)
    elif isinstance(directive, Quote):
        printer.print('"')
    elif isinstance(directive, LineBreak):
        printer.newline()
    elif isinstance(directive, ParagraphBreak):
        printer.paragraphBreak()
    elif isinstance(directive, HorizontalRule):
        printer.horizontalRule()
    else:
        raise TypeError(f"Unknown print directive: {directive!r}")


def directives_render(directives: Iterable[PrintDirective], printer: Printer) -> int:
    """
    Send every directive to the printer in order

    Returns:
        Number of directives rendered
    """
    count = 0
    for directive in directives:
        directive_render(directive, printer)
        count += 1
    return count


class RecordingPrinter:
    """Printer that records each call as (method name, args)"""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def print(self, text: str) -> None:
        self.calls.append(("print", (text,)))

    def printStyled(self, text: str, modifier: Modifier) -> None:
        self.calls.append(("printStyled", (text, modifier)))

    def newline(self) -> None:
        self.calls.append(("newline", ()))

    def paragraphBreak(self) -> None:
        self.calls.append(("paragraphBreak", ()))

    def horizontalRule(self) -> None:
        self.calls.append(("horizontalRule", ()))


# ANSI select graphic rendition codes per modifier
ANSI_CODES = {
    Modifier.BOLD: "1",
    Modifier.ITALIC: "3",
    Modifier.PREFORMATTED: "2",
    Modifier.H1: "1;4",
    Modifier.H2: "1;4",
    Modifier.H3: "1",
    Modifier.H4: "1",
    Modifier.H5: "1",
    Modifier.H6: "1",
}
ANSI_RESET = "\x1b[0m"


class TextPrinter:
    """
    Printer that builds a plain-text document

    Paragraph breaks become a blank line, horizontal rules a full line of
    the rule character. Consecutive paragraph breaks leave a single blank
    line, and trailing spaces are trimmed at each line end.
    """

    def __init__(
        self,
        ansi: Optional[bool] = None,
        rule: Optional[str] = None,
    ) -> None:
        """
        Args:
            ansi: Wrap styled text in ANSI escapes (settings default if None)
            rule: Horizontal rule text (settings default if None)
        """
        from ..config import appsettings

        self.ansi = ansi if ansi is not None else appsettings.ansi_styles
        self.rule = rule if rule is not None else appsettings.rule_make()
        self.lines: List[str] = []
        self.current = ""

    def print(self, text: str) -> None:
        self.current += text

    def printStyled(self, text: str, modifier: Modifier) -> None:
        code = ANSI_CODES.get(modifier)
        if self.ansi and code:
            # Keep the trailing space outside the styled span
            body = text.rstrip(" ")
            text = f"\x1b[{code}m{body}{ANSI_RESET}{text[len(body):]}"
        self.current += text

    def newline(self) -> None:
        self.lines.append(self.current.rstrip(" "))
        self.current = ""

    def paragraphBreak(self) -> None:
        if self.current:
            self.newline()
        if self.lines and self.lines[-1] != "":
            self.lines.append("")

    def horizontalRule(self) -> None:
        if self.current:
            self.newline()
        self.lines.append(self.rule)

    def text(self) -> str:
        """Return the document rendered so far"""
        lines = list(self.lines)
        if self.current:
            lines.append(self.current.rstrip(" "))
        while lines and lines[-1] == "":
            lines.pop()
        return "\n".join(lines) + "\n" if lines else ""

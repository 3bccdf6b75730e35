"""
Modifier and print directive models

Defines the text-style modifiers the formatter tracks and the print
directives it emits for the renderer.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional, Union


# Shared line budget ceiling in weight units for every modifier
LINE_BUDGET: int = 2400


class Modifier(Enum):
    """
    Mutually exclusive text style applied to printed content

    The value is the nominal line width in characters for that style.
    PREFORMATTED has no width and is exempt from wrapping.
    """
    NONE = "none"
    BOLD = "bold"
    ITALIC = "italic"
    PREFORMATTED = "pre"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"

    @property
    def width(self) -> Optional[int]:
        """Nominal maximum line width in characters (None when exempt)"""
        return NOMINAL_WIDTHS[self]

    @property
    def weight(self) -> int:
        """
        Per-character cost in weight units

        Normalizes every style's line width against LINE_BUDGET so one
        integer budget serves them all (H1: 2400 / 40 = 60 per character).
        """
        width = self.width
        if width is None:
            return 0
        return LINE_BUDGET // width


NOMINAL_WIDTHS = {
    Modifier.NONE: 80,
    Modifier.BOLD: 80,
    Modifier.ITALIC: 80,
    Modifier.PREFORMATTED: None,
    Modifier.H1: 40,
    Modifier.H2: 50,
    Modifier.H3: 60,
    Modifier.H4: 80,
    Modifier.H5: 100,
    Modifier.H6: 120,
}


@dataclass(frozen=True)
class TextDirective:
    """
    Print text in a given style

    Attributes:
        text: Token text, including its trailing space when one is due
        modifier: Style active when the token was consumed
    """
    text: str
    modifier: Modifier = Modifier.NONE


@dataclass(frozen=True)
class LineBreak:
    """End the current line"""


@dataclass(frozen=True)
class ParagraphBreak:
    """End the current paragraph"""


@dataclass(frozen=True)
class HorizontalRule:
    """Draw a horizontal rule on its own line"""


@dataclass(frozen=True)
class Quote:
    """Print a literal double quote mark"""


PrintDirective = Union[TextDirective, LineBreak, ParagraphBreak, HorizontalRule, Quote]

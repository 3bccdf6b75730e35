"""
Models package for htmlrender

Contains data structures and type definitions for the rendering pipeline.
"""

from .state import ProgramState, FormatterState, pipeline
from .tokens import Token, TagToken, TextToken, PUNCTUATION, punctuation_is
from .directives import (
    LINE_BUDGET,
    Modifier,
    PrintDirective,
    TextDirective,
    LineBreak,
    ParagraphBreak,
    HorizontalRule,
    Quote,
)

__all__ = [
    "ProgramState",
    "FormatterState",
    "pipeline",
    "Token",
    "TagToken",
    "TextToken",
    "PUNCTUATION",
    "punctuation_is",
    "LINE_BUDGET",
    "Modifier",
    "PrintDirective",
    "TextDirective",
    "LineBreak",
    "ParagraphBreak",
    "HorizontalRule",
    "Quote",
]

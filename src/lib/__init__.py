"""
htmlrender - Restricted HTML to print directive formatter

Tokenizes a small HTML dialect and formats it into print directives.
"""

__version__ = "1.0.0"

from .tokenizer import tokenize, MalformedMarkupError
from .formatter import Formatter, document_format
from .printer import Printer, RecordingPrinter, TextPrinter, directives_render
from .log import LOG, state_connectToLogger

__all__ = [
    "tokenize",
    "MalformedMarkupError",
    "Formatter",
    "document_format",
    "Printer",
    "RecordingPrinter",
    "TextPrinter",
    "directives_render",
    "LOG",
    "state_connectToLogger",
    "__version__",
]

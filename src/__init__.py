"""
htmlrender - Restricted HTML to print directive formatter

Converts a small HTML dialect (html, body, p, hr, br, b, i, q, h1-h6, pre)
into an ordered stream of print directives for a text renderer.
"""

__version__ = "1.0.0"

from .lib import (
    tokenize,
    MalformedMarkupError,
    Formatter,
    document_format,
    TextPrinter,
    RecordingPrinter,
    directives_render,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "tokenize",
    "MalformedMarkupError",
    "Formatter",
    "document_format",
    "TextPrinter",
    "RecordingPrinter",
    "directives_render",
    "LOG",
    "state_connectToLogger",
    "__version__",
]

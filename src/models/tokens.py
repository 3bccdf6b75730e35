"""
Token models for the markup tokenizer

Defines the two token variants the tokenizer produces and the formatter
consumes: tag tokens (<b>, </h2>) and content tokens (words or a single
punctuation character).
"""

from dataclasses import dataclass
from typing import FrozenSet, Union


# Characters split off adjacent words into their own content tokens
PUNCTUATION: FrozenSet[str] = frozenset(".,;:()?!=&~+")


@dataclass(frozen=True)
class TagToken:
    """
    A markup tag delimiter

    Attributes:
        name: Lower-cased tag name without brackets or slash (e.g., "h2")
        closing: True for closing tags (</h2>)
        raw: Tag exactly as it appeared in the source (e.g., "</H2>")

    Example:
        "<B>" -> TagToken(name="b", closing=False, raw="<B>")
    """
    name: str
    closing: bool
    raw: str

    @property
    def text(self) -> str:
        """Canonical lower-case form, e.g. '</h2>'"""
        return f"</{self.name}>" if self.closing else f"<{self.name}>"


@dataclass(frozen=True)
class TextToken:
    """A printable word or single punctuation character"""
    value: str


Token = Union[TagToken, TextToken]


def punctuation_is(token: Token) -> bool:
    """Check if a token is a single punctuation content token"""
    return isinstance(token, TextToken) and token.value in PUNCTUATION

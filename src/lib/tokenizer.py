"""
Tokenizer for the restricted HTML dialect

Splits raw markup into an ordered stream of tag tokens and content tokens.

Rules:
- Whitespace runs separate tokens
- A <tag> is always its own token, even without surrounding whitespace
- Tag names compare case-insensitively (<B> and <b> are the same tag)
- Punctuation at either end of a word is split off, one character per token,
  so the formatter can print it without a preceding space

Example:
    >>> [t.value for t in tokenize("Hello, world.") if isinstance(t, TextToken)]
    ['Hello', ',', 'world', '.']
"""

import re
from typing import Iterator, List

from ..models.tokens import PUNCTUATION, Token, TagToken, TextToken


# A tag (possibly unterminated), a stray '>', or a run of word characters
PIECE_PATTERN = re.compile(r'<[^<>]*>?|>|[^\s<>]+')

# Body of a supported tag: optional slash then a bare name, no attributes
TAG_BODY_PATTERN = re.compile(r'(/?)([A-Za-z][A-Za-z0-9]*)')


class MalformedMarkupError(SyntaxError):
    """
    Raised when tag delimiters in the source are malformed

    Covers an unterminated '<', a stray '>', and tag bodies that are not
    a bare name (attributes are not supported).

    Attributes:
        line_number: Source line of the offending delimiter (1-based)
        position: Character offset of the offending delimiter
    """

    def __init__(self, message: str, source: str, position: int) -> None:
        self.line_number = source.count('\n', 0, position) + 1
        self.position = position

        context_start = max(0, position - 40)
        context_end = min(len(source), position + 40)
        context = source[context_start:context_end].replace('\n', ' ')

        super().__init__(
            f"\n{message}\n"
            f"Line {self.line_number}, position {position}\n"
            f"Context: ...{context}...\n"
            f"         {' ' * (position - context_start)}^"
        )


def tokenize(raw_text: str) -> Iterator[Token]:
    """
    Lazily split raw markup into tokens

    Args:
        raw_text: Complete markup document

    Yields:
        TagToken or TextToken in document order

    Raises:
        MalformedMarkupError: On an unterminated tag, a stray '>', or a
                              tag with attributes or an invalid name

    Example:
        "<b>bold</b>." -> <b>, 'bold', </b>, '.'
    """
    for match in PIECE_PATTERN.finditer(raw_text):
        piece = match.group(0)
        position = match.start()

        if piece == '>':
            raise MalformedMarkupError("Stray '>' outside of a tag", raw_text, position)

        if piece.startswith('<'):
            yield tag_parse(piece, raw_text, position)
        else:
            yield from word_split(piece)


def tag_parse(piece: str, source: str, position: int) -> TagToken:
    """
    Build a TagToken from a '<...>' piece

    Args:
        piece: Delimited text including the angle brackets
        source: Whole document (for error context)
        position: Offset of the piece in source

    Returns:
        TagToken with lower-cased name
    """
    if not piece.endswith('>'):
        raise MalformedMarkupError("Unterminated tag: missing '>'", source, position)

    body_match = TAG_BODY_PATTERN.fullmatch(piece[1:-1])
    if not body_match:
        raise MalformedMarkupError(f"Unsupported tag syntax '{piece}'", source, position)

    return TagToken(
        name=body_match.group(2).lower(),
        closing=bool(body_match.group(1)),
        raw=piece,
    )


def word_split(word: str) -> Iterator[TextToken]:
    """
    Split leading and trailing punctuation off a word

    Inner punctuation stays with the word ("e.g" and "a+b" are single
    tokens). A word made only of punctuation yields one token per character.

    Example:
        "(hello)." -> '(', 'hello', ')', '.'
    """
    start = 0
    end = len(word)
    while start < end and word[start] in PUNCTUATION:
        yield TextToken(word[start])
        start += 1

    trailing: List[TextToken] = []
    while end > start and word[end - 1] in PUNCTUATION:
        end -= 1
        trailing.append(TextToken(word[end]))

    if start < end:
        yield TextToken(word[start:end])
    yield from reversed(trailing)


def tokens_format(tokens: List[Token]) -> str:
    """
    Render tokens as one line each for debug output

    Example:
        0: TAG  <b>
        1: TEXT 'bold'
    """
    lines = []
    for index, token in enumerate(tokens):
        if isinstance(token, TagToken):
            lines.append(f"{index}: TAG  {token.text}")
        else:
            lines.append(f"{index}: TEXT {token.value!r}")
    return '\n'.join(lines)

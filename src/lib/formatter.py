"""
Formatting state machine

Walks a token sequence and emits print directives for the renderer.

The formatter tracks three things while it walks:
1. The active modifier (style or heading), set by opening tags and reset
   to NONE by any closing style tag. Only one is active at a time.
2. The line budget: weight units consumed since the last line break.
   Each modifier has its own per-character weight so that every style
   shares one ceiling (2400 units: 80 plain characters, 40 H1 characters).
3. Punctuation adjacency: a word followed (past any style tags) by a
   single punctuation character is printed without its trailing space.

Preformatted text is never wrapped; each preformatted token is followed
by a forced line break instead of a space.

Example:
    >>> Formatter(tokenize("<b>word1</b> word2")).format()
    [TextDirective(text='word1 ', modifier=<Modifier.BOLD: 'bold'>),
     TextDirective(text='word2 ', modifier=<Modifier.NONE: 'none'>)]
"""

from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from ..models.tokens import Token, TagToken, punctuation_is
from ..models.state import FormatterState
from ..models.directives import (
    Modifier,
    PrintDirective,
    TextDirective,
    LineBreak,
    ParagraphBreak,
    HorizontalRule,
    Quote,
)
from .tokenizer import tokenize, tokens_format
from .log import LOG


class DirectiveEffect(NamedTuple):
    """Directive emitted by a directive-table tag and whether it resets the line budget"""
    directive: PrintDirective
    budget_reset: bool


# Tags that carry no formatting meaning and are dropped
STRUCTURAL_TAGS = frozenset({"<html>", "</html>", "<body>", "</body>"})

OPENING_MODIFIERS: Dict[str, Modifier] = {
    "b": Modifier.BOLD,
    "i": Modifier.ITALIC,
    "pre": Modifier.PREFORMATTED,
    "h1": Modifier.H1,
    "h2": Modifier.H2,
    "h3": Modifier.H3,
    "h4": Modifier.H4,
    "h5": Modifier.H5,
    "h6": Modifier.H6,
}

# Opening tag selects its modifier, any closing style tag returns to NONE
MODIFIER_TAGS: Dict[str, Modifier] = {
    **{f"<{name}>": modifier for name, modifier in OPENING_MODIFIERS.items()},
    **{f"</{name}>": Modifier.NONE for name in OPENING_MODIFIERS},
}

DIRECTIVE_TAGS: Dict[str, DirectiveEffect] = {
    "<p>": DirectiveEffect(ParagraphBreak(), True),
    "</p>": DirectiveEffect(ParagraphBreak(), True),
    "<hr>": DirectiveEffect(HorizontalRule(), True),
    "<br>": DirectiveEffect(LineBreak(), True),
    "<q>": DirectiveEffect(Quote(), False),
    "</q>": DirectiveEffect(Quote(), False),
}


def structural_is(token: Token) -> bool:
    """Check if token is <html>, </html>, <body> or </body>"""
    return isinstance(token, TagToken) and token.text in STRUCTURAL_TAGS


def modifier_lookup(token: Token) -> Optional[Modifier]:
    """
    Find the modifier a style or heading tag selects

    Pure table lookup with no side effects.

    Returns:
        The selected modifier (NONE for closing tags), or None when the
        token is not a style or heading tag
    """
    if not isinstance(token, TagToken):
        return None
    return MODIFIER_TAGS.get(token.text)


def modifier_apply(token: Token, state: FormatterState) -> bool:
    """
    Apply a style or heading tag to the formatter state

    Args:
        token: Token to classify
        state: Formatter state to update

    Returns:
        True if the token was a style tag and state was updated,
        False otherwise (state left untouched)
    """
    modifier = modifier_lookup(token)
    if modifier is None:
        return False
    state.current_modifier = modifier
    return True


def directive_lookup(token: Token) -> Optional[DirectiveEffect]:
    """Find the directive a <p>, <hr>, <br> or <q> tag emits"""
    if not isinstance(token, TagToken):
        return None
    return DIRECTIVE_TAGS.get(token.text)


def punctuation_follows(tokens: Sequence[Token], start: int) -> bool:
    """
    Look ahead for single punctuation past any style tags

    Skips only style and heading tags. Any other tag, structural ones
    included, ends the lookahead.

    Args:
        tokens: Full token sequence
        start: Index of the first token after the current one

    Returns:
        True if the next token past style tags is single punctuation,
        False for any other content, any other tag or end of input
    """
    for index in range(start, len(tokens)):
        token = tokens[index]
        if modifier_lookup(token) is not None:
            continue
        return punctuation_is(token)
    return False


def directive_emit(state: FormatterState, effect: DirectiveEffect) -> List[PrintDirective]:
    """
    Emit a directive-table directive and update the line budget

    Paragraph, rule and break tags empty the line. A quote mark costs one
    character at the current weight: 30 units in plain text, 60 in H1,
    nothing in preformatted text.
    """
    if effect.budget_reset:
        state.budget_reset()
    else:
        state.line_budget_used += state.current_modifier.weight
    return [effect.directive]


def text_emit(
    state: FormatterState, text: str, adjacent: bool, line_budget: int
) -> List[PrintDirective]:
    """
    Emit one content token in the current modifier

    Wraps the line first when the token would overrun the budget, even
    on an empty line. Preformatted text skips the check
    and ends its own line.

    Args:
        state: Formatter state to update
        text: Token text to print
        adjacent: Punctuation follows, so no trailing space
        line_budget: Budget ceiling in weight units

    Returns:
        Directives to emit, in order

    Example:
        H1 weighs 60 per character, so with 2390 units used a 40 character
        token (2400 units) emits LineBreak first and leaves 2400 used.
    """
    modifier = state.current_modifier

    if modifier is Modifier.PREFORMATTED:
        state.budget_reset()
        return [TextDirective(text, modifier), LineBreak()]

    directives: List[PrintDirective] = []
    added = modifier.weight * len(text)
    if state.line_budget_used + added > line_budget:
        directives.append(LineBreak())
        state.budget_reset()
    state.line_budget_used += added

    if not adjacent:
        text += " "
    directives.append(TextDirective(text, modifier))
    return directives


def token_step(
    state: FormatterState, tokens: Sequence[Token], index: int, line_budget: int
) -> List[PrintDirective]:
    """
    Consume the token at index and return the directives it produces

    Classification order: structural tags, directive table, style tags,
    then content. Unknown tags fall through and print literally.
    """
    token = tokens[index]

    if isinstance(token, TagToken):
        if structural_is(token):
            return []
        effect = directive_lookup(token)
        if effect is not None:
            return directive_emit(state, effect)
        if modifier_apply(token, state):
            return []
        text = token.raw
    else:
        text = token.value

    return text_emit(state, text, punctuation_follows(tokens, index + 1), line_budget)


class Formatter:
    """
    Runs one formatting pass per call over a tokenized document

    Each pass starts from a fresh FormatterState, so format() can be
    called repeatedly with identical results.
    """

    def __init__(
        self,
        tokens: Iterable[Token],
        line_budget: Optional[int] = None,
        debug: Optional[bool] = None,
    ) -> None:
        """
        Initialize formatter with a token stream

        The stream is consumed here, so a tokenizer fault surfaces before
        any directive is produced.

        Args:
            tokens: Tokens from tokenize()
            line_budget: Weight units per line (settings default if None)
            debug: Log each token decision (settings default if None)

        Raises:
            MalformedMarkupError: Propagated from the tokenizer
        """
        from ..config import appsettings

        self.tokens: Tuple[Token, ...] = tuple(tokens)
        self.line_budget = line_budget if line_budget is not None else appsettings.line_budget
        self.debug = debug if debug is not None else appsettings.debug_mode
        self.state = FormatterState()

    def directives_iter(self) -> Iterator[PrintDirective]:
        """Yield directives in token order for one pass"""
        self.state = FormatterState()

        if self.debug:
            LOG(f"Tokens:\n{tokens_format(list(self.tokens))}", level=3)

        for index in range(len(self.tokens)):
            directives = token_step(self.state, self.tokens, index, self.line_budget)
            if self.debug:
                LOG(
                    f"Token {index}: {self.tokens[index]} -> {directives} "
                    f"[{self.state.current_modifier.name}, {self.state.line_budget_used}]",
                    level=3,
                )
            yield from directives

    def format(self) -> List[PrintDirective]:
        """Format the whole document into a directive list"""
        directives = list(self.directives_iter())
        LOG(f"Formatted {len(self.tokens)} tokens into {len(directives)} directives", level=2)
        return directives


def document_format(raw_text: str, line_budget: Optional[int] = None) -> List[PrintDirective]:
    """
    Tokenize and format a markup document in one call

    Raises:
        MalformedMarkupError: If the markup has malformed tag delimiters
    """
    return Formatter(tokenize(raw_text), line_budget=line_budget).format()

"""Tokenizer for the justification engine.

Splits input text on runs of whitespace and exposes the resulting words
as a lazy stream with one token of lookahead.
"""

from dataclasses import dataclass
import re
from typing import Callable, Iterator, Optional


# Words break on Unicode White_Space; \s alone also matches U+001C..U+001F.
_WORD_RE = re.compile(r'[^\s\x1c-\x1f]+')


@dataclass(frozen=True)
class Token:
    """A maximal non-whitespace run inside the source text.

    Attributes:
        source: The full input text the token was cut from.
        start: Offset of the first codepoint of the token.
        end: Offset one past the last codepoint of the token.
    """
    source: str
    start: int
    end: int

    @property
    def text(self) -> str:
        """Get the token characters."""
        return self.source[self.start:self.end]

    @property
    def length(self) -> int:
        """Get the token width in codepoints."""
        return self.end - self.start

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Token({self.text!r}, start={self.start}, end={self.end})"


def iter_tokens(text: str) -> Iterator[Token]:
    """Iterate over the words of a text, left to right.

    Args:
        text: Input text.

    Yields:
        Token for each maximal run of non-whitespace characters.
    """
    for match in _WORD_RE.finditer(text):
        yield Token(text, match.start(), match.end())


class TokenStream:
    """Word stream with single-token lookahead.

    Example:
        stream = TokenStream("lorem  ipsum")
        stream.peek().text    # 'lorem'
        next(stream).text     # 'lorem'
        stream.peek().text    # 'ipsum'
    """

    _EMPTY = object()

    def __init__(self, text: str):
        """Initialize the stream.

        Args:
            text: Input text to tokenize.
        """
        self._tokens = iter_tokens(text)
        self._peeked = self._EMPTY

    def __iter__(self) -> 'TokenStream':
        return self

    def __next__(self) -> Token:
        if self._peeked is not self._EMPTY:
            token, self._peeked = self._peeked, self._EMPTY
            if token is None:
                raise StopIteration
            return token
        return next(self._tokens)

    def peek(self) -> Optional[Token]:
        """Return the next token without consuming it.

        Returns:
            The next token, or None if the stream is exhausted.
        """
        if self._peeked is self._EMPTY:
            self._peeked = next(self._tokens, None)
        return self._peeked

    def next_if(self, predicate: Callable[[Token], bool]) -> Optional[Token]:
        """Consume the next token only if it satisfies a predicate.

        Args:
            predicate: Called with the peeked token.

        Returns:
            The consumed token, or None if the stream is exhausted or the
            predicate rejected the token (which then stays in the stream).
        """
        token = self.peek()
        if token is None or not predicate(token):
            return None
        self._peeked = self._EMPTY
        return token

    @property
    def exhausted(self) -> bool:
        """Check whether any tokens remain."""
        return self.peek() is None

"""Greedy line fitting."""

from dataclasses import dataclass, field
import logging
from typing import List

from justify.tokenizer import Token, TokenStream


logger = logging.getLogger(__name__)

# Every accepted word reserves one separator before the next word.
SEPARATOR_WIDTH = 1


@dataclass
class FitResult:
    """Words chosen for one output line.

    Attributes:
        tokens: Accepted tokens, in input order.
        total_len: Sum of the tokens' codepoint widths, separators excluded.
    """
    tokens: List[Token] = field(default_factory=list)
    total_len: int = 0

    def __len__(self) -> int:
        return len(self.tokens)

    @property
    def is_empty(self) -> bool:
        """Check whether no token could be placed."""
        return not self.tokens


def fit_tokens(stream: TokenStream, max_width: int) -> FitResult:
    """Consume as many tokens as fit on one line.

    A token is accepted while its width, added to the width of the words
    already accepted plus one separator after each of them, stays within
    max_width. The first rejected token is left in the stream.

    Args:
        stream: Token stream to consume from.
        max_width: Line width in codepoints.

    Returns:
        FitResult, empty if the next token alone is wider than max_width.
    """
    result = FitResult()
    check_len = 0

    while True:
        token = stream.next_if(lambda t: check_len + t.length <= max_width)
        if token is None:
            break
        result.tokens.append(token)
        result.total_len += token.length
        check_len += token.length + SEPARATOR_WIDTH

    logger.debug(f"Fitted {len(result)} token(s), total_len={result.total_len}")
    return result

"""Gap distribution for justified lines.

Given the words placed on a line, decide how many spaces go between
them so the rendered line is exactly ``line_width`` codepoints wide.
Body gaps share one size; any surplus that does not divide evenly is
pushed into the last gap.

For ``lorem ipsum dolor sit`` justified to 25 codepoints the free space
is 7, split as two body gaps of 3 and a tail gap of 1:

    lorem   ipsum   dolor sit
"""

from dataclasses import dataclass
import logging
from typing import Sequence

from justify.errors import LayoutInvariantError
from justify.tokenizer import Token


logger = logging.getLogger(__name__)

SPACE = ' '


@dataclass(frozen=True)
class GapInfo:
    """Padding sizes for one line.

    Attributes:
        body_gap_size: Width of every gap except the last.
        tail_gap_size: Width of the last gap, or the trailing padding
            after a line's only word.
    """
    body_gap_size: int
    tail_gap_size: int


def compute_gaps(n_tokens: int, total_len: int, line_width: int) -> GapInfo:
    """Compute gap sizes for a line.

    Args:
        n_tokens: Number of words on the line.
        total_len: Combined codepoint width of the words.
        line_width: Target line width.

    Returns:
        GapInfo for the line.

    Raises:
        LayoutInvariantError: If the words plus one separator per gap do
            not fit in line_width.
    """
    if n_tokens == 0:
        return GapInfo(0, 0)

    n_gaps = n_tokens - 1
    free_space = line_width - total_len
    if free_space < n_gaps:
        raise LayoutInvariantError(
            f"{n_tokens} token(s) of total width {total_len} "
            f"do not fit in line width {line_width}"
        )

    if n_tokens == 1:
        return GapInfo(0, free_space)

    remainder = free_space % n_gaps
    divisor = n_gaps - 1 if n_gaps > 1 and remainder > 0 else n_gaps
    body = (free_space - remainder) // divisor
    # The last gap takes whatever the body gaps leave over.
    tail = free_space - body * (n_gaps - 1)

    logger.debug(
        f"Gaps for {n_tokens} tokens in width {line_width}: body={body}, tail={tail}"
    )
    return GapInfo(body, tail)


def render_line(tokens: Sequence[Token], gaps: GapInfo) -> str:
    """Render words with the given gaps into one line.

    Args:
        tokens: Words on the line, in order.
        gaps: Gap sizes from compute_gaps().

    Returns:
        The rendered line.
    """
    n_gaps = len(tokens) - 1
    parts = []

    for idx, token in enumerate(tokens):
        parts.append(token.text)
        next_idx = idx + 1
        if next_idx < n_gaps:
            parts.append(SPACE * gaps.body_gap_size)
        elif next_idx == n_gaps or len(tokens) == 1:
            parts.append(SPACE * gaps.tail_gap_size)

    return ''.join(parts)

"""Justification engine.

Re-flows text into lines of a fixed codepoint width. Words are packed
greedily, gaps are widened so every line is exactly ``line_width`` wide,
and a word that cannot fit on any line is hard-split.

Example:
    >>> transform("consectetur", 4)
    'cons\\necte\\ntur '
"""

import logging
from typing import Iterator, List

from justify.errors import InvalidLineWidthError, LayoutInvariantError
from justify.fitter import fit_tokens
from justify.gaps import compute_gaps, render_line
from justify.splitter import split_oversized
from justify.tokenizer import TokenStream


logger = logging.getLogger(__name__)

NEWLINE = '\n'


def validate_line_width(line_width: int) -> int:
    """Validate a requested line width.

    Args:
        line_width: Width to check.

    Returns:
        The width, unchanged.

    Raises:
        InvalidLineWidthError: If the width is not a positive integer.
    """
    if isinstance(line_width, bool) or not isinstance(line_width, int):
        raise InvalidLineWidthError(
            f"Line width must be an integer, got {type(line_width).__name__}"
        )
    if line_width < 1:
        raise InvalidLineWidthError(
            f"Line width must be at least 1, got {line_width}"
        )
    return line_width


def iter_lines(text: str, line_width: int) -> Iterator[str]:
    """Iterate over the justified lines of a text.

    Args:
        text: Input text.
        line_width: Width of every output line, in codepoints.

    Yields:
        Output lines, each exactly line_width codepoints wide.

    Raises:
        InvalidLineWidthError: If text is not empty and line_width is not
            a positive integer.
    """
    if not text:
        return

    validate_line_width(line_width)
    stream = TokenStream(text)

    while not stream.exhausted:
        fit = fit_tokens(stream, line_width)

        if not fit.is_empty:
            gaps = compute_gaps(len(fit), fit.total_len, line_width)
            yield render_line(fit.tokens, gaps)
            continue

        # Not even one word fits, so the next word gets split by hand.
        token = stream.peek()
        if token is None:
            raise LayoutInvariantError("Nothing to split: token stream is exhausted")

        yield from split_oversized(token.text, line_width)
        next(stream)


def justify_lines(text: str, line_width: int) -> List[str]:
    """Justify a text into a list of lines.

    Args:
        text: Input text.
        line_width: Width of every output line, in codepoints.

    Returns:
        List of lines; empty for empty or whitespace-only input.
    """
    return list(iter_lines(text, line_width))


def transform(text: str, line_width: int) -> str:
    """Justify a text to a fixed line width.

    Args:
        text: Input text. Any run of whitespace separates words.
        line_width: Width of every output line, in codepoints.

    Returns:
        The justified lines joined by newlines, without a trailing
        newline. Empty input gives an empty string.

    Raises:
        InvalidLineWidthError: If text is not empty and line_width is not
            a positive integer.
    """
    lines = justify_lines(text, line_width)
    logger.debug(f"Justified {len(text)} codepoint(s) into {len(lines)} line(s)")
    return NEWLINE.join(lines)

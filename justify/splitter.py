"""Fallback splitting for words wider than a line."""

import logging
from typing import List

from utils.string_utils import chunk_text, pad_right, truncate


logger = logging.getLogger(__name__)


def split_oversized(word: str, line_width: int) -> List[str]:
    """Hard-split a word across as many lines as it needs.

    Chunks are cut every line_width codepoints. A multi-codepoint
    grapheme (an emoji with a modifier, a letter with a combining mark)
    may end up split across two lines.

    Args:
        word: The word to split.
        line_width: Line width in codepoints.

    Returns:
        Lines of exactly line_width codepoints; the last one is padded
        with trailing spaces.
    """
    chunks = chunk_text(word, line_width)
    if chunks:
        chunks[-1] = pad_right(chunks[-1], line_width)

    logger.debug(
        f"Split oversized word {truncate(word, 20)!r} into {len(chunks)} line(s)"
    )
    return chunks

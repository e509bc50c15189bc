"""String utility functions for the justification engine.

All widths here are counted in codepoints, which is what ``len()``
measures on a Python ``str``. Grapheme clusters are not taken into
account.
"""

from typing import List


def codepoint_width(text: str) -> int:
    """Get the width of a string in codepoints.

    Args:
        text: The string to measure.

    Returns:
        Number of codepoints in text.
    """
    return len(text)


def pad_right(text: str, width: int, fill: str = " ") -> str:
    """Right-pad a string to a fixed width.

    Args:
        text: The string to pad.
        width: Target width in codepoints.
        fill: Single padding character.

    Returns:
        Padded string, or text unchanged if it is already wide enough.
    """
    return text + fill * max(0, width - codepoint_width(text))


def chunk_text(text: str, size: int) -> List[str]:
    """Cut a string into consecutive chunks of at most size codepoints.

    Args:
        text: The string to cut.
        size: Maximum chunk width, must be positive.

    Returns:
        List of chunks; only the last one may be shorter than size.

    Raises:
        ValueError: If size is not positive.
    """
    if size < 1:
        raise ValueError(f"Chunk size must be positive, got {size}")
    return [text[i:i + size] for i in range(0, len(text), size)]


def truncate(text: str, max_length: int, suffix: str = "...") -> str:
    """Truncate a string to a maximum length.

    Args:
        text: The string to truncate.
        max_length: Maximum length including suffix.
        suffix: String to append when truncated.

    Returns:
        Truncated string with suffix if needed.
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix

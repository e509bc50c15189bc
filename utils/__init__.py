"""Utility modules for the justification engine."""

from utils.string_utils import (
    chunk_text,
    codepoint_width,
    pad_right,
    truncate,
)

__all__ = [
    'chunk_text',
    'codepoint_width',
    'pad_right',
    'truncate',
]

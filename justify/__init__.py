"""Text justification engine.

Re-flows text into lines of exactly ``line_width`` codepoints: words are
packed greedily, gaps are widened to fill each line, and words wider than
a line are hard-split.

Example:
    from justify import transform

    print(transform("Съешь ещё этих мягких французских булок", 12))
"""

from justify.engine import (
    iter_lines,
    justify_lines,
    transform,
    validate_line_width,
)
from justify.errors import (
    JustifyError,
    InvalidLineWidthError,
    LayoutInvariantError,
)
from justify.fitter import FitResult, fit_tokens
from justify.gaps import GapInfo, compute_gaps, render_line
from justify.splitter import split_oversized
from justify.tokenizer import Token, TokenStream, iter_tokens


__all__ = [
    # Engine
    'iter_lines',
    'justify_lines',
    'transform',
    'validate_line_width',
    # Errors
    'JustifyError',
    'InvalidLineWidthError',
    'LayoutInvariantError',
    # Components
    'FitResult',
    'fit_tokens',
    'GapInfo',
    'compute_gaps',
    'render_line',
    'split_oversized',
    'Token',
    'TokenStream',
    'iter_tokens',
]

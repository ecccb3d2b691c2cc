"""Digit recognition over 3-line glyph entries.

The recognizer lays the three glyph lines of an entry out as a character
grid, cuts it into nine 3-column windows, and resolves each window against
the glyph table. Unrecognized windows become '?' rather than errors.

Example:
    >>> lines = [
    ...     "    _  _     _  _  _  _  _ ",
    ...     "  | _| _||_||_ |_   ||_||_|",
    ...     "  ||_  _|  | _||_|  ||_| _|",
    ... ]
    >>> DigitRecognizer().recognize(lines)
    '123456789'
"""

import logging
from typing import List, Sequence

import numpy as np

from .constants import (
    DIGITS_PER_ENTRY,
    ENTRY_WIDTH,
    GLYPH_HEIGHT,
    GLYPH_WIDTH,
    ILLEGIBLE_DIGIT,
)
from .glyphs import GlyphPattern, lookup_glyph

logger = logging.getLogger(__name__)


def to_char_grid(lines: Sequence[str]) -> np.ndarray:
    """Build a fixed-size character grid from raw glyph lines.

    Missing lines and columns are filled with spaces; columns past the entry
    width are dropped.

    Args:
        lines: Up to GLYPH_HEIGHT glyph lines (extra lines are ignored)

    Returns:
        Array of shape (GLYPH_HEIGHT, ENTRY_WIDTH) with one character per cell
    """
    rows: List[str] = list(lines[:GLYPH_HEIGHT])
    rows += [""] * (GLYPH_HEIGHT - len(rows))

    return np.array(
        [list(row[:ENTRY_WIDTH].ljust(ENTRY_WIDTH)) for row in rows],
        dtype="<U1",
    )


def split_glyphs(grid: np.ndarray) -> List[GlyphPattern]:
    """Cut a character grid into consecutive 3x3 glyph patterns.

    Args:
        grid: Character grid from to_char_grid()

    Returns:
        DIGITS_PER_ENTRY patterns, left to right
    """
    patterns: List[GlyphPattern] = []
    for i in range(DIGITS_PER_ENTRY):
        window = grid[:, i * GLYPH_WIDTH : (i + 1) * GLYPH_WIDTH]
        patterns.append(tuple("".join(row) for row in window))
    return patterns


class DigitRecognizer:
    """Converts one entry's glyph lines into a 9-character policy number."""

    def recognize_glyph(self, pattern: GlyphPattern) -> str:
        digit = lookup_glyph(pattern)
        return ILLEGIBLE_DIGIT if digit is None else digit

    def recognize(self, lines: Sequence[str]) -> str:
        """Recognize the nine digits of an entry.

        Short or missing lines never raise; they are read as spaces, which
        usually turns the affected glyphs into '?'.

        Args:
            lines: The three glyph lines of an entry

        Returns:
            Policy number string, always DIGITS_PER_ENTRY characters long
        """
        grid = to_char_grid(lines)
        number = "".join(self.recognize_glyph(p) for p in split_glyphs(grid))

        if ILLEGIBLE_DIGIT in number:
            logger.debug(f"Unrecognized glyphs in entry: {number}")

        return number


_DEFAULT_RECOGNIZER = DigitRecognizer()


def recognize(lines: Sequence[str]) -> str:
    """Recognize an entry with the shared default DigitRecognizer."""
    return _DEFAULT_RECOGNIZER.recognize(lines)

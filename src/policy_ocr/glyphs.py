"""Glyph table mapping 3x3 character patterns to digits.

Each digit in a scanned document is drawn with pipes and underscores on a
3x3 grid:

     _     _  _     _  _  _  _  _
    | |  | _| _||_||_ |_   ||_||_|
    |_|  ||_  _|  | _||_|  ||_| _|

The table is built once at import time and never mutated. Construction
verifies that every pattern is well formed and that no pattern maps to two
different digits.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from .constants import GLYPH_ALPHABET, GLYPH_HEIGHT, GLYPH_WIDTH

# One row string per glyph line, top to bottom
GlyphPattern = Tuple[str, str, str]

_DIGIT_GLYPHS: Dict[str, GlyphPattern] = {
    "0": (" _ ", "| |", "|_|"),
    "1": ("   ", "  |", "  |"),
    "2": (" _ ", " _|", "|_ "),
    "3": (" _ ", " _|", " _|"),
    "4": ("   ", "|_|", "  |"),
    "5": (" _ ", "|_ ", " _|"),
    "6": (" _ ", "|_ ", "|_|"),
    "7": (" _ ", "  |", "  |"),
    "8": (" _ ", "|_|", "|_|"),
    "9": (" _ ", "|_|", " _|"),
}


def _validate_pattern(digit: str, pattern: GlyphPattern) -> None:
    if len(pattern) != GLYPH_HEIGHT:
        raise ValueError(
            f"Glyph for '{digit}' has {len(pattern)} rows, expected {GLYPH_HEIGHT}"
        )

    for row in pattern:
        if len(row) != GLYPH_WIDTH:
            raise ValueError(
                f"Glyph for '{digit}' has row {row!r} of width {len(row)}, "
                f"expected {GLYPH_WIDTH}"
            )
        if not set(row) <= GLYPH_ALPHABET:
            raise ValueError(f"Glyph for '{digit}' has invalid characters: {row!r}")


def build_glyph_table(
    digit_glyphs: Mapping[str, GlyphPattern],
) -> Mapping[GlyphPattern, str]:
    """Invert a digit -> pattern mapping into a read-only lookup table.

    Args:
        digit_glyphs: Mapping of digit character to its 3-row pattern

    Returns:
        Read-only mapping of pattern to digit character

    Raises:
        ValueError: If a pattern is malformed or two digits share a pattern

    Example:
        >>> table = build_glyph_table({"1": ("   ", "  |", "  |")})
        >>> table[("   ", "  |", "  |")]
        '1'
    """
    table: Dict[GlyphPattern, str] = {}

    for digit, pattern in digit_glyphs.items():
        if len(digit) != 1 or not digit.isdigit():
            raise ValueError(f"Glyph key must be a single digit, got: {digit!r}")

        pattern = tuple(pattern)
        _validate_pattern(digit, pattern)

        if pattern in table:
            raise ValueError(
                f"Ambiguous glyph: digits '{table[pattern]}' and '{digit}' "
                f"share pattern {pattern!r}"
            )
        table[pattern] = digit

    return MappingProxyType(table)


GLYPH_TABLE: Mapping[GlyphPattern, str] = build_glyph_table(_DIGIT_GLYPHS)


def lookup_glyph(pattern: GlyphPattern) -> Optional[str]:
    """Resolve a 3x3 pattern to its digit.

    Args:
        pattern: Three row strings of exactly 3 characters each

    Returns:
        Digit character '0'-'9', or None if the pattern is not a known glyph

    Example:
        >>> lookup_glyph((" _ ", "|_|", " _|"))
        '9'
        >>> lookup_glyph((" _ ", "|_|", "  |")) is None
        True
    """
    return GLYPH_TABLE.get(tuple(pattern))


def glyph_for(digit: str) -> GlyphPattern:
    """Return the canonical pattern for a digit character.

    Raises:
        KeyError: If digit is not '0'-'9'
    """
    return _DIGIT_GLYPHS[digit]

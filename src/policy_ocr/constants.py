"""
Shared Constants for the Policy Number OCR Pipeline

This module contains the fixed geometry of the glyph format and the checksum
parameters used across the recognizer, validator, and pipeline.
"""

# ============================================================================
# Glyph Geometry
# ============================================================================
# Each digit is drawn as a 3x3 block of characters from GLYPH_ALPHABET
GLYPH_WIDTH = 3
GLYPH_HEIGHT = 3
GLYPH_ALPHABET = frozenset(" _|")

# ============================================================================
# Entry Layout
# ============================================================================
DIGITS_PER_ENTRY = 9
ENTRY_WIDTH = GLYPH_WIDTH * DIGITS_PER_ENTRY  # 27 columns
LINES_PER_ENTRY = GLYPH_HEIGHT + 1  # 3 glyph lines + 1 blank separator

# Placeholder emitted for a glyph that matches no known pattern
ILLEGIBLE_DIGIT = "?"

# ============================================================================
# Checksum
# ============================================================================
# (9*d1 + 8*d2 + ... + 1*d9) mod 11 == 0 for a valid policy number
CHECKSUM_MODULUS = 11
CHECKSUM_WEIGHTS = tuple(range(DIGITS_PER_ENTRY, 0, -1))  # (9, 8, ..., 1)

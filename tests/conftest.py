"""
Pytest Configuration and Shared Fixtures

This file contains pytest configuration and fixtures that are available
to all test modules.
"""

from typing import List

import pytest

from src.policy_ocr.glyphs import glyph_for

# A 3x3 block that matches no digit; rendered wherever a '?' is requested
GARBLED_GLYPH = (" _ ", "|_|", "  _")


def render_entry(number: str) -> List[str]:
    """Draw a number as three glyph lines ('?' becomes a garbled glyph)."""
    glyphs = [GARBLED_GLYPH if ch == "?" else glyph_for(ch) for ch in number]
    return ["".join(glyph[row] for glyph in glyphs) for row in range(3)]


def render_document(numbers: List[str], trailing_blank: bool = True) -> List[str]:
    """Draw several numbers as document lines separated by blank lines."""
    lines: List[str] = []
    for number in numbers:
        lines.extend(render_entry(number))
        lines.append("")
    if not trailing_blank and lines:
        lines.pop()
    return lines


@pytest.fixture
def entry_renderer():
    """Fixture providing the single-entry glyph renderer."""
    return render_entry


@pytest.fixture
def document_renderer():
    """Fixture providing the multi-entry document renderer."""
    return render_document


@pytest.fixture
def sample_numbers():
    """Fixture providing one OK, one ERR, and one ILL policy number."""
    return ["457508000", "664371495", "86110??36"]


@pytest.fixture
def sample_document(tmp_path, sample_numbers):
    """Fixture writing a scanned document with the sample numbers."""
    path = tmp_path / "scan.txt"
    path.write_text("\n".join(render_document(sample_numbers)) + "\n")
    return path

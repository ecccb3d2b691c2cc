"""Integration tests for EntryPipeline.

Tests document splitting into entries, recognition, classification, and
ordering guarantees.
"""

import pytest

from src.policy_ocr.config_loader import PipelineConfig
from src.policy_ocr.pipeline import EntryPipeline, iter_glyph_groups
from src.policy_ocr.types import SourceEmpty, ValidationStatus

ZEROS = [
    " _  _  _  _  _  _  _  _  _ ",
    "| || || || || || || || || |",
    "|_||_||_||_||_||_||_||_||_|",
]


@pytest.fixture
def pipeline():
    """Create a sequential EntryPipeline."""
    return EntryPipeline()


class TestGlyphGroups:
    """Test splitting lines into 4-line groups."""

    def test_full_groups(self):
        lines = ["a", "b", "c", "", "d", "e", "f", ""]
        assert list(iter_glyph_groups(lines)) == [["a", "b", "c"], ["d", "e", "f"]]

    def test_final_group_without_separator(self):
        lines = ["a", "b", "c", "", "d", "e", "f"]
        assert list(iter_glyph_groups(lines)) == [["a", "b", "c"], ["d", "e", "f"]]

    def test_short_final_group_discarded(self):
        lines = ["a", "b", "c", "", "d", "e"]
        assert list(iter_glyph_groups(lines)) == [["a", "b", "c"]]

    def test_separator_not_inspected(self):
        lines = ["a", "b", "c", "garbage"]
        assert list(iter_glyph_groups(lines)) == [["a", "b", "c"]]


class TestParseEntries:
    """Test end-to-end parsing of line sequences."""

    def test_single_entry_with_blank(self, pipeline):
        """Test one zero entry followed by a blank line."""
        entries = pipeline.parse_entries(ZEROS + [""])

        assert len(entries) == 1
        assert entries[0].number == "000000000"
        assert entries[0].status == ValidationStatus.OK

    def test_single_entry_without_blank(self, pipeline):
        """Test one zero entry with no trailing blank line."""
        entries = pipeline.parse_entries(ZEROS)

        assert len(entries) == 1
        assert entries[0].number == "000000000"
        assert entries[0].status == ValidationStatus.OK

    def test_empty_input(self, pipeline):
        """Test an empty line sequence is a SourceEmpty failure."""
        with pytest.raises(SourceEmpty):
            pipeline.parse_entries([])

    def test_empty_message_names_source(self):
        """Test the error carries the configured source name."""
        with pytest.raises(SourceEmpty, match="scan.txt"):
            EntryPipeline(source="scan.txt").parse_entries([])

    def test_too_few_lines(self, pipeline):
        """Test a document shorter than one entry yields no entries."""
        assert pipeline.parse_entries(ZEROS[:2]) == []

    def test_mixed_statuses(self, pipeline, document_renderer, sample_numbers):
        """Test OK, ERR, and ILL entries in one document."""
        entries = pipeline.parse_entries(document_renderer(sample_numbers))

        assert [e.format() for e in entries] == [
            "457508000",
            "664371495 ERR",
            "86110??36 ILL",
        ]

    def test_illegible_does_not_stop_processing(self, pipeline, document_renderer):
        """Test entries after an illegible one are still processed."""
        numbers = ["?????????", "345882865", "12345678?", "123456789"]
        entries = pipeline.parse_entries(document_renderer(numbers))

        assert [e.status for e in entries] == [
            ValidationStatus.ILL,
            ValidationStatus.OK,
            ValidationStatus.ILL,
            ValidationStatus.OK,
        ]

    def test_order_preserved(self, pipeline, document_renderer):
        """Test report order matches source order."""
        numbers = [f"{i:09d}" for i in range(0, 50)]
        entries = pipeline.parse_entries(
            document_renderer(numbers, trailing_blank=False)
        )

        assert [e.number for e in entries] == numbers

    def test_parallel_order_preserved(self, document_renderer):
        """Test threaded recognition keeps source order."""
        numbers = [f"{i * 7919:09d}" for i in range(100)]
        pipeline = EntryPipeline(config=PipelineConfig(max_workers=4))
        entries = pipeline.parse_entries(document_renderer(numbers))

        assert [e.number for e in entries] == numbers

    def test_accepts_generator(self, pipeline):
        """Test any iterable of lines is accepted."""
        entries = pipeline.parse_entries(line for line in ZEROS)
        assert [e.number for e in entries] == ["000000000"]

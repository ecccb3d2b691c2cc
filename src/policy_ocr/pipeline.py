"""Entry pipeline: raw document lines to report entries.

A document is a sequence of 4-line groups: three glyph lines followed by a
blank separator. The separator is never inspected. A final group of three
lines (no trailing blank) is still an entry; a trailing group of fewer than
three lines is dropped.

Example:
    >>> pipeline = EntryPipeline()
    >>> entries = pipeline.parse_entries(lines)
    >>> [entry.format() for entry in entries]
    ['457508000', '664371495 ERR', '86110??36 ILL']
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, List, Optional, Sequence

from .classifier import build_entry
from .config_loader import PipelineConfig
from .constants import GLYPH_HEIGHT, LINES_PER_ENTRY
from .recognizer import DigitRecognizer
from .types import ReportEntry, SourceEmpty, ValidationStatus

logger = logging.getLogger(__name__)


def iter_glyph_groups(lines: Sequence[str]) -> Iterator[Sequence[str]]:
    """Yield the glyph lines of each entry in source order.

    Args:
        lines: Document lines with newlines stripped

    Yields:
        The first GLYPH_HEIGHT lines of every complete group
    """
    for start in range(0, len(lines), LINES_PER_ENTRY):
        group = lines[start : start + LINES_PER_ENTRY]
        if len(group) < GLYPH_HEIGHT:
            logger.debug(
                f"Discarding trailing group of {len(group)} line(s) at line {start + 1}"
            )
            continue
        yield group[:GLYPH_HEIGHT]


class EntryPipeline:
    """Recognizes and classifies every entry of a document.

    Args:
        config: Pipeline configuration. If None, uses defaults.
        source: Name of the source, used in error messages and logs.

    Attributes:
        recognizer: Glyph-to-digit recognizer shared by all entries
    """

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        source: str = "<lines>",
    ):
        self.config = config or PipelineConfig()
        self.source = source
        self.recognizer = DigitRecognizer()

    def process_entry(self, glyph_lines: Sequence[str]) -> ReportEntry:
        """Recognize and classify one entry."""
        return build_entry(self.recognizer.recognize(glyph_lines))

    def parse_entries(self, lines: Sequence[str]) -> List[ReportEntry]:
        """Parse all entries from a document's lines.

        Args:
            lines: Document lines with newlines stripped, column spacing intact

        Returns:
            One ReportEntry per entry, in source order

        Raises:
            SourceEmpty: If lines is empty
        """
        lines = list(lines)
        if not lines:
            raise SourceEmpty(self.source)

        groups = list(iter_glyph_groups(lines))

        if self.config.max_workers > 1 and len(groups) > 1:
            # Executor.map yields results in submission order
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
                entries = list(pool.map(self.process_entry, groups))
        else:
            entries = [self.process_entry(group) for group in groups]

        illegible = sum(1 for e in entries if e.status == ValidationStatus.ILL)
        if illegible:
            logger.warning(f"{illegible} of {len(entries)} entries are illegible")

        logger.info(f"Parsed {len(entries)} entries from {self.source}")
        return entries

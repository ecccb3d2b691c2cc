"""Main policy OCR processor.

This module orchestrates the complete document workflow:
    1. READ: load the scanned document as lines
    2. RECOGNIZE: glyph lines to 9-character policy numbers
    3. CLASSIFY: OK / ILL / ERR per entry
    4. WRITE: one report line per entry

Example:
    >>> from src.policy_ocr import PolicyProcessor
    >>> processor = PolicyProcessor()
    >>> summary = processor.process_file(Path("scan.txt"), Path("report.txt"))
    >>> print(f"{summary.ok}/{summary.entries} valid")
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .config_loader import Config, get_default_config, load_config
from .io import read_lines, write_report
from .pipeline import EntryPipeline
from .types import ReportEntry, ValidationStatus

logger = logging.getLogger(__name__)


@dataclass
class ProcessingSummary:
    """Outcome of processing one document.

    Attributes:
        source: Input document path
        entries: Number of entries recognized
        ok: Entries with valid checksum
        illegible: Entries with at least one unrecognized digit
        errors: Entries failing the checksum
        processing_time_ms: Wall time for the whole run in milliseconds
        report: The report entries in source order
    """

    source: str
    entries: int = 0
    ok: int = 0
    illegible: int = 0
    errors: int = 0
    processing_time_ms: float = 0.0
    report: List[ReportEntry] = field(default_factory=list)

    @classmethod
    def from_entries(
        cls, source: str, report: List[ReportEntry], processing_time_ms: float
    ) -> "ProcessingSummary":
        statuses = [entry.status for entry in report]
        return cls(
            source=source,
            entries=len(report),
            ok=statuses.count(ValidationStatus.OK),
            illegible=statuses.count(ValidationStatus.ILL),
            errors=statuses.count(ValidationStatus.ERR),
            processing_time_ms=processing_time_ms,
            report=report,
        )


class PolicyProcessor:
    """Reads scanned documents and produces validation reports.

    Args:
        config_path: Optional path to config YAML file. If None, uses default config.
        config: Already loaded configuration; takes precedence over config_path.

    Attributes:
        config: Full configuration object
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        config: Optional[Config] = None,
    ):
        if config is not None:
            self.config: Config = config
        elif config_path is None:
            self.config = get_default_config()
        else:
            self.config = load_config(config_path)

        logger.info(
            f"Initialized policy OCR processor: "
            f"workers={self.config.policy_ocr.pipeline.max_workers}"
        )

    def parse_file(self, input_path: Path) -> List[ReportEntry]:
        """Read a document and return its report entries.

        Raises:
            SourceError: If the document cannot be read or is empty
        """
        lines = read_lines(input_path, encoding=self.config.policy_ocr.input.encoding)
        pipeline = EntryPipeline(
            config=self.config.policy_ocr.pipeline, source=str(input_path)
        )
        return pipeline.parse_entries(lines)

    def process_file(
        self, input_path: Path, output_path: Optional[Path] = None
    ) -> ProcessingSummary:
        """Process a document and optionally write its report.

        Args:
            input_path: Scanned document to read
            output_path: Report destination, overwritten if it exists.
                If None, nothing is written.

        Returns:
            ProcessingSummary with per-status counts and the report entries

        Raises:
            SourceError: If the document cannot be read or is empty
        """
        start_time = time.perf_counter()

        logger.info("=" * 60)
        logger.info(f"Processing {input_path}")
        logger.info("=" * 60)

        report = self.parse_file(input_path)

        if output_path is not None:
            output_config = self.config.policy_ocr.output
            write_report(
                report,
                output_path,
                encoding=output_config.encoding,
                create_parents=output_config.create_parents,
            )

        summary = ProcessingSummary.from_entries(
            source=str(input_path),
            report=report,
            processing_time_ms=(time.perf_counter() - start_time) * 1000,
        )

        logger.info(
            f"Done: {summary.entries} entries "
            f"(OK={summary.ok}, ILL={summary.illegible}, ERR={summary.errors}) "
            f"in {summary.processing_time_ms:.1f} ms"
        )
        return summary

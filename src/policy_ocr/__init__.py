"""Policy Number OCR & Validation.

This module converts scanned documents in which 9-digit policy numbers are
drawn as 3x3 pipe-and-underscore glyphs into numeric strings, and validates
each number against a weighted mod-11 checksum.

Core Components:
    - glyphs: Static glyph-to-digit table
    - recognizer: Slices entries into glyphs and resolves them ('?' on miss)
    - validator: Checksum calculation and validation
    - classifier: OK / ILL / ERR status and report formatting
    - pipeline: Splits document lines into entries and builds the report
    - io: Document reading and report writing
    - processor: End-to-end file processing

Example:
    >>> from src.policy_ocr import PolicyProcessor
    >>> processor = PolicyProcessor()
    >>> summary = processor.process_file(Path("scan.txt"), Path("report.txt"))
    >>> for entry in summary.report:
    ...     print(entry.format())
"""

from .classifier import build_entry, classify, format_number
from .config_loader import (
    Config,
    InputConfig,
    LoggingConfig,
    OutputConfig,
    PipelineConfig,
    PolicyOCRConfig,
    get_default_config,
    load_config,
)
from .glyphs import GLYPH_TABLE, build_glyph_table, lookup_glyph
from .io import read_lines, write_report
from .pipeline import EntryPipeline
from .processor import PolicyProcessor, ProcessingSummary
from .recognizer import DigitRecognizer, recognize
from .types import (
    ReportEntry,
    SourceEmpty,
    SourceError,
    SourceErrorKind,
    SourceNotFound,
    SourceUnreadable,
    ValidationStatus,
)
from .validator import calculate_checksum, validate_checksum

__all__ = [
    # Types
    "ValidationStatus",
    "ReportEntry",
    "SourceErrorKind",
    "SourceError",
    "SourceNotFound",
    "SourceUnreadable",
    "SourceEmpty",
    # Configuration
    "Config",
    "PolicyOCRConfig",
    "InputConfig",
    "OutputConfig",
    "PipelineConfig",
    "LoggingConfig",
    "load_config",
    "get_default_config",
    # Recognition
    "GLYPH_TABLE",
    "build_glyph_table",
    "lookup_glyph",
    "DigitRecognizer",
    "recognize",
    # Validation
    "calculate_checksum",
    "validate_checksum",
    "classify",
    "build_entry",
    "format_number",
    # Pipeline
    "EntryPipeline",
    "PolicyProcessor",
    "ProcessingSummary",
    "read_lines",
    "write_report",
]

"""Type definitions for the policy OCR module.

This module defines the report records produced by the pipeline, the
validation status taxonomy, and the source access errors raised at the
input boundary.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ValidationStatus(Enum):
    """Validation status of a recognized policy number.

    ILL takes precedence over ERR: a number with any illegible digit is
    never checksum-validated.
    """

    OK = "OK"
    ILL = "ILL"  # At least one glyph was not recognized
    ERR = "ERR"  # All digits recognized but checksum failed


@dataclass(frozen=True)
class ReportEntry:
    """One line of the output report.

    Attributes:
        number: 9-character policy number, possibly containing '?'
        status: Validation status of the number
        checksum_valid: Raw checksum result (False when the number is illegible)
        checksum: Weighted sum mod 11, None if it could not be computed
    """

    number: str
    status: ValidationStatus
    checksum_valid: bool
    checksum: Optional[int] = None

    def is_ok(self) -> bool:
        """Check if the entry passed validation.

        Returns:
            True if status is OK, False otherwise.
        """
        return self.status == ValidationStatus.OK

    def format(self) -> str:
        """Render the entry as a report line (without newline)."""
        if self.status == ValidationStatus.OK:
            return self.number
        return f"{self.number} {self.status.value}"


class SourceErrorKind(Enum):
    """Kinds of input source failures."""

    NOT_FOUND = "not_found"
    UNREADABLE = "unreadable"
    EMPTY = "empty"


class SourceError(Exception):
    """Input source could not be turned into a sequence of lines.

    Attributes:
        kind: Failure category
        source: Name or path of the source that failed
    """

    kind: SourceErrorKind = SourceErrorKind.UNREADABLE

    def __init__(self, source: str, message: Optional[str] = None):
        self.source = str(source)
        super().__init__(message or f"{self.default_message}: {self.source}")

    @property
    def default_message(self) -> str:
        return "Error reading source"


class SourceNotFound(SourceError):
    """The input source does not exist."""

    kind = SourceErrorKind.NOT_FOUND

    @property
    def default_message(self) -> str:
        return "File not found"


class SourceUnreadable(SourceError):
    """Permission or I/O failure while reading the source."""

    kind = SourceErrorKind.UNREADABLE

    @property
    def default_message(self) -> str:
        return "Permission denied when reading file"


class SourceEmpty(SourceError):
    """The source contains zero lines."""

    kind = SourceErrorKind.EMPTY

    @property
    def default_message(self) -> str:
        return "File is empty"

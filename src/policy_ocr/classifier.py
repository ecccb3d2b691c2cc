"""Status classification and report formatting for policy numbers."""

from .constants import ILLEGIBLE_DIGIT
from .types import ReportEntry, ValidationStatus
from .validator import calculate_checksum, validate_checksum


def classify(number: str) -> ValidationStatus:
    """Classify a recognized policy number.

    Args:
        number: Recognizer output, possibly containing '?'

    Returns:
        ILL if any digit is illegible, else OK or ERR by checksum

    Example:
        >>> classify("457508000")
        <ValidationStatus.OK: 'OK'>
        >>> classify("664371495")
        <ValidationStatus.ERR: 'ERR'>
    """
    if ILLEGIBLE_DIGIT in number:
        return ValidationStatus.ILL
    if validate_checksum(number):
        return ValidationStatus.OK
    return ValidationStatus.ERR


def build_entry(number: str) -> ReportEntry:
    """Create the report entry for a recognized policy number."""
    checksum = calculate_checksum(number)
    return ReportEntry(
        number=number,
        status=classify(number),
        checksum_valid=checksum == 0,
        checksum=checksum,
    )


def format_number(number: str) -> str:
    """Format a policy number as a report line.

    Example:
        >>> format_number("457508000")
        '457508000'
        >>> format_number("86110??36")
        '86110??36 ILL'
    """
    return build_entry(number).format()

"""
I/O Adapters

Reading scanned documents into lines and writing validation reports.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Mapping, Union

from .constants import ILLEGIBLE_DIGIT
from .types import (
    ReportEntry,
    SourceEmpty,
    SourceNotFound,
    SourceUnreadable,
    ValidationStatus,
)

logger = logging.getLogger(__name__)

ReportRecord = Union[ReportEntry, Mapping[str, object]]


def read_lines(file_path: Path, encoding: str = "utf-8") -> List[str]:
    """Read a document as lines with line endings stripped.

    Column spacing is preserved; only trailing '\\n' / '\\r' are removed.

    Raises:
        SourceNotFound: If the file does not exist
        SourceUnreadable: On permission or other read/decode failures
        SourceEmpty: If the file has no lines
    """
    file_path = Path(file_path)
    source = str(file_path)

    try:
        with open(file_path, "r", encoding=encoding, newline="") as f:
            lines = [line.rstrip("\r\n") for line in f]
    except (FileNotFoundError, IsADirectoryError) as e:
        raise SourceNotFound(source) from e
    except PermissionError as e:
        raise SourceUnreadable(source) from e
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnreadable(source, f"Error reading file {source}: {e}") from e

    if not lines:
        raise SourceEmpty(source)

    logger.debug(f"Read {len(lines)} lines from {source}")
    return lines


def format_record(record: ReportRecord) -> str:
    """Format a report entry or a {number, valid_checksum} mapping."""
    if isinstance(record, ReportEntry):
        return record.format()

    number = str(record["number"])
    if ILLEGIBLE_DIGIT in number:
        status = ValidationStatus.ILL
    elif record.get("valid_checksum"):
        status = ValidationStatus.OK
    else:
        status = ValidationStatus.ERR

    if status == ValidationStatus.OK:
        return number
    return f"{number} {status.value}"


def write_report(
    records: Iterable[ReportRecord],
    file_path: Path,
    encoding: str = "utf-8",
    create_parents: bool = True,
) -> int:
    """Write one newline-terminated line per record, replacing any old content.

    Returns:
        Number of lines written
    """
    file_path = Path(file_path)
    if create_parents:
        file_path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with open(file_path, "w", encoding=encoding, newline="\n") as f:
        for record in records:
            f.write(format_record(record) + "\n")
            count += 1

    logger.info(f"Wrote {count} report lines to {file_path}")
    return count

"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ BED Writer - Append-Mode Tab-Separated Interval Output                       │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

DESCRIPTION:
    Writes IntervalRecords as 8-column tab-separated rows:

        chromosome  start  end  id  length  strand  sequence  G4_type

    Fields are written verbatim, never quoted or escaped.

    Files are always opened in append mode. The header is written at most
    once: if the file already starts with it, it is not repeated; otherwise it
    is appended before the first data row.

    Every append goes through the writer's lock, so a writer shared between
    callers never interleaves partial batches.

USAGE::

    writer = BedWriter("out/genome_forward_G4.bed")
    writer.write_records(intervals)
    df = writer.to_dataframe()
"""

from __future__ import annotations

import csv
import logging
import threading
from pathlib import Path
from typing import Iterable, Union

import pandas as pd

from Utilities.config.analysis import OUTPUT_CONFIG
from Utilities.core.records import IntervalRecord

logger = logging.getLogger(__name__)

BED_HEADER = list(OUTPUT_CONFIG['bed_header'])
_HEADER_LINE = OUTPUT_CONFIG['separator'].join(BED_HEADER)

# Text columns are read back verbatim (no NA inference on e.g. "NA" ids).
_TEXT_COLUMNS = {'chromosome': str, 'id': str, 'strand': str, 'sequence': str, 'G4_type': str}


class BedWriter:
    """
    Thread-safe appender for one interval file.

    Usage::

        writer = BedWriter(path)
        writer.ensure_header()
        written = writer.write_records(records)
    """

    def __init__(self, output_path: Union[str, Path]):
        self.output_path = Path(output_path)
        self._lock = threading.Lock()
        self._header_present = None

    def _file_has_header(self) -> bool:
        try:
            with open(self.output_path, 'r') as f:
                first_line = f.readline()
        except FileNotFoundError:
            return False
        return first_line.strip() == _HEADER_LINE

    def _append(self, records: Iterable[IntervalRecord]) -> int:
        if self._header_present is None:
            self._header_present = self._file_has_header()

        count = 0
        with open(self.output_path, 'a', newline='') as fh:
            writer = csv.writer(
                fh,
                delimiter=OUTPUT_CONFIG['separator'],
                lineterminator='\n',
                quoting=csv.QUOTE_NONE,
                quotechar=None,
            )
            if not self._header_present:
                writer.writerow(BED_HEADER)
                self._header_present = True
            for record in records:
                writer.writerow(record.as_row())
                count += 1
        return count

    def ensure_header(self) -> None:
        """Create the file with its header if it does not already have one."""
        with self._lock:
            self._append(())

    def write_records(self, records: Iterable[IntervalRecord]) -> int:
        """
        Append *records* as data rows, writing the header first if needed.

        Returns:
            Number of rows written

        Raises:
            IOError: If the file cannot be read or appended to
        """
        with self._lock:
            count = self._append(records)
        logger.debug(f"BedWriter: appended {count} rows to {self.output_path}")
        return count

    def to_dataframe(self) -> pd.DataFrame:
        """Load the written intervals (see :func:`read_bed_file`)."""
        with self._lock:
            return read_bed_file(self.output_path)


def read_bed_file(path: Union[str, Path]) -> pd.DataFrame:
    """
    Load an interval file written by :class:`BedWriter`.

    Returns:
        ``pandas.DataFrame`` with the 8 BED columns; empty (with those
        columns) when the file does not exist or holds only the header.
    """
    path = Path(path)
    if not path.exists():
        return pd.DataFrame(columns=BED_HEADER)

    df = pd.read_csv(
        path,
        sep=OUTPUT_CONFIG['separator'],
        dtype=_TEXT_COLUMNS,
        keep_default_na=False,
        quoting=csv.QUOTE_NONE,
    )
    logger.info(f"read_bed_file: loaded {len(df):,} intervals from {path}")
    return df

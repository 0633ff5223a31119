"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ FASTA Sequence Storage - Per-Record Disk Cache for Genome Scanning           │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

DESCRIPTION:
    Parses a multi-record FASTA file and spills every record to its own scratch
    file so that only one record needs to be held in memory while scanning.

ARCHITECTURE:
    - FastaSequenceStore: streams the FASTA file line by line, strips filler
      characters (N/n) and writes one ``<index>_<id>.bin`` file per record,
      plus a ``metadata.json`` summary.

RECORD RULES:
    - A record starts at a line beginning with '>'; its identifier is the first
      whitespace-delimited token after the marker.
    - Following lines are stripped and concatenated until the next marker.
    - Lines before the first marker are ignored.
    - A repeated identifier replaces the earlier record (last write wins).
    - A marker line with no identifier is skipped.
"""

import json
import logging
import re
import tempfile
import shutil
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from Utilities.config.analysis import ANALYSIS_CONFIG
from Utilities.core.records import SequenceRecord
from Utilities.sequence_utils import calc_gc_content, strip_filler

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME = re.compile(r'[^A-Za-z0-9._-]')


class SequenceStoreError(IOError):
    """Raised when the FASTA source or a cached record cannot be read or written"""
    pass


class FastaSequenceStore:
    """
    Disk-backed FASTA record store.

    Usage:
        store = FastaSequenceStore("genome.fa", cache_dir="cache")

        for record in store.iter_records():
            # record.bases are already free of N/n
            ...

        metadata = store.get_metadata("chr1")
        print(f"Length: {metadata['length']}, GC%: {metadata['gc_content']:.2f}")

        store.cleanup()
    """

    def __init__(self, fasta_path: str, cache_dir: Optional[str] = None):
        """
        Parse *fasta_path* and cache every record under *cache_dir*.

        Args:
            fasta_path: Multi-record FASTA file
            cache_dir: Scratch directory. If None, a temp directory is created
                and owned by this store.

        Raises:
            SequenceStoreError: If the cache directory cannot be created, the
                FASTA file cannot be read, or a record cannot be written.
        """
        self.fasta_path = Path(fasta_path)

        if cache_dir is None:
            self.base_dir = Path(tempfile.mkdtemp(prefix="g4fasta2bed_cache_"))
            self._owns_dir = True
        else:
            self.base_dir = Path(cache_dir)
            self._owns_dir = False
            try:
                self.base_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise SequenceStoreError(
                    f"Cannot create cache directory '{self.base_dir}': {e}"
                ) from e

        self.metadata_file = self.base_dir / ANALYSIS_CONFIG['metadata_file']
        # Insertion ordered: iteration follows first appearance in the file.
        self.metadata: Dict[str, Dict[str, Any]] = {}

        self._split_fasta()
        self._save_metadata()

        logger.info(
            f"FastaSequenceStore initialized at {self.base_dir} "
            f"({len(self.metadata)} records from {self.fasta_path})"
        )

    # ---------------------------------------------------------------------
    # PARSING
    # ---------------------------------------------------------------------
    def _split_fasta(self) -> None:
        marker = ANALYSIS_CONFIG['record_marker']
        header: Optional[str] = None
        lines: List[str] = []

        try:
            with open(self.fasta_path, 'r') as f:
                for line in f:
                    if line.startswith(marker):
                        if header is not None:
                            self._store_record(header, lines)
                        header = self._parse_header(line[len(marker):])
                        lines = []
                    elif header is not None:
                        lines.append(line.strip())
        except OSError as e:
            raise SequenceStoreError(
                f"Cannot read FASTA file '{self.fasta_path}': {e}"
            ) from e

        if header is not None:
            self._store_record(header, lines)

    @staticmethod
    def _parse_header(header_line: str) -> str:
        tokens = header_line.split()
        return tokens[0] if tokens else ""

    def _store_record(self, record_id: str, lines: List[str]) -> None:
        if not record_id:
            logger.warning(
                f"Skipping record with empty identifier in {self.fasta_path}"
            )
            return

        raw = ''.join(lines)
        bases = strip_filler(raw)

        if record_id in self.metadata:
            logger.warning(
                f"Duplicate identifier '{record_id}' in {self.fasta_path}; "
                f"the later record replaces the earlier one"
            )
            seq_file = Path(self.metadata[record_id]['file_path'])
        else:
            seq_file = self._record_path(record_id)

        try:
            with open(seq_file, 'w') as f:
                f.write(bases)
        except OSError as e:
            raise SequenceStoreError(
                f"Cannot write record '{record_id}' to '{seq_file}': {e}"
            ) from e

        self.metadata[record_id] = {
            'record_id': record_id,
            'length': len(bases),
            'raw_length': len(raw),
            'filler_removed': len(raw) - len(bases),
            'gc_content': calc_gc_content(bases),
            'file_path': str(seq_file),
        }

        logger.info(
            f"Saved record '{record_id}' ({len(bases):,} bp, "
            f"{len(raw) - len(bases):,} filler removed)"
        )

    def _record_path(self, record_id: str) -> Path:
        # Index prefix keeps distinct identifiers apart after sanitizing.
        safe_name = _UNSAFE_FILENAME.sub('_', record_id)[:80]
        index = len(self.metadata)
        return self.base_dir / f"{index:05d}_{safe_name}{ANALYSIS_CONFIG['cache_suffix']}"

    def _save_metadata(self) -> None:
        try:
            with open(self.metadata_file, 'w') as f:
                json.dump(self.metadata, f, indent=2)
        except OSError as e:
            raise SequenceStoreError(
                f"Cannot write metadata to '{self.metadata_file}': {e}"
            ) from e

    # ---------------------------------------------------------------------
    # LOOKUP
    # ---------------------------------------------------------------------
    def record_ids(self) -> List[str]:
        """Record identifiers in file order."""
        return list(self.metadata)

    def get_sequence(self, record_id: str) -> str:
        """
        Read the filtered bases cached for *record_id*.

        Raises:
            KeyError: If the identifier is unknown
            SequenceStoreError: If the cached file cannot be read
        """
        if record_id not in self.metadata:
            raise KeyError(f"Record '{record_id}' not found")

        seq_file = Path(self.metadata[record_id]['file_path'])
        try:
            with open(seq_file, 'r') as f:
                return f.read()
        except OSError as e:
            raise SequenceStoreError(
                f"Cannot read record '{record_id}' from '{seq_file}': {e}"
            ) from e

    def iter_records(self) -> Iterator[SequenceRecord]:
        """Yield a SequenceRecord per identifier, in file order."""
        for record_id in self.record_ids():
            yield SequenceRecord(record_id, self.get_sequence(record_id))

    def get_metadata(self, record_id: str) -> Dict[str, Any]:
        """
        Get record metadata without loading the bases.

        Returns:
            Dictionary with length, filler count, GC% and cache path
        """
        if record_id not in self.metadata:
            raise KeyError(f"Record '{record_id}' not found")
        return self.metadata[record_id].copy()

    def __len__(self) -> int:
        return len(self.metadata)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self.metadata

    def cleanup(self) -> None:
        """Delete cached record files (and the directory if this store created it)."""
        if self._owns_dir:
            if self.base_dir.exists():
                shutil.rmtree(self.base_dir)
                logger.info(f"Deleted cache directory {self.base_dir}")
            return

        for info in self.metadata.values():
            Path(info['file_path']).unlink(missing_ok=True)
        self.metadata_file.unlink(missing_ok=True)
        logger.info(f"Deleted {len(self.metadata)} cached records from {self.base_dir}")

"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ Strand Pipeline - Dual-Strand G4 Scanning of FASTA Records                   │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

DESCRIPTION:
    Drives FastaSequenceStore → GQuadruplexDetector → BedWriter for every
    record, on one or both strands.

    Forward pass ('+')
        Scans each record's filtered bases.

    Reverse pass ('-')
        Scans ``complement(bases)``. The complement is NOT reversed, so
        coordinates share the forward pass's index space.

    Run modes
        FORWARD, REVERSE, BOTH_SERIAL (forward then reverse in the calling
        thread) and BOTH_PARALLEL (one worker thread per strand, joined before
        returning).

FAILURE MODEL:
    - An I/O error on one record is logged and that record is abandoned; the
      strand carries on with its next record.
    - Any other error ends that strand's worker. It is logged and recorded in
      the strand's summary, and never cancels the other strand.

USAGE::

    store  = FastaSequenceStore("genome.fa", "cache")
    report = StrandPipeline(store, forward_writer, reverse_writer).run(RunMode.BOTH_PARALLEL)
    for summary in report.summaries:
        print(summary.strand, summary.intervals_written)
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from Detectors.base.base_detector import BaseMotifDetector
from Detectors.gquad.detector import GQuadruplexDetector
from Utilities.bed_writer import BedWriter
from Utilities.config.analysis import ANALYSIS_CONFIG, OUTPUT_CONFIG, STRAND_LABELS, RunMode
from Utilities.core.records import IntervalRecord
from Utilities.directory_cleaner import clear_directory
from Utilities.disk_storage import FastaSequenceStore
from Utilities.sequence_utils import complement

logger = logging.getLogger(__name__)

FORWARD = STRAND_LABELS['forward']
REVERSE = STRAND_LABELS['reverse']

# Strand label -> transform applied to the stored bases before scanning
_STRAND_TRANSFORMS: Dict[str, Callable[[str], str]] = {
    FORWARD: lambda bases: bases,
    REVERSE: complement,
}

_MODE_STRANDS = {
    RunMode.FORWARD: (FORWARD,),
    RunMode.REVERSE: (REVERSE,),
    RunMode.BOTH_SERIAL: (FORWARD, REVERSE),
    RunMode.BOTH_PARALLEL: (FORWARD, REVERSE),
}


# ──────────────────────────────────────────────────────────────────────────────
# REPORTING
# ──────────────────────────────────────────────────────────────────────────────

@dataclass
class StrandSummary:
    """Outcome of one strand pass."""
    strand: str
    records_processed: int = 0
    failed_records: List[str] = field(default_factory=list)
    intervals_written: int = 0
    motif_counts: Counter = field(default_factory=Counter)
    error: Optional[str] = None
    elapsed: float = 0.0

    @property
    def success(self) -> bool:
        return self.error is None and not self.failed_records


@dataclass
class PipelineReport:
    """Per-strand summaries of one pipeline run, forward first."""
    mode: RunMode
    summaries: List[StrandSummary] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return all(s.success for s in self.summaries)

    def summary_for(self, strand: str) -> Optional[StrandSummary]:
        for summary in self.summaries:
            if summary.strand == strand:
                return summary
        return None


# ──────────────────────────────────────────────────────────────────────────────
# PIPELINE
# ──────────────────────────────────────────────────────────────────────────────

class StrandPipeline:
    """
    Scan every record of a store on the requested strands.

    Each strand has its own writer. Within a strand, records are processed
    sequentially in store order.
    """

    def __init__(
        self,
        store: FastaSequenceStore,
        forward_writer: Optional[BedWriter] = None,
        reverse_writer: Optional[BedWriter] = None,
        detector: Optional[BaseMotifDetector] = None,
    ):
        """
        Args:
            store:          Source of ``(record_id, bases)`` pairs.
            forward_writer: Sink for '+' intervals (required for modes
                            that scan the forward strand).
            reverse_writer: Sink for '-' intervals (required for modes
                            that scan the reverse strand).
            detector:       Motif detector; defaults to GQuadruplexDetector.
        """
        self.store = store
        self.writers = {FORWARD: forward_writer, REVERSE: reverse_writer}
        self.detector = detector if detector is not None else GQuadruplexDetector()

    def build_intervals(self, record_id: str, bases: str, strand: str) -> List[IntervalRecord]:
        """Scan one record on *strand* and assemble its interval records."""
        scanned = _STRAND_TRANSFORMS[strand](bases)
        return [
            IntervalRecord.from_match(record_id, match, strand)
            for match in self.detector.detect_motifs(scanned)
        ]

    def run_strand(self, strand: str) -> StrandSummary:
        """
        Scan all records on one strand, writing each record's intervals.

        Never raises: failures are logged and recorded in the summary.
        """
        summary = StrandSummary(strand=strand)
        writer = self.writers[strand]
        start_time = time.time()
        logger.info(f"Strand '{strand}': scanning {len(self.store)} records")

        try:
            if writer is None:
                raise ValueError(f"No writer configured for strand '{strand}'")
            writer.ensure_header()

            for record_id in self.store.record_ids():
                try:
                    bases = self.store.get_sequence(record_id)
                    intervals = self.build_intervals(record_id, bases, strand)
                    summary.intervals_written += writer.write_records(intervals)
                except OSError as e:
                    logger.warning(
                        f"Strand '{strand}': record '{record_id}' abandoned "
                        f"({type(e).__name__}: {e})"
                    )
                    summary.failed_records.append(record_id)
                    continue

                summary.records_processed += 1
                summary.motif_counts.update(i.motif_type for i in intervals)
                logger.debug(
                    f"Strand '{strand}': record '{record_id}' "
                    f"({len(bases):,} bp) -> {len(intervals)} intervals"
                )
        except Exception as e:
            summary.error = f"{type(e).__name__}: {e}"
            logger.error(f"Strand '{strand}' worker failed: {summary.error}")

        summary.elapsed = time.time() - start_time
        logger.info(
            f"Strand '{strand}': {summary.records_processed} records, "
            f"{summary.intervals_written:,} intervals in {summary.elapsed:.2f}s"
        )
        return summary

    def run(self, mode: RunMode = ANALYSIS_CONFIG['default_mode']) -> PipelineReport:
        """
        Run the strands selected by *mode*.

        BOTH_PARALLEL submits one task per strand to a two-worker pool and
        waits for both; one strand failing does not stop the other.
        """
        mode = RunMode(mode)
        strands = _MODE_STRANDS[mode]
        report = PipelineReport(mode=mode)

        stats = self.detector.get_statistics()
        logger.info(
            f"Run mode '{mode.value}': {stats['motif_class']} detector with "
            f"{stats['total_patterns']} patterns in {len(stats['pattern_groups'])} families "
            f"({', '.join(stats['pattern_groups'])})"
        )

        if mode is RunMode.BOTH_PARALLEL:
            workers = min(len(strands), ANALYSIS_CONFIG['max_strand_workers'])
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="strand") as executor:
                futures = [executor.submit(self.run_strand, strand) for strand in strands]
                wait(futures)
            report.summaries = [future.result() for future in futures]
        else:
            report.summaries = [self.run_strand(strand) for strand in strands]

        return report


# ──────────────────────────────────────────────────────────────────────────────
# FILE-LEVEL ENTRY POINT
# ──────────────────────────────────────────────────────────────────────────────

def output_paths(fasta_path: Union[str, Path], output_dir: Union[str, Path]) -> Dict[str, Path]:
    """Forward/reverse interval file paths derived from the FASTA file stem."""
    stem = Path(fasta_path).stem
    output_dir = Path(output_dir)
    return {
        FORWARD: output_dir / f"{stem}{OUTPUT_CONFIG['forward_suffix']}",
        REVERSE: output_dir / f"{stem}{OUTPUT_CONFIG['reverse_suffix']}",
    }


def run_fasta_to_bed(
    fasta_path: Union[str, Path],
    cache_dir: Union[str, Path],
    output_dir: Union[str, Path],
    mode: RunMode = ANALYSIS_CONFIG['default_mode'],
) -> PipelineReport:
    """
    Scan a FASTA file and write one interval file per scanned strand.

    The output directory is created if needed. The cache directory is
    cleared once scanning has finished, and also when the FASTA file fails
    part way through caching.

    Raises:
        SequenceStoreError: If the FASTA file cannot be read or cached
        IOError: If the output directory cannot be created or the cache
            cannot be cleared
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    paths = output_paths(fasta_path, output_dir)

    try:
        store = FastaSequenceStore(str(fasta_path), str(cache_dir))
        pipeline = StrandPipeline(
            store,
            forward_writer=BedWriter(paths[FORWARD]),
            reverse_writer=BedWriter(paths[REVERSE]),
        )
        report = pipeline.run(mode)
    finally:
        # The cache directory may not exist if it could not be created.
        if Path(cache_dir).is_dir():
            clear_directory(cache_dir)

    for summary in report.summaries:
        counts = ", ".join(f"{k}={v}" for k, v in sorted(summary.motif_counts.items())) or "none"
        logger.info(
            f"Strand '{summary.strand}' -> {paths[summary.strand]}: "
            f"{summary.intervals_written:,} intervals ({counts})"
        )
    return report

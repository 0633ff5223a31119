"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ Records - Value types shared by the scanner, pipeline and writers            │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘
"""
# ═══════════════════════════════════════════════════════════════════════════════
# IMPORTS
# ═══════════════════════════════════════════════════════════════════════════════
from dataclasses import dataclass
from enum import Enum
from typing import List


class MotifType(str, Enum):
    """G4 motif families, valued by their output label."""
    FOUR_REPEAT = "4G"
    BULGE = "Bulge"
    VARIANT_LOOP = "GVBQ"
    LONG_LOOP = "4GL15"
    PARTIAL = "PHQS"


# ═══════════════════════════════════════════════════════════════════════════════
# DATA CLASSES
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class SequenceRecord:
    """One FASTA record after filler removal."""
    record_id: str
    bases: str


@dataclass(frozen=True)
class MotifMatch:
    """
    A single grammar hit.

    Attributes:
        start: 0-based start in the scanned string
        end: Exclusive end
        text: Exactly ``sequence[start:end]``
        motif_type: Family that produced the hit
    """
    start: int
    end: int
    text: str
    motif_type: MotifType

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class IntervalRecord:
    """
    One BED row: a MotifMatch placed on a chromosome and strand.

    ``interval_id`` is ``chrom_start_end`` and ``length`` is ``end - start``.
    """
    chrom: str
    start: int
    end: int
    interval_id: str
    length: int
    strand: str
    sequence: str
    motif_type: str

    @classmethod
    def from_match(cls, chrom: str, match: MotifMatch, strand: str) -> "IntervalRecord":
        return cls(
            chrom=chrom,
            start=match.start,
            end=match.end,
            interval_id=f"{chrom}_{match.start}_{match.end}",
            length=match.end - match.start,
            strand=strand,
            sequence=match.text,
            motif_type=match.motif_type.value,
        )

    def as_row(self) -> List[str]:
        """Columns in BED header order, as strings."""
        return [
            self.chrom,
            str(self.start),
            str(self.end),
            self.interval_id,
            str(self.length),
            self.strand,
            self.sequence,
            self.motif_type,
        ]

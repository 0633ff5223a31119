"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ Sequence Utils - Shared helpers for sequence filtering and strand transforms │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘
"""
# ═══════════════════════════════════════════════════════════════════════════════
# IMPORTS
# ═══════════════════════════════════════════════════════════════════════════════
from Utilities.config.analysis import ANALYSIS_CONFIG

# ═══════════════════════════════════════════════════════════════════════════════
# TUNABLE PARAMETERS
# ═══════════════════════════════════════════════════════════════════════════════
# Pre-compiled translation table for complement (case preserving, no reversal)
_COMPLEMENT_TABLE = str.maketrans("ACGTacgt", "TGCAtgca")
# Filler characters are deleted, not replaced
_FILLER_TABLE = str.maketrans("", "", ANALYSIS_CONFIG['filler_characters'])
_GC_BASES = frozenset('GCgc')
_AT_BASES = frozenset('ATat')
# ═══════════════════════════════════════════════════════════════════════════════


def complement(seq: str) -> str:
    """
    Base-wise complement of a DNA sequence, without reversal.

    A<->T and C<->G are swapped case-preservingly; every other character is
    copied through once, so ``len(complement(s)) == len(s)`` and index ``i``
    of the result pairs with index ``i`` of the input.

    Example:
        >>> complement("ATCGatcgN-")
        'TAGCtagcN-'
    """
    return seq.translate(_COMPLEMENT_TABLE)


def strip_filler(seq: str) -> str:
    """
    Remove filler/ambiguity characters (N, n).

    Coordinates computed on the result are relative to the filtered string.

    Example:
        >>> strip_filler("GGGNNNGGGG")
        'GGGGGGG'
    """
    return seq.translate(_FILLER_TABLE)


def calc_gc_content(seq: str) -> float:
    """
    GC content percentage: (G + C) / (A + T + G + C) × 100.

    Ambiguous symbols are excluded from the denominator; returns 0.0 when the
    sequence holds no A/C/G/T.
    """
    if not seq:
        return 0.0

    gc_count = sum(1 for c in seq if c in _GC_BASES)
    at_count = sum(1 for c in seq if c in _AT_BASES)
    valid_bases = gc_count + at_count

    if valid_bases == 0:
        return 0.0
    return (gc_count / valid_bases) * 100

"""
Analysis configuration for G4Fasta2Bed.

This module contains analysis parameters:
- FASTA parsing and per-record cache settings
- Motif grammar building-block bounds
- Interval (BED) output layout
- Run modes and their command-line flags

STRAND MODES
------------
- BOTH_PARALLEL: forward and complemented strands scanned by two workers
- BOTH_SERIAL:   forward strand, then complemented strand, one thread
- FORWARD:       forward strand only
- REVERSE:       complemented strand only

The "reverse" strand is the base-wise complement of the forward bases with
NO reversal, so both strands share one coordinate space.
"""

from enum import Enum
from typing import Dict


class ConfigError(ValueError):
    """Raised when a run is configured with an unknown mode or bad arguments"""
    pass


class RunMode(str, Enum):
    BOTH_PARALLEL = "all"
    BOTH_SERIAL = "serial"
    FORWARD = "forward"
    REVERSE = "reverse"


# ==================== ANALYSIS PARAMETERS ====================
ANALYSIS_CONFIG = {
    'record_marker': '>',            # FASTA header marker
    'filler_characters': 'Nn',       # Removed before scanning (shifts coordinates)
    'cache_suffix': '.bin',          # One scratch file per record
    'metadata_file': 'metadata.json',
    'max_strand_workers': 2,         # One worker per strand, never more
    'default_mode': RunMode.BOTH_PARALLEL,
}

# ==================== MOTIF GRAMMAR PARAMETERS ====================
# G and C share one "strong base" class; runs may intermix them.
GRAMMAR_CONFIG = {
    'strong_bases': 'GC',
    'min_run': 3,                    # run: >= 3 strong bases
    'short_run': 2,                  # GVBQ: one run shortened to 2
    'short_loop': (1, 7),            # lazy
    'long_loop': (1, 15),            # lazy, 4GL15 split-run gap
}

# ==================== OUTPUT PARAMETERS ====================
OUTPUT_CONFIG = {
    'bed_header': (
        'chromosome', 'start', 'end', 'id', 'length', 'strand', 'sequence', 'G4_type'
    ),
    'separator': '\t',
    'forward_suffix': '_forward_G4.bed',
    'reverse_suffix': '_reverse_G4.bed',
}

STRAND_LABELS = {'forward': '+', 'reverse': '-'}

# Command-line flag -> run mode
MODE_FLAGS: Dict[str, RunMode] = {
    '-all': RunMode.BOTH_PARALLEL,
    '-serial': RunMode.BOTH_SERIAL,
    '-f': RunMode.FORWARD,
    '-r': RunMode.REVERSE,
}


def resolve_run_mode(flag: str = None) -> RunMode:
    """
    Map a command-line mode flag to a RunMode.

    Args:
        flag: One of MODE_FLAGS, or None for the default mode

    Returns:
        RunMode for the flag

    Raises:
        ConfigError: If the flag is not a known mode flag
    """
    if flag is None:
        return ANALYSIS_CONFIG['default_mode']
    try:
        return MODE_FLAGS[flag]
    except KeyError:
        raise ConfigError(
            f"Invalid option: {flag} (expected one of {', '.join(MODE_FLAGS)})"
        ) from None

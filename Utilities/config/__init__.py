"""
Configuration modules for G4Fasta2Bed.

This package contains all configuration constants including:
- analysis: FASTA parsing, grammar bounds, output layout and run modes
"""

from .analysis import (
    ANALYSIS_CONFIG,
    GRAMMAR_CONFIG,
    OUTPUT_CONFIG,
    STRAND_LABELS,
    MODE_FLAGS,
    ConfigError,
    RunMode,
    resolve_run_mode,
)

__all__ = [
    'ANALYSIS_CONFIG',
    'GRAMMAR_CONFIG',
    'OUTPUT_CONFIG',
    'STRAND_LABELS',
    'MODE_FLAGS',
    'ConfigError',
    'RunMode',
    'resolve_run_mode',
]

"""Core modules for G4Fasta2Bed"""

from .records import (
    MotifType,
    SequenceRecord,
    MotifMatch,
    IntervalRecord,
)

__all__ = [
    'MotifType',
    'SequenceRecord',
    'MotifMatch',
    'IntervalRecord',
]

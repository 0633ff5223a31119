"""
G-Quadruplex Detection Subpackage

This subpackage provides the structural G4 grammars and the detector that
runs them over a sequence.

Modules:
--------
- patterns: Regex building blocks and the five compiled motif families
- detector: GQuadruplexDetector and the module-level ``scan`` helper

Constants:
----------
- G4_GRAMMARS: Process-wide, read-only compiled grammar table
  (4G > Bulge > GVBQ > 4GL15 > PHQS, in reporting order)
"""

from .detector import GQuadruplexDetector, scan
from .patterns import G4_GRAMMARS, GRAMMARS_BY_TYPE, get_patterns

__all__ = [
    'GQuadruplexDetector',
    'scan',
    'G4_GRAMMARS',
    'GRAMMARS_BY_TYPE',
    'get_patterns',
]

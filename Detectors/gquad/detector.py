"""G-Quadruplex DNA detector using the five structural G4 grammars."""
# IMPORTS
from typing import List, Sequence

from ..base.base_detector import BaseMotifDetector, MotifGrammar
from .patterns import G4_GRAMMARS
from Utilities.core.records import MotifMatch


class GQuadruplexDetector(BaseMotifDetector):
    """
    Grammar-based G4 detector.

    Reports every hit of the 4G, Bulge, GVBQ, 4GL15 and PHQS families with
    no overlap resolution between families. All instances share the
    process-wide ``G4_GRAMMARS`` table.
    """

    # -------------------------
    # Core Interface
    # -------------------------

    def get_motif_class_name(self) -> str:
        return "G-Quadruplex"

    def get_grammars(self) -> Sequence[MotifGrammar]:
        return G4_GRAMMARS


_DEFAULT_DETECTOR = GQuadruplexDetector()


def scan(sequence: str) -> List[MotifMatch]:
    """Scan *sequence* for all G4 families with the shared detector."""
    return _DEFAULT_DETECTOR.detect_motifs(sequence)

"""Abstract base class for G4 motif detectors."""
# IMPORTS
from abc import ABC, abstractmethod
import re
from typing import Dict, Iterator, List, NamedTuple, Sequence, Tuple

from Utilities.core.records import MotifMatch, MotifType

# Variant tuple layout: (regex, pattern_id, description)
Variant = Tuple[str, str, str]


class MotifGrammar(NamedTuple):
    """A compiled motif family."""
    motif_type: MotifType
    pattern: "re.Pattern"
    variants: Tuple[Variant, ...]


class BaseMotifDetector(ABC):
    """
    Abstract base class for grammar-driven motif detectors.

    Subclasses supply an already-compiled, immutable grammar table. Detectors
    keep no per-call state, so one instance may be shared between threads.
    """

    @abstractmethod
    def get_grammars(self) -> Sequence[MotifGrammar]:
        """Return the compiled grammar table, in reporting order."""

    @abstractmethod
    def get_motif_class_name(self) -> str:
        """Return the motif class name (e.g., 'G-Quadruplex')"""

    def iter_family_matches(self, grammar: MotifGrammar, sequence: str) -> Iterator[MotifMatch]:
        """
        Yield non-overlapping matches of one family, left to right.

        After each hit the search resumes at the hit's end.
        """
        for match in grammar.pattern.finditer(sequence):
            start, end = match.span()
            yield MotifMatch(start, end, match.group(), grammar.motif_type)

    def detect_by_family(self, sequence: str) -> Dict[MotifType, List[MotifMatch]]:
        """Scan *sequence* with every grammar, keeping the families apart."""
        if sequence is None:
            sequence = ""
        if not isinstance(sequence, str):
            raise TypeError(f"sequence must be a string, not {type(sequence).__name__}")

        return {
            grammar.motif_type: list(self.iter_family_matches(grammar, sequence))
            for grammar in self.get_grammars()
        }

    def detect_motifs(self, sequence: str) -> List[MotifMatch]:
        """
        Scan *sequence* with all compiled grammars and return every match.

        Per-family lists are concatenated in grammar order; overlapping hits
        from different families are all kept.
        """
        motifs: List[MotifMatch] = []
        for family_matches in self.detect_by_family(sequence).values():
            motifs.extend(family_matches)
        return motifs

    def get_statistics(self) -> Dict[str, object]:
        """Get detector statistics"""
        grammars = self.get_grammars()
        return {
            'motif_class': self.get_motif_class_name(),
            'total_patterns': sum(len(g.variants) for g in grammars),
            'pattern_groups': [g.motif_type.value for g in grammars],
            'patterns_by_group': {g.motif_type.value: len(g.variants) for g in grammars},
        }

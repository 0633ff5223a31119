#!/usr/bin/env python3
"""
Test suite for GQuadruplexDetector.

Tests:
1. Canonical quadruplex found once, with exact coordinates
2. Sequences with no strong-base runs yield nothing
3. Match bounds and text agree with the scanned string
4. Per-family matches are ordered and non-overlapping
5. Repeated scans are identical
6. Input validation
"""

import os
import random
import sys
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from Detectors import GQuadruplexDetector, scan
from Detectors.gquad.patterns import G4_GRAMMARS
from Utilities.core.records import MotifMatch, MotifType


def random_sequences(count=20, length=200, seed=7):
    rng = random.Random(seed)
    # G-rich alphabet so every family gets exercised
    alphabet = "GGGGACTTCCGn"
    return ["".join(rng.choice(alphabet) for _ in range(length)) for _ in range(count)]


class TestCanonicalQuadruplex(unittest.TestCase):
    """Hand-built inputs with known results"""

    def setUp(self):
        self.detector = GQuadruplexDetector()

    def test_single_four_repeat(self):
        seq = "GGGTTTTTGGGTTTTTGGGTTTTTGGG"
        families = self.detector.detect_by_family(seq)

        self.assertEqual(
            families[MotifType.FOUR_REPEAT],
            [MotifMatch(0, 27, seq, MotifType.FOUR_REPEAT)],
        )

    def test_no_runs_no_matches(self):
        seq = "ATATATATGGATCCAT"
        self.assertEqual(self.detector.detect_motifs(seq), [])
        for matches in self.detector.detect_by_family(seq).values():
            self.assertEqual(matches, [])

    def test_homopolymer_after_filler_removal(self):
        matches = self.detector.detect_by_family("G" * 15)[MotifType.FOUR_REPEAT]
        self.assertEqual([(m.start, m.end) for m in matches], [(0, 15)])

    def test_overlapping_families_are_all_reported(self):
        seq = "GGGTGGGTGGGTGGG"
        types = {m.motif_type for m in self.detector.detect_motifs(seq)}
        self.assertIn(MotifType.FOUR_REPEAT, types)
        self.assertIn(MotifType.PARTIAL, types)

    def test_results_concatenated_in_family_order(self):
        seq = "GGGTGGGTGGGTGGG"
        order = [g.motif_type for g in G4_GRAMMARS]
        seen = [m.motif_type for m in self.detector.detect_motifs(seq)]
        self.assertEqual(seen, sorted(seen, key=order.index))

    def test_empty_and_none(self):
        self.assertEqual(self.detector.detect_motifs(""), [])
        self.assertEqual(self.detector.detect_motifs(None), [])

    def test_non_string_rejected(self):
        with self.assertRaises(TypeError):
            self.detector.detect_motifs(b"GGGTGGGTGGGTGGG")

    def test_module_scan_matches_detector(self):
        seq = "AAGGGAGGGAGGGAGGGTTCCCTCCCTCCCTCCC"
        self.assertEqual(scan(seq), self.detector.detect_motifs(seq))


class TestScanInvariants(unittest.TestCase):
    """Properties that hold for any input"""

    @classmethod
    def setUpClass(cls):
        cls.detector = GQuadruplexDetector()
        cls.sequences = random_sequences()

    def test_bounds_and_text(self):
        for seq in self.sequences:
            for m in self.detector.detect_motifs(seq):
                self.assertTrue(0 <= m.start < m.end <= len(seq))
                self.assertEqual(m.text, seq[m.start:m.end])
                self.assertEqual(m.length, len(m.text))

    def test_family_matches_ordered_and_disjoint(self):
        for seq in self.sequences:
            for matches in self.detector.detect_by_family(seq).values():
                for prev, nxt in zip(matches, matches[1:]):
                    self.assertLessEqual(prev.end, nxt.start)

    def test_scan_is_deterministic(self):
        for seq in self.sequences[:5]:
            self.assertEqual(self.detector.detect_motifs(seq), self.detector.detect_motifs(seq))
            self.assertEqual(GQuadruplexDetector().detect_motifs(seq), self.detector.detect_motifs(seq))

    def test_case_does_not_change_coordinates(self):
        for seq in self.sequences[:5]:
            upper = [(m.start, m.end, m.motif_type) for m in self.detector.detect_motifs(seq.upper())]
            lower = [(m.start, m.end, m.motif_type) for m in self.detector.detect_motifs(seq.lower())]
            self.assertEqual(upper, lower)


class TestStatistics(unittest.TestCase):

    def test_statistics(self):
        stats = GQuadruplexDetector().get_statistics()
        self.assertEqual(stats['motif_class'], "G-Quadruplex")
        self.assertEqual(stats['pattern_groups'], ["4G", "Bulge", "GVBQ", "4GL15", "PHQS"])
        self.assertEqual(stats['total_patterns'], 13)


if __name__ == '__main__':
    unittest.main(verbosity=2)

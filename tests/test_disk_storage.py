"""
Unit tests for disk_storage.py - FASTA parsing and per-record disk cache.

Tests FastaSequenceStore and SequenceStoreError.
"""

import unittest
import tempfile
import shutil
from pathlib import Path
import json

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from Utilities.core.records import SequenceRecord
from Utilities.disk_storage import FastaSequenceStore, SequenceStoreError


class FastaTestCase(unittest.TestCase):
    """Temporary working directory with a FASTA writer helper."""

    def setUp(self):
        self.test_dir = Path(tempfile.mkdtemp(prefix="test_fasta_store_"))
        self.cache_dir = self.test_dir / "cache"

    def tearDown(self):
        if self.test_dir.exists():
            shutil.rmtree(self.test_dir)

    def write_fasta(self, text, name="input.fa"):
        path = self.test_dir / name
        path.write_text(text)
        return path


class TestFastaParsing(FastaTestCase):
    """Record splitting and identifier rules."""

    def test_multiple_records_in_file_order(self):
        fasta = self.write_fasta(">chr2\nACGT\nACGT\n>chr1\nGGGG\n>chrM\nTTTT\n")
        store = FastaSequenceStore(str(fasta), str(self.cache_dir))

        self.assertEqual(store.record_ids(), ["chr2", "chr1", "chrM"])
        self.assertEqual(store.get_sequence("chr2"), "ACGTACGT")
        self.assertEqual(store.get_sequence("chr1"), "GGGG")
        self.assertEqual(len(store), 3)

    def test_identifier_is_first_token(self):
        fasta = self.write_fasta(">chr1 Homo sapiens chromosome 1\nACGT\n")
        store = FastaSequenceStore(str(fasta), str(self.cache_dir))
        self.assertEqual(store.record_ids(), ["chr1"])

    def test_lines_are_stripped(self):
        fasta = self.write_fasta(">r1\n  ACGT  \r\n\tGGCC\n\n")
        store = FastaSequenceStore(str(fasta), str(self.cache_dir))
        self.assertEqual(store.get_sequence("r1"), "ACGTGGCC")

    def test_filler_removed_both_cases(self):
        fasta = self.write_fasta(">c\nGGGGGNNNNNGGGGG\nnnnnnGGGGG\n")
        store = FastaSequenceStore(str(fasta), str(self.cache_dir))

        self.assertEqual(store.get_sequence("c"), "G" * 15)
        metadata = store.get_metadata("c")
        self.assertEqual(metadata['length'], 15)
        self.assertEqual(metadata['raw_length'], 25)
        self.assertEqual(metadata['filler_removed'], 10)

    def test_lines_before_first_header_ignored(self):
        fasta = self.write_fasta("ACGTACGT\n; comment\n>r1\nGGG\n")
        store = FastaSequenceStore(str(fasta), str(self.cache_dir))
        self.assertEqual(store.record_ids(), ["r1"])
        self.assertEqual(store.get_sequence("r1"), "GGG")

    def test_duplicate_identifier_last_write_wins(self):
        fasta = self.write_fasta(">dup\nAAAA\n>other\nCCCC\n>dup\nGGGG\n")
        with self.assertLogs('Utilities.disk_storage', level='WARNING') as logs:
            store = FastaSequenceStore(str(fasta), str(self.cache_dir))

        self.assertEqual(store.record_ids(), ["dup", "other"])
        self.assertEqual(store.get_sequence("dup"), "GGGG")
        self.assertTrue(any("Duplicate identifier 'dup'" in line for line in logs.output))

    def test_empty_identifier_skipped(self):
        fasta = self.write_fasta(">\nAAAA\n>   \nCCCC\n>r1\nGGGG\n")
        with self.assertLogs('Utilities.disk_storage', level='WARNING') as logs:
            store = FastaSequenceStore(str(fasta), str(self.cache_dir))

        self.assertEqual(store.record_ids(), ["r1"])
        self.assertEqual(len([line for line in logs.output if "empty identifier" in line]), 2)

    def test_record_with_no_bases(self):
        fasta = self.write_fasta(">empty\n>full\nACGT\n")
        store = FastaSequenceStore(str(fasta), str(self.cache_dir))
        self.assertEqual(store.get_sequence("empty"), "")
        self.assertEqual(store.get_sequence("full"), "ACGT")

    def test_empty_file(self):
        fasta = self.write_fasta("")
        store = FastaSequenceStore(str(fasta), str(self.cache_dir))
        self.assertEqual(store.record_ids(), [])
        self.assertEqual(list(store.iter_records()), [])


class TestFastaCache(FastaTestCase):
    """Scratch files, metadata and cleanup."""

    def test_cache_directory_created(self):
        fasta = self.write_fasta(">r1\nACGT\n")
        nested = self.cache_dir / "a" / "b"
        FastaSequenceStore(str(fasta), str(nested))
        self.assertTrue(nested.is_dir())

    def test_one_file_per_record(self):
        fasta = self.write_fasta(">r1\nACGT\n>r/2\nGGCC\n")
        store = FastaSequenceStore(str(fasta), str(self.cache_dir))

        cached = sorted(p.name for p in self.cache_dir.glob("*.bin"))
        self.assertEqual(cached, ["00000_r1.bin", "00001_r_2.bin"])
        self.assertEqual(Path(store.get_metadata("r/2")['file_path']).read_text(), "GGCC")

    def test_metadata_file(self):
        fasta = self.write_fasta(">r1\nGGCCAATT\n")
        FastaSequenceStore(str(fasta), str(self.cache_dir))

        with open(self.cache_dir / "metadata.json") as f:
            metadata = json.load(f)
        self.assertEqual(metadata['r1']['length'], 8)
        self.assertAlmostEqual(metadata['r1']['gc_content'], 50.0)

    def test_iter_records(self):
        fasta = self.write_fasta(">a\nAC\n>b\nGT\n")
        store = FastaSequenceStore(str(fasta), str(self.cache_dir))
        self.assertEqual(
            list(store.iter_records()),
            [SequenceRecord("a", "AC"), SequenceRecord("b", "GT")],
        )
        self.assertIn("a", store)
        self.assertNotIn("c", store)

    def test_metadata_is_a_copy(self):
        fasta = self.write_fasta(">a\nAC\n")
        store = FastaSequenceStore(str(fasta), str(self.cache_dir))
        store.get_metadata("a")['length'] = 999
        self.assertEqual(store.get_metadata("a")['length'], 2)

    def test_cleanup_keeps_caller_directory(self):
        fasta = self.write_fasta(">a\nAC\n")
        store = FastaSequenceStore(str(fasta), str(self.cache_dir))
        store.cleanup()

        self.assertTrue(self.cache_dir.is_dir())
        self.assertEqual(list(self.cache_dir.iterdir()), [])

    def test_cleanup_removes_owned_directory(self):
        fasta = self.write_fasta(">a\nAC\n")
        store = FastaSequenceStore(str(fasta))
        owned = store.base_dir
        self.assertTrue(owned.is_dir())

        store.cleanup()
        self.assertFalse(owned.exists())


class TestFastaErrors(FastaTestCase):
    """Error handling."""

    def test_missing_fasta_raises(self):
        with self.assertRaises(SequenceStoreError):
            FastaSequenceStore(str(self.test_dir / "missing.fa"), str(self.cache_dir))

    def test_store_error_is_ioerror(self):
        self.assertTrue(issubclass(SequenceStoreError, IOError))

    def test_unknown_record(self):
        fasta = self.write_fasta(">a\nAC\n")
        store = FastaSequenceStore(str(fasta), str(self.cache_dir))
        with self.assertRaises(KeyError):
            store.get_sequence("nope")
        with self.assertRaises(KeyError):
            store.get_metadata("nope")

    def test_deleted_cache_file_raises_store_error(self):
        fasta = self.write_fasta(">a\nAC\n")
        store = FastaSequenceStore(str(fasta), str(self.cache_dir))
        Path(store.get_metadata("a")['file_path']).unlink()

        with self.assertRaises(SequenceStoreError):
            store.get_sequence("a")

    def test_cache_path_is_a_file(self):
        fasta = self.write_fasta(">a\nAC\n")
        blocker = self.test_dir / "blocker"
        blocker.write_text("x")

        with self.assertRaises(SequenceStoreError):
            FastaSequenceStore(str(fasta), str(blocker / "cache"))


if __name__ == '__main__':
    unittest.main()

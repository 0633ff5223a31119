"""
Utilities package for G4Fasta2Bed.

Contains utility modules for:
- Configuration (config/)
- Record value types (core/)
- FASTA parsing and per-record disk cache (disk_storage.py)
- Complement and filler filtering (sequence_utils.py)
- Dual-strand scan orchestration (strand_pipeline.py)
- BED interval output (bed_writer.py)
- Cache directory clearing (directory_cleaner.py)
"""

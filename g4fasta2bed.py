#!/usr/bin/env python3
"""
G4Fasta2Bed - scan a FASTA file for G-quadruplex motifs and write BED files.

Usage:
    g4fasta2bed <fastaPath> <cacheFolder> <outputFolder> [-all | -serial | -f | -r]

Exit codes:
    0  run finished (individual record failures are logged, not fatal)
    1  bad command line, unreadable input, or cache could not be cleared
"""

import argparse
import logging
import sys
from typing import List, Optional

from Utilities.config.analysis import MODE_FLAGS, ConfigError, RunMode, resolve_run_mode
from Utilities.disk_storage import SequenceStoreError
from Utilities.strand_pipeline import run_fasta_to_bed

logger = logging.getLogger("g4fasta2bed")

USAGE = """\
Usage: g4fasta2bed <fastaPath> <cacheFolder> <outputFolder> [-all | -serial | -f | -r]
Options:
  -all     : Scan forward and reverse strands in parallel (default)
  -serial  : Scan forward strand, then reverse strand
  -f       : Generate forward strand G4 BED file only
  -r       : Generate reverse strand G4 BED file only
  -h       : Show this help
  --log-level LEVEL : ERROR, WARNING, INFO (default) or DEBUG
"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ConfigError instead of exiting."""

    def error(self, message):
        raise ConfigError(message)


def build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog="g4fasta2bed",
        description="Find G-quadruplex motifs in FASTA records and write BED intervals.",
        add_help=False,
        allow_abbrev=False,
    )
    p.add_argument("fasta_path", help="Multi-record FASTA file.")
    p.add_argument("cache_folder", help="Scratch folder for per-record cache files (cleared after the run).")
    p.add_argument("output_folder", help="Folder for the forward/reverse BED files.")

    modes = p.add_mutually_exclusive_group()
    for flag in MODE_FLAGS:
        modes.add_argument(flag, dest="mode_flag", action="store_const", const=flag)

    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity (default: INFO)."
    )
    return p


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(levelname)s: %(message)s',
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)

    if not argv or any(arg in ("-h", "--help") for arg in argv):
        print(USAGE, end="")
        return 0

    try:
        args = build_parser().parse_args(argv)
        mode: RunMode = resolve_run_mode(args.mode_flag)
    except ConfigError as e:
        configure_logging()
        logger.error(f"{e}")
        print(USAGE, end="", file=sys.stderr)
        return 1

    configure_logging(args.log_level)

    try:
        report = run_fasta_to_bed(args.fasta_path, args.cache_folder, args.output_folder, mode)
    except SequenceStoreError as e:
        logger.error(f"Error reading FASTA file: {e}")
        return 1
    except OSError as e:
        logger.error(f"Error during run (output folder or cache clear): {e}")
        return 1

    if not report.success:
        logger.warning("Run finished with errors; see messages above")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

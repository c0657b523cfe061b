"""Wubi table pipeline — input tables → forward, mobile and reverse tables.

Usage:
    python -m wbnc.engine.pipeline [--input-dir DIR] [--output-dir DIR]

Steps:
1. Load simplified codes (simplified1.txt, simplified2.txt, simplified3.txt)
2. Load full character codes (CJK.txt)
3. Load phrases and splice their codes (phrases.txt)
4. Write the forward table and the mobile forward table
5. Write the reverse table

Environment:
    WBNC_INPUT_DIR      Directory holding the input files (default: cwd)
    WBNC_OUTPUT_DIR     Directory for the output files (default: cwd)
"""

import argparse
import os
import sys
import time
from pathlib import Path

from ..core.errors import WubiTableError
from ..ingest.loader import TableLoader
from .emit import forward_table_lines, mobile_table_lines, reverse_table_lines, write_lines

SIMPLIFIED_FILES = ("simplified1.txt", "simplified2.txt", "simplified3.txt")
CHARACTER_FILE = "CJK.txt"
PHRASE_FILE = "phrases.txt"

FORWARD_TABLE_FILE = "wb_nc_table.txt"
MOBILE_TABLE_FILE = "wb_nc_ios_table.txt"
REVERSE_TABLE_FILE = "wb_nc_reverse_table.txt"

DEFAULT_INPUT_DIR = os.environ.get("WBNC_INPUT_DIR", ".")
DEFAULT_OUTPUT_DIR = os.environ.get("WBNC_OUTPUT_DIR", ".")


def _open_input(path):
    # Line terminators are stripped by the record parsers, \r\n included.
    return open(path, encoding="utf-8", newline="")


def run_pipeline(input_dir=DEFAULT_INPUT_DIR, output_dir=DEFAULT_OUTPUT_DIR,
                 log_file=None, quiet=False):
    """Build the code tables and write all three outputs.

    Args:
        input_dir: Directory with simplified{1,2,3}.txt, CJK.txt, phrases.txt
        output_dir: Directory the output tables are written to
        log_file: Optional path to mirror progress output into
        quiet: Suppress progress on stdout

    Returns:
        dict with table sizes, output line counts and timing
    """
    input_path = Path(input_dir)
    output_path = Path(output_dir)
    log = open(log_file, "w", encoding="utf-8") if log_file else None

    def _log(msg):
        if log:
            log.write(msg + "\n")
        if not quiet:
            print(msg)

    try:
        t0 = time.time()
        loader = TableLoader()
        for name in SIMPLIFIED_FILES:
            _log(f"Loading simplified table from {name}")
            with _open_input(input_path / name) as f:
                count = loader.simplified(f, source=name)
            _log(f"  {count:,} codes")

        _log(f"Loading full table from {CHARACTER_FILE}")
        with _open_input(input_path / CHARACTER_FILE) as f:
            count = loader.characters(f, source=CHARACTER_FILE)
        _log(f"  {count:,} characters")

        _log(f"Loading phrases from {PHRASE_FILE}")
        with _open_input(input_path / PHRASE_FILE) as f:
            count = loader.phrases(f, source=PHRASE_FILE)
        _log(f"  {count:,} phrases")

        table = loader.finish()
        t1 = time.time()
        _log(f"  Tables built ({t1 - t0:.2f}s)")

        output_path.mkdir(parents=True, exist_ok=True)
        _log("Generating table")
        forward_count = write_lines(
            output_path / FORWARD_TABLE_FILE, forward_table_lines(table)
        )
        mobile_count = write_lines(
            output_path / MOBILE_TABLE_FILE, mobile_table_lines(table)
        )
        _log(f"  {FORWARD_TABLE_FILE}: {forward_count:,} lines")
        _log(f"  {MOBILE_TABLE_FILE}: {mobile_count:,} lines")

        _log("Generating reverse table")
        reverse_count = write_lines(
            output_path / REVERSE_TABLE_FILE, reverse_table_lines(table)
        )
        _log(f"  {REVERSE_TABLE_FILE}: {reverse_count:,} lines")

        total_time = time.time() - t0
        _log(f"  Total pipeline time: {total_time:.2f}s")
    finally:
        if log:
            log.close()

    return {
        **table.stats(),
        "forward_lines": forward_count,
        "mobile_lines": mobile_count,
        "reverse_lines": reverse_count,
        "total_time": total_time,
    }


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Build Wubi forward, mobile and reverse code tables"
    )
    parser.add_argument("--input-dir", default=DEFAULT_INPUT_DIR,
                        help="Directory with the input tables (default: %(default)s)")
    parser.add_argument("--output-dir", default=DEFAULT_OUTPUT_DIR,
                        help="Directory for the output tables (default: %(default)s)")
    parser.add_argument("--log-file", help="Also write progress to this file")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="No progress output")
    args = parser.parse_args(argv)

    try:
        run_pipeline(args.input_dir, args.output_dir,
                     log_file=args.log_file, quiet=args.quiet)
    except WubiTableError as e:
        print(f"ERROR: {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

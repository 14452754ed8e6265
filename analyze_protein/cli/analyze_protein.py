#!/usr/bin/env python3
"""
Command-line interface for PDB geometry analysis

Usage:
  AnalyzeProtein 1a2b.pdb
  AnalyzeProtein 1a2b.pdb 3c4d.pdb --output results.csv
  AnalyzeProtein structures/*.pdb --keep-going --progress
"""

import argparse
import sys
from typing import List, Tuple

from tqdm import tqdm

from ..config import PROGRAM_NAME
from ..exceptions import AnalyzeProteinError, UsageError
from ..features.geometric_features import analyze_file
from ..utils.report import print_report, save_results


def build_parser() -> argparse.ArgumentParser:
    """
    Options only. Every other token, including dash-prefixed ones such as
    ``-a.pdb``, is a PDB path; see parse_command_line.
    """
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        usage="%(prog)s [options] pdb [pdb ...]",
        description="Center of gravity, radius of gyration and Dmax of PDB ATOM records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="""
Options may appear anywhere among the PDB paths. Tokens that are not
options are analyzed as paths, in the order given.

Examples:
  # One report per file, stop at the first bad file
  AnalyzeProtein 1a2b.pdb 3c4d.pdb

  # Report every readable file and save a table
  AnalyzeProtein structures/*.pdb --keep-going --output results.parquet
        """
    )

    parser.add_argument('--keep-going', '-k', action='store_true',
                        help='Continue with the next file after an error (exit status 1 at the end)')
    parser.add_argument('--output', '-o', type=str, default=None,
                        help='Also save results to a table (.csv or .parquet)')
    parser.add_argument('--progress', action='store_true',
                        help='Show a progress bar on stderr')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Print status messages on stderr')

    return parser


def parse_command_line(argv=None) -> Tuple[argparse.Namespace, List[str]]:
    """
    Split the command line into options and PDB paths.

    Raises:
        UsageError: no PDB path was given
    """
    args, pdb_files = build_parser().parse_known_args(argv)

    if not pdb_files:
        raise UsageError()

    return args, pdb_files


def _status(message: str, verbose: bool) -> None:
    if verbose:
        tqdm.write(message, file=sys.stderr)


def main(argv=None) -> int:
    try:
        args, pdb_files = parse_command_line(argv)
    except UsageError as e:
        print(e, file=sys.stderr)
        return 1

    if args.verbose:
        print("\n" + "="*60, file=sys.stderr)
        print("  PDB Geometry Analysis", file=sys.stderr)
        print("="*60, file=sys.stderr)
        print(f"  Files: {len(pdb_files)}", file=sys.stderr)
        if args.output:
            print(f"  Output: {args.output}", file=sys.stderr)
        print(file=sys.stderr)

    results = []
    failed_count = 0

    for pdb_path in tqdm(pdb_files, desc="Analyzing", unit="pdb",
                         disable=not args.progress, file=sys.stderr):
        _status(f"📂 {pdb_path}", args.verbose)
        try:
            result = analyze_file(pdb_path)
        except AnalyzeProteinError as e:
            tqdm.write(str(e), file=sys.stderr)
            if not args.keep_going:
                return 1
            failed_count += 1
            _status(f"  ❌ {pdb_path}", args.verbose)
            continue

        print_report(result)
        sys.stdout.flush()
        results.append(result)
        _status(f"  ✅ {pdb_path}: {result.n_atoms} atoms", args.verbose)

    if args.output:
        output_path = save_results(results, args.output)
        _status(f"\n📁 Saved results to: {output_path}", args.verbose)

    if failed_count > 0:
        _status(f"❌ Failed: {failed_count}", args.verbose)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

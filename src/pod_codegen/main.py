from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pod_codegen.loader import load_record
from pod_codegen.models import ModelError


def run(record_path: str, verbose: bool = False) -> str:
    """Load one struct description and return its rendered source."""
    record = load_record(record_path)
    if verbose:
        print(f"Loaded struct {record.name}: {len(record.members)} member(s)", file=sys.stderr)
    return record.render()


def main():
    parser = argparse.ArgumentParser(
        description="Render a plain old struct from a JSON description",
        prog="pod-codegen",
    )
    parser.add_argument(
        "record",
        help="Path to the JSON struct description",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print progress to stderr",
    )

    args = parser.parse_args()

    if not Path(args.record).is_file():
        print(f"Error: struct description not found: {args.record}", file=sys.stderr)
        sys.exit(1)

    try:
        source = run(args.record, verbose=args.verbose)
    except ModelError as e:
        print(f"FATAL: {e}", file=sys.stderr)
        sys.exit(1)

    sys.stdout.write(source)
    sys.exit(0)

#!/usr/bin/env python3
"""
Entry point for rsc_boundary module.

Usage:
    python -m rsc_boundary [--path PATH] [--report] [--output FILE] [--verbose]
    rsc-boundary [--path PATH] [--verbose]
"""

import argparse
import sys
from pathlib import Path

from . import BoundaryChecker
from .models import ScanConfig
from .report import print_report_lines
from .scanner import BoundaryScanError


def main(argv=None):
    parser = argparse.ArgumentParser(description='RSC client boundary check')
    parser.add_argument('--path', type=str, default='.', help='Path to scan')
    parser.add_argument('--report', action='store_true', help='Generate markdown report')
    parser.add_argument('--output', type=str, help='Output file for report')
    parser.add_argument('--max-bytes', type=int, help='Bytes read when looking for the directive')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')
    args = parser.parse_args(argv)

    config = ScanConfig()
    if args.max_bytes is not None:
        if args.max_bytes < 1:
            parser.error('--max-bytes must be at least 1')
        config.max_read_bytes = args.max_bytes

    checker = BoundaryChecker(Path(args.path), config=config, verbose=args.verbose)

    try:
        if args.report:
            checker.run()
        else:
            print_report_lines(checker.iter_results())
    except BoundaryScanError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.report:
        report = checker.get_report()
        if args.output:
            Path(args.output).write_text(report)
            print(f"📄 Report written to: {args.output}", file=sys.stderr)
        else:
            print(report)
    elif args.verbose:
        checker.print_summary()

    sys.exit(0)


if __name__ == '__main__':
    main()

"""
RSC Boundary Checker - finds client components rendered across a module boundary.

For every JS/TS file:
- Parses import statements
- Resolves specifiers (relative paths and tsconfig/jsconfig aliases)
- Checks each target for a leading "use client" directive
- Reports lines that render an imported client component as a tag

Usage:
    python -m rsc_boundary [--path PATH] [--report] [--verbose]
"""

import sys
from pathlib import Path
from typing import Iterator, List, Optional

from .aliases import AliasTableCache
from .models import FileResult, ReportLine, ScanConfig
from .scanner import BoundaryScanError, scan_path
from .report import generate_markdown_report, print_summary


class BoundaryChecker:
    """Main facade for boundary checking."""

    def __init__(self, root_path: Path, config: Optional[ScanConfig] = None, verbose: bool = False):
        self.root = root_path
        self.config = config or ScanConfig()
        self.verbose = verbose
        self.aliases = AliasTableCache(self.config.alias_config_names, self.log)
        self.results: List[FileResult] = []

    def log(self, msg: str) -> None:
        """Print to stderr if verbose mode."""
        if self.verbose:
            print(msg, file=sys.stderr)

    def iter_results(self) -> Iterator[FileResult]:
        """Scan lazily, recording each result. Raises BoundaryScanError on a bad root."""
        self.results = []
        for result in scan_path(self.root, self.config, self.aliases, self.log):
            self.results.append(result)
            yield result

    def run(self) -> List[ReportLine]:
        """Scan everything and return all report lines in file, line order."""
        for _ in self.iter_results():
            pass
        return [line for r in self.results for line in r.lines]

    def get_report(self) -> str:
        """Generate markdown report."""
        return generate_markdown_report(self.root, self.results)

    def print_summary(self) -> None:
        """Print summary to stderr."""
        print_summary(self.results)


__all__ = ['BoundaryChecker', 'BoundaryScanError', 'ScanConfig', 'ReportLine']

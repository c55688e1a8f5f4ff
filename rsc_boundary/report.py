"""
Report generation for the boundary checker.
Grep-style lines for stdout and an optional markdown report.
"""

import re
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from .config import SOURCE_ERRORS
from .models import FileResult, ReportLine


BACKTICK_RUN = re.compile(r'`+')


def format_report_line(line: ReportLine) -> str:
    """`<file>:<line>:<text>`, the format grep and editors understand."""
    return f"{line.file_path}:{line.line_number}:{line.line_text}"


def print_report_lines(results: Iterable[FileResult], stream: Optional[TextIO] = None) -> int:
    """Print every report line as results arrive. Returns the line count.

    When the stream has a binary buffer the line is written as the original
    source bytes, not re-encoded text.
    """
    out = stream or sys.stdout
    buffer = getattr(out, 'buffer', None)
    if buffer is not None:
        out.flush()

    count = 0
    for result in results:
        for line in result.lines:
            text = format_report_line(line) + '\n'
            if buffer is not None:
                buffer.write(text.encode('utf-8', errors=SOURCE_ERRORS))
            else:
                out.write(text)
            count += 1
        if buffer is not None:
            buffer.flush()
    return count


def _printable(text: str) -> str:
    return text.encode('utf-8', errors=SOURCE_ERRORS).decode('utf-8', errors='replace')


def _inline_code(text: str) -> str:
    """Markdown code span that survives backticks and table pipes."""
    text = _printable(text)
    text = text.replace('|', '\\|')
    longest = max((len(run) for run in BACKTICK_RUN.findall(text)), default=0)
    fence = '`' * (longest + 1)
    pad = ' ' if text.startswith('`') or text.endswith('`') else ''
    return f"{fence}{pad}{text}{pad}{fence}"


def generate_markdown_report(root: Path, results: List[FileResult]) -> str:
    """Generate markdown report."""
    usages = sum(len(r.lines) for r in results)
    lines = [
        "# Client Boundary Report",
        "",
        f"**Path:** `{root}`",
        f"**Files with client imports:** {len(results)}",
        f"**Client component usages:** {usages}",
        "",
    ]

    if not usages:
        lines.append("✅ **No client component usages found.**")
        return '\n'.join(lines)

    for result in results:
        if not result.lines:
            continue
        lines.append(f"## `{_printable(result.file_path)}`")
        lines.append("")
        lines.append(f"Client imports: {', '.join(f'`{n}`' for n in result.marked_names)}")
        lines.append("")
        lines.append("| Line | Source |")
        lines.append("|------|--------|")
        for line in result.lines:
            text = _inline_code(line.line_text.strip())
            lines.append(f"| {line.line_number} | {text} |")
        lines.append("")

    return '\n'.join(lines)


def print_summary(results: List[FileResult], stream: Optional[TextIO] = None) -> None:
    """Print a one-line summary."""
    files = len([r for r in results if r.lines])
    usages = sum(len(r.lines) for r in results)
    print(f"📊 Summary: {usages} client component usages in {files} files", file=stream or sys.stderr)

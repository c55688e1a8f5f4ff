"""
Usage matching.
Finds tag-opening references (`<Name`) to marked identifiers.
"""

import re
from typing import Iterator, List, Sequence, Tuple


def tag_pattern(name: str) -> re.Pattern:
    """Pattern for `<Name` with optional whitespace after `<`."""
    return re.compile(r'<\s*' + re.escape(name) + r'\b', re.ASCII)


def contains_tag(line: str, name: str) -> bool:
    return tag_pattern(name).search(line) is not None


def find_usages(lines: Sequence[str], names: Sequence[str]) -> Iterator[Tuple[int, str]]:
    """Yield (1-based line number, line) once per line using any name."""
    patterns: List[re.Pattern] = [tag_pattern(name) for name in names]
    if not patterns:
        return

    for i, line in enumerate(lines):
        if any(p.search(line) for p in patterns):
            yield i + 1, line

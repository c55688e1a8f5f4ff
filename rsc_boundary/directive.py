"""
Client directive detection.

The directive only counts as a prologue: blank lines and comments may come
before it, any other statement ends the search.
"""

from pathlib import Path
from typing import Callable, Iterable, Sequence, Tuple

from .config import DIRECTIVES, MAX_READ_BYTES
from .models import ScanState


def step(state: ScanState, line: str, directives: Sequence[str]) -> Tuple[ScanState, bool]:
    """Advance the prologue scan by one trimmed line.

    Returns the next state and whether the line is the directive.
    """
    if state is ScanState.STOPPED or not line:
        return state, False

    if state is ScanState.IN_BLOCK_COMMENT:
        if '*/' in line:
            return ScanState.PROLOGUE, False
        return state, False

    bare = line[:-1] if line.endswith(';') else line
    if bare in directives:
        return state, True

    if line.startswith('//'):
        return state, False

    if line.startswith('/*'):
        if '*/' not in line:
            return ScanState.IN_BLOCK_COMMENT, False
        return state, False

    return ScanState.STOPPED, False


def has_directive(lines: Iterable[str], directives: Sequence[str] = DIRECTIVES) -> bool:
    """True if the directive appears in the prologue of the given lines."""
    state = ScanState.PROLOGUE

    for line in lines:
        state, matched = step(state, line.strip(), directives)
        if matched:
            return True
        if state is ScanState.STOPPED:
            break

    return False


def file_has_directive(
    path: Path,
    directives: Sequence[str] = DIRECTIVES,
    max_read_bytes: int = MAX_READ_BYTES,
    log: Callable[[str], None] = lambda x: None
) -> bool:
    """Check the head of a file for the directive. Unreadable files are unmarked."""
    try:
        with open(path, 'rb') as fh:
            head = fh.read(max_read_bytes)
    except OSError as e:
        log(f"Warning: failed to read {path}: {e}")
        return False

    return has_directive(head.decode('utf-8', errors='replace').split('\n'), directives)

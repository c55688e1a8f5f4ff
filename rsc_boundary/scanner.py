"""
File scanner for the boundary checker.
Walks the tree and runs extract -> resolve -> detect -> match per file.
"""

import os
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Sequence

from .aliases import AliasTableCache
from .config import SOURCE_ERRORS
from .directive import file_has_directive
from .imports import parse_imports
from .models import FileResult, ImportRecord, ReportLine, ScanConfig
from .resolver import resolve_import_path
from .usage import find_usages


class BoundaryScanError(Exception):
    """The scan root is missing or cannot be walked."""


def is_supported_file(path: Path, extensions: Sequence[str]) -> bool:
    """Check the file suffix against the configured extensions."""
    return path.suffix in extensions


def read_lines(path: Path) -> List[str]:
    """Split on newlines only, so lines keep any trailing carriage return."""
    with open(path, 'rb') as fh:
        return fh.read().decode('utf-8', errors=SOURCE_ERRORS).split('\n')


def collect_marked_names(
    base_dir: Path,
    imports: List[ImportRecord],
    aliases: AliasTableCache,
    config: ScanConfig,
    log: Callable[[str], None] = lambda x: None
) -> List[str]:
    """Local names bound by imports whose target carries the directive."""
    marked: List[str] = []

    for imp in imports:
        candidates = resolve_import_path(
            base_dir, imp.specifier, aliases.get(base_dir), config.extensions
        )
        for candidate in candidates:
            if file_has_directive(candidate, config.directives, config.max_read_bytes, log):
                for name in imp.bound_names:
                    if name not in marked:
                        marked.append(name)
                log(f"Client import: {imp.specifier} -> {candidate}")
                break

    return marked


def scan_file(
    path: Path,
    config: ScanConfig,
    aliases: AliasTableCache,
    log: Callable[[str], None] = lambda x: None
) -> Optional[FileResult]:
    """Scan one file. Returns None when nothing in it is client-marked.

    Raises OSError if the file itself can't be read.
    """
    lines = read_lines(path)

    imports = parse_imports(lines)
    if not imports:
        return None

    marked = collect_marked_names(path.parent, imports, aliases, config, log)
    if not marked:
        return None

    result = FileResult(file_path=str(path), marked_names=marked)
    for line_number, line in find_usages(lines, marked):
        result.lines.append(ReportLine(
            file_path=str(path),
            line_number=line_number,
            line_text=line
        ))

    return result


def iter_source_files(
    root: Path,
    config: ScanConfig,
    log: Callable[[str], None] = lambda x: None
) -> Iterator[Path]:
    """Yield supported files under root in sorted order, pruning ignored dirs."""
    if not os.path.exists(root):
        raise BoundaryScanError(f"path not found: {root}")

    if not root.is_dir():
        if is_supported_file(root, config.extensions):
            yield root
        return

    def on_error(err: OSError) -> None:
        if os.path.abspath(err.filename or '') == os.path.abspath(root):
            raise BoundaryScanError(f"cannot read {root}: {err}") from err
        log(f"Warning: cannot read {err.filename}: {err}")

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        dirnames[:] = sorted(d for d in dirnames if d not in config.ignore_dirs)
        base = Path(dirpath)
        for name in sorted(filenames):
            path = base / name
            if is_supported_file(path, config.extensions):
                yield path


def scan_path(
    root: Path,
    config: ScanConfig,
    aliases: Optional[AliasTableCache] = None,
    log: Callable[[str], None] = lambda x: None
) -> Iterator[FileResult]:
    """Scan every supported file under root, one file at a time.

    Per-file read failures are logged and skipped. Only a bad root raises
    BoundaryScanError.
    """
    if aliases is None:
        aliases = AliasTableCache(config.alias_config_names, log)

    for path in iter_source_files(root, config, log):
        try:
            result = scan_file(path, config, aliases, log)
        except OSError as e:
            log(f"Warning: failed to scan {path}: {e}")
            continue
        if result is not None:
            yield result

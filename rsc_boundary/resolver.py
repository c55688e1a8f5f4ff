"""
Module path resolution.
Maps an import specifier to candidate files on disk.
"""

import os
from pathlib import Path
from typing import List, Sequence

from .models import AliasEntry


def file_exists(path: Path) -> bool:
    """True for an existing regular file (directories don't count)."""
    return os.path.isfile(path)


def resolve_import_path(
    base_dir: Path,
    import_path: str,
    aliases: Sequence[AliasEntry],
    extensions: Sequence[str]
) -> List[Path]:
    """Resolve a specifier to candidate files, in a deterministic order.

    Relative specifiers are joined onto the importer's directory. Anything
    else is tried against every alias whose prefix it starts with (a plain
    string test, so `@` also matches `@components/x`). Bare package imports
    match nothing and resolve to no candidates.
    """
    if import_path.startswith('.'):
        base_path = _join(base_dir, import_path)
        return expand_path(base_path, extensions)

    candidates: List[Path] = []
    for alias in aliases:
        if not import_path.startswith(alias.prefix):
            continue
        remainder = import_path[len(alias.prefix):]
        if remainder.startswith('/'):
            remainder = remainder[1:]
        candidates.extend(expand_path(_join(Path(alias.target), remainder), extensions))

    return candidates


def expand_path(base_path: Path, extensions: Sequence[str]) -> List[Path]:
    """Candidate files for a base path, first productive rule wins.

    1. the path itself
    2. the path plus each extension
    3. `<dir>/index<ext>` when the path is a directory
    """
    if file_exists(base_path):
        return [base_path]

    with_ext = [
        Path(str(base_path) + ext)
        for ext in extensions
        if file_exists(Path(str(base_path) + ext))
    ]
    if with_ext:
        return with_ext

    if os.path.isdir(base_path):
        return [
            base_path / f"index{ext}"
            for ext in extensions
            if file_exists(base_path / f"index{ext}")
        ]

    return []


def _join(base: Path, rel: str) -> Path:
    # Lexical normalisation: `..` collapses before any symlink is followed
    return Path(os.path.normpath(os.path.abspath(os.path.join(str(base), rel))))

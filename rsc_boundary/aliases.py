"""
Path alias loading from tsconfig.json / jsconfig.json.

Only `compilerOptions.baseUrl` and `compilerOptions.paths` are read. The
nearest configuration wins; ancestors are never merged and `extends` is
not followed.
"""

import json
import os
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from .config import ALIAS_CONFIG_NAMES, DEFAULT_BASE_URL
from .models import AliasEntry


def find_alias_config(
    start_dir: Path,
    config_names: Sequence[str] = ALIAS_CONFIG_NAMES
) -> Optional[Path]:
    """Nearest alias configuration at or above start_dir, or None."""
    current = Path(os.path.abspath(str(start_dir)))

    while True:
        for name in config_names:
            candidate = current / name
            if os.path.isfile(candidate):
                return candidate

        parent = current.parent
        if parent == current:
            return None
        current = parent


def _strip_wildcard(pattern: str) -> str:
    if pattern.endswith('/*'):
        pattern = pattern[:-2]
    if pattern.endswith('*'):
        pattern = pattern[:-1]
    return pattern


def parse_alias_config(config_path: Path) -> List[AliasEntry]:
    """Parse alias entries from a config file.

    Raises OSError when unreadable and ValueError when the content is not
    JSON of the expected shape.
    """
    data = json.loads(config_path.read_text(encoding='utf-8'))
    if not isinstance(data, dict):
        raise ValueError("config root is not an object")

    options = data.get('compilerOptions') or {}
    if not isinstance(options, dict):
        raise ValueError("compilerOptions is not an object")

    base_url = options.get('baseUrl') or DEFAULT_BASE_URL
    paths = options.get('paths') or {}
    if not isinstance(base_url, str):
        raise ValueError("baseUrl is not a string")
    if not isinstance(paths, dict):
        raise ValueError("paths is not an object")

    config_dir = config_path.parent
    if not os.path.isabs(base_url):
        base_url = os.path.normpath(os.path.join(str(config_dir), base_url))

    aliases = []
    for alias_pattern, targets in paths.items():
        # null decodes as an empty target list
        if targets is None:
            continue
        if not isinstance(targets, list) or not all(t is None or isinstance(t, str) for t in targets):
            raise ValueError(f"paths[{alias_pattern!r}] is not a list of strings")
        if not targets:
            continue

        # Fallback targets beyond the first are ignored
        target = _strip_wildcard(targets[0] or '')
        if target.startswith('./'):
            target = target[2:]

        if not os.path.isabs(target):
            target = os.path.normpath(os.path.join(base_url, target))

        aliases.append(AliasEntry(prefix=_strip_wildcard(alias_pattern), target=target))

    return aliases


class AliasTableCache:
    """Per-directory memo of alias tables.

    Tables are looked up by the importer's directory, and parsed
    configurations by their path, so sibling directories sharing one
    tsconfig.json parse it once. Cached lists are never mutated. A missing
    or unusable configuration gives an empty table.
    """

    def __init__(
        self,
        config_names: Sequence[str] = ALIAS_CONFIG_NAMES,
        log: Callable[[str], None] = lambda x: None
    ):
        self.config_names = list(config_names)
        self.log = log
        self._by_dir: Dict[str, List[AliasEntry]] = {}
        self._by_config: Dict[str, List[AliasEntry]] = {}

    def get(self, start_dir: Path) -> List[AliasEntry]:
        key = os.path.abspath(str(start_dir))
        if key in self._by_dir:
            return self._by_dir[key]

        config_path = find_alias_config(Path(key), self.config_names)
        if config_path is None:
            aliases: List[AliasEntry] = []
        elif str(config_path) in self._by_config:
            aliases = self._by_config[str(config_path)]
        else:
            try:
                aliases = parse_alias_config(config_path)
            except (OSError, ValueError) as e:
                self.log(f"Warning: failed to load aliases for {start_dir}: {e}")
                aliases = []
            self._by_config[str(config_path)] = aliases

        self._by_dir[key] = aliases
        return aliases

    def __len__(self) -> int:
        return len(self._by_dir)

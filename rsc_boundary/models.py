"""
Data models for the boundary checker.
Pure dataclasses and enums - no business logic.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Set

from .config import (
    DIRECTIVES, SEARCH_EXTENSIONS, MAX_READ_BYTES,
    IGNORE_DIRS, ALIAS_CONFIG_NAMES
)


@dataclass
class ScanConfig:
    """Tunable inputs for one scan."""
    directives: List[str] = field(default_factory=lambda: list(DIRECTIVES))
    extensions: List[str] = field(default_factory=lambda: list(SEARCH_EXTENSIONS))
    max_read_bytes: int = MAX_READ_BYTES
    ignore_dirs: Set[str] = field(default_factory=lambda: set(IGNORE_DIRS))
    alias_config_names: List[str] = field(default_factory=lambda: list(ALIAS_CONFIG_NAMES))


@dataclass
class ImportRecord:
    """A parsed import statement."""
    specifier: str
    # Local binding names, aliases already applied
    bound_names: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class AliasEntry:
    """A path alias: specifier prefix -> absolute directory."""
    prefix: str
    target: str


@dataclass(frozen=True)
class ReportLine:
    """A line that renders a client component."""
    file_path: str
    line_number: int  # 1-based
    line_text: str


@dataclass
class FileResult:
    """Outcome of scanning one file."""
    file_path: str
    marked_names: List[str] = field(default_factory=list)
    lines: List[ReportLine] = field(default_factory=list)


class ClauseKind(Enum):
    """Shape of the clause between `import` and `from`."""
    DEFAULT_AND_NAMED = 'default_and_named'
    NAMED = 'named'
    NAMESPACE = 'namespace'
    DEFAULT = 'default'


class ScanState(Enum):
    """Directive scan state."""
    PROLOGUE = 'prologue'
    IN_BLOCK_COMMENT = 'in_block_comment'
    STOPPED = 'stopped'

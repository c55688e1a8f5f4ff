"""
Import statement extraction for JS/TS sources.

Line-oriented and regex based. A statement opens on a line starting with
`import ` and closes on the first line that brings a quote character into
the buffer. This is a heuristic, not a grammar: a clause containing its own
quoted string ends the statement early, which is accepted behaviour.
"""

import re
from typing import List, Optional, Tuple

from .models import ImportRecord, ClauseKind


TYPE_ONLY = re.compile(r'^\s*import\s+type\s', re.ASCII)
SOURCE = re.compile(r"""from\s+['"]([^'"]+)['"]|import\s+['"]([^'"]+)['"]""", re.ASCII)
CLAUSE = re.compile(r'^\s*import\s+(.*?)\s+from\s+', re.ASCII)
INLINE_TYPE = re.compile(r'^type\s+', re.ASCII)
RENAMED = re.compile(r'^.*\s+as\s+([\w$]+)$', re.ASCII)

# Ordered clause rules, first match wins. Anything else is a default import.
CLAUSE_RULES = [
    (ClauseKind.DEFAULT_AND_NAMED, re.compile(r'^([\w$]+)\s*,\s*\{(.*)\}$', re.ASCII)),
    (ClauseKind.NAMED, re.compile(r'^\{(.*)\}$', re.ASCII)),
    (ClauseKind.NAMESPACE, re.compile(r'^\*\s+as\s+[\w$]+$', re.ASCII)),
]


def parse_imports(lines: List[str]) -> List[ImportRecord]:
    """Extract import records from the physical lines of a file."""
    imports = []
    current = ""

    for line in lines:
        trimmed = line.strip()

        if current:
            current += " " + trimmed
        elif trimmed.startswith('import '):
            current = trimmed

        if current and ('"' in current or "'" in current):
            record = parse_import_statement(current)
            if record is not None:
                imports.append(record)
            current = ""

    return imports


def parse_import_statement(stmt: str) -> Optional[ImportRecord]:
    """Parse one folded import statement. Returns None for type-only imports."""
    if TYPE_ONLY.match(stmt):
        return None

    source_match = SOURCE.search(stmt)
    if source_match is None:
        return None
    source = source_match.group(1) or source_match.group(2)
    if not source:
        return None

    clause_match = CLAUSE.match(stmt)
    if clause_match is None:
        # Side-effect import
        return ImportRecord(specifier=source)

    clause = INLINE_TYPE.sub('', clause_match.group(1).strip()).strip()
    if not clause:
        return ImportRecord(specifier=source)

    kind, match = classify_clause(clause)
    names: List[str] = []
    if kind is ClauseKind.DEFAULT_AND_NAMED:
        names.append(match.group(1).strip())
        names.extend(parse_named_specifiers(match.group(2)))
    elif kind is ClauseKind.NAMED:
        names.extend(parse_named_specifiers(match.group(1)))
    elif kind is ClauseKind.DEFAULT:
        names.append(clause)
    # Namespace objects are not tracked as component references

    return ImportRecord(specifier=source, bound_names=names)


def classify_clause(clause: str) -> Tuple[ClauseKind, Optional[re.Match]]:
    """Return the kind of an import clause and the rule match that decided it."""
    for kind, pattern in CLAUSE_RULES:
        match = pattern.match(clause)
        if match:
            return kind, match
    return ClauseKind.DEFAULT, None


def parse_named_specifiers(body: str) -> List[str]:
    """Local names from the body of `{ ... }`."""
    names = []

    for chunk in body.split(','):
        trimmed = chunk.strip()
        if not trimmed or trimmed.startswith('type '):
            continue

        renamed = RENAMED.match(trimmed)
        names.append(renamed.group(1) if renamed else trimmed)

    return names

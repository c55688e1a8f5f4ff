"""
Configuration constants for the boundary checker.
Directive literals, extensions and scan limits.
"""

# Prologue strings that mark a module as a client module
DIRECTIVES = ["'use client'", '"use client"']

# Extensions to scan and to probe during resolution (order matters)
SEARCH_EXTENSIONS = ['.tsx', '.ts', '.jsx', '.js']

# Directive scan budget (bytes read from the head of a candidate)
MAX_READ_BYTES = 4096

# Directories pruned from traversal
IGNORE_DIRS = {
    'node_modules',
    '.git',
    'dist',
    'build',
}

# Alias configuration files, tried in this order in each directory
ALIAS_CONFIG_NAMES = [
    'tsconfig.json',
    'jsconfig.json',
    'tsconfig.base.json',
]

# Default baseUrl when the alias configuration omits one
DEFAULT_BASE_URL = '.'

# Decode errors handler for source text; undecodable bytes round-trip to output
SOURCE_ERRORS = 'surrogateescape'

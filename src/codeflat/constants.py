from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Separator written before every file's contents. Tests import it as `codeflat.SEPARATOR`.
SEPARATOR: str = '\n\n----- {path} -----\n'

# Per-directory ignore file; its rules apply but the file itself is never emitted.
IGNORE_FILENAME: str = '.gitignore'

# Version-control metadata directory, always pruned with its whole subtree.
VCS_DIRNAME: str = '.git'

# Number of leading bytes inspected by the binary sniffer.
SNIFF_BYTES: int = 512

DEFAULT_OUTPUT: str = 'flattened_code.txt'

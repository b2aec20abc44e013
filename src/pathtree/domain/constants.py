from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to the sample input set, rendering defaults
and the path flavors understood by the segment parser.
"""

from typing import Dict, FrozenSet, List

# -----------------------------------------------------------------------------
# RENDERING DEFAULTS
# -----------------------------------------------------------------------------
DEFAULT_INDENT_UNIT = "  "
DEFAULT_FLAVOR = "posix"

# -----------------------------------------------------------------------------
# PATH FLAVORS
# -----------------------------------------------------------------------------
# Primary separator first; it is also the display text of the root marker.
PATH_SEPARATORS: Dict[str, str] = {
    "posix": "/",
    "windows": "\\/",
}

SUPPORTED_FLAVORS: FrozenSet[str] = frozenset(PATH_SEPARATORS)

CURRENT_DIR_TEXT = "."
PARENT_DIR_TEXT = ".."

# -----------------------------------------------------------------------------
# SAMPLE INPUT
# -----------------------------------------------------------------------------
# The duplicate entry at the end exercises idempotent insertion.
SAMPLE_PATHS: List[str] = [
    "/usr/bin/bash",
    "workdir/bin/bash",
    "/home/rusty/hello.txt",
    "/home/rusty/dummy.txt",
    "/usr/bin/python",
    "/home/ellie/workdir/setup.sh",
    "/usr/bin/bash",
]

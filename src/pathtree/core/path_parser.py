from __future__ import annotations

"""
Path Decomposition.

Splits path strings into ordered Segment sequences following platform
separator rules. No normalization of `.` or `..` is performed beyond what
component splitting itself implies.
"""

import logging
import re
from typing import List

from pathtree.domain.constants import (
    CURRENT_DIR_TEXT,
    DEFAULT_FLAVOR,
    PARENT_DIR_TEXT,
    PATH_SEPARATORS,
)
from pathtree.domain.tree_models import Segment

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def split_path(path: str, flavor: str = DEFAULT_FLAVOR) -> List[Segment]:
    """
    Decompose a path string into its ordered components.

    Rules:
    - A leading separator yields a single root marker.
    - Repeated and trailing separators are ignored.
    - `.` is kept only as the first component of a relative path.
    - `..` is always kept as a parent-directory marker.

    Args:
        path: Path string to decompose.
        flavor: Separator rules to apply ("posix" or "windows").

    Returns:
        List[Segment]: Components from root to leaf. Empty for "".

    Raises:
        TypeError: If `path` is not a string.
        ValueError: If `path` contains a NUL byte or `flavor` is unknown.
    """
    if not isinstance(path, str):
        raise TypeError(f"Path must be str, received {type(path).__name__}.")
    if "\x00" in path:
        raise ValueError(f"Path contains a NUL byte: {path!r}")

    separators = _separators_for(flavor)
    segments: List[Segment] = []

    if not path:
        return segments

    if path[0] in separators:
        segments.append(Segment.root())

    pieces = [p for p in re.split(f"[{re.escape(separators)}]", path) if p]
    for index, piece in enumerate(pieces):
        if piece == CURRENT_DIR_TEXT:
            if index == 0 and not segments:
                segments.append(Segment.current())
            continue
        if piece == PARENT_DIR_TEXT:
            segments.append(Segment.parent())
            continue
        segments.append(Segment.normal(piece))

    logger.debug(f"Decomposed {path!r} into {len(segments)} segment(s)")
    return segments

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _separators_for(flavor: str) -> str:
    """Resolve the separator characters for a path flavor."""
    try:
        return PATH_SEPARATORS[flavor]
    except KeyError:
        raise ValueError(f"Unsupported path flavor: {flavor!r}") from None

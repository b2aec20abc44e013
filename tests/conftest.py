from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

Makes the 'src' directory importable and provides the shared sample tree
used across unit tests.
"""

import os
import sys
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from pathtree.core.path_tree import PathTree  # noqa: E402
from pathtree.domain.constants import SAMPLE_PATHS  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_paths() -> List[str]:
    return list(SAMPLE_PATHS)


@pytest.fixture
def sample_tree(sample_paths) -> PathTree:
    """Tree built from the bundled sample paths, duplicate entry included."""
    return PathTree.from_paths(sample_paths)

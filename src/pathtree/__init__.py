from __future__ import annotations

from pathtree.core.path_parser import split_path
from pathtree.core.path_tree import PathTree, insert_components
from pathtree.domain.config import TreeConfig, get_default_config
from pathtree.domain.tree_models import Segment, SegmentKind, TreeNode

__version__ = "0.1.0"

__all__ = [
    "PathTree",
    "Segment",
    "SegmentKind",
    "TreeConfig",
    "TreeNode",
    "get_default_config",
    "insert_components",
    "split_path",
]

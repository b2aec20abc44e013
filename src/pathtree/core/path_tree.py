from __future__ import annotations

"""
Path Tree Builder.

Merges decomposed paths into a single rooted tree. Each node stands for one
segment; siblings are deduplicated by segment, so paths sharing a prefix
share the nodes for that prefix.
"""

import json
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from pathtree.core.path_parser import split_path
from pathtree.core.tree_renderer import render_lines
from pathtree.core.validator import validate_config
from pathtree.domain.config import TreeConfig
from pathtree.domain.tree_models import Segment, TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# INSERTION
# -----------------------------------------------------------------------------

def insert_components(node: TreeNode, components: Iterable[Segment]) -> int:
    """
    Insert the components below `node`, reusing matching children.

    A root marker met at the root node is absorbed by the root itself, since
    the root already represents the anchor.

    Args:
        node: Node the components hang from.
        components: Segments to insert, root to leaf.

    Returns:
        int: Number of nodes created.
    """
    created = 0
    for part in components:
        if node.level == 0 and part.is_root:
            continue

        child = node.child(part)
        if child is None:
            child = TreeNode(name=part, level=node.level + 1)
            node.children[part] = child
            created += 1
        node = child

    return created


class PathTree:
    """
    Incrementally built tree of the directory structure shared by a set of paths.

    Example:
        >>> tree = PathTree()
        >>> tree.add_path("/usr/bin/bash")
        >>> tree.add_path("/usr/bin/python")
        >>> tree.render()
        ['usr', '  bin', '    bash', '    python']
    """

    def __init__(self, config: Optional[TreeConfig] = None) -> None:
        self.config, warnings = validate_config(config, strict=False)
        for warning in warnings:
            logger.warning(f"Configuration Warning: {warning}")
        self.root = TreeNode(name=Segment.root(), level=0)

    # -- construction ---------------------------------------------------------

    def add_path(self, path: str) -> None:
        """Decompose `path` with the configured flavor and merge it into the tree."""
        self.add_components(split_path(path, self.config.flavor))

    def add_components(self, components: Iterable[Segment]) -> None:
        """Merge an already decomposed path into the tree. Idempotent."""
        created = insert_components(self.root, components)
        logger.debug(f"Inserted path, {created} new node(s)")

    def extend(self, paths: Iterable[str]) -> None:
        for path in paths:
            self.add_path(path)

    @classmethod
    def from_paths(cls, paths: Iterable[str], config: Optional[TreeConfig] = None) -> PathTree:
        tree = cls(config)
        tree.extend(paths)
        if logger.isEnabledFor(logging.INFO):
            logger.info(f"Built path tree with {len(tree)} node(s)")
        return tree

    # -- queries --------------------------------------------------------------

    def find(self, path: str) -> Optional[TreeNode]:
        """
        Look up the node a path ends at.

        Returns:
            Optional[TreeNode]: The node, the root for an empty or root-only
                                path, or None when the path was never inserted.
        """
        node = self.root
        for part in split_path(path, self.config.flavor):
            if node.level == 0 and part.is_root:
                continue
            child = node.child(part)
            if child is None:
                return None
            node = child
        return node

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.find(path) is not None

    def __len__(self) -> int:
        return self.node_count()

    def node_count(self) -> int:
        """Number of nodes below the root."""
        return sum(1 for _ in self.root.iter_descendants())

    # -- output ---------------------------------------------------------------

    def render(self) -> List[str]:
        """Render the tree as indented lines, root excluded."""
        return render_lines(
            self.root,
            indent_unit=self.config.indent_unit,
            sort_children=self.config.sort_children,
        )

    def print_tree(self, stream: Optional[TextIO] = None) -> None:
        """Write the rendered tree to `stream` (stdout by default), one node per line."""
        out = stream if stream is not None else sys.stdout
        for line in self.render():
            out.write(line + "\n")

    def to_dict(self) -> dict:
        return self.root.to_dict()

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

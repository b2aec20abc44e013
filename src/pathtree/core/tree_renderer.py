from __future__ import annotations

"""
Tree Renderer.

Converts a TreeNode hierarchy into indented text lines. The root node is
never emitted; each other node is indented one unit per level below the
root's direct children.
"""

from typing import List

from pathtree.domain.constants import DEFAULT_INDENT_UNIT
from pathtree.domain.tree_models import TreeNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_structure(
        node: TreeNode,
        lines: List[str],
        indent_unit: str = DEFAULT_INDENT_UNIT,
        sort_children: bool = False,
) -> None:
    """
    Append the rendered subtree of `node` to `lines`, depth-first.

    Args:
        node: Subtree root to render.
        lines: Accumulator list for output strings.
        indent_unit: Indentation emitted per depth step.
        sort_children: Visit siblings by display text instead of first-seen order.
    """
    stack: List[TreeNode] = [node]
    while stack:
        current = stack.pop()
        if current.level > 0:
            lines.append(f"{indent_unit * (current.level - 1)}{current.name.text}")

        # Reversed so the first child is popped first.
        stack.extend(reversed(_ordered_children(current, sort_children)))


def render_lines(
        root: TreeNode,
        indent_unit: str = DEFAULT_INDENT_UNIT,
        sort_children: bool = False,
) -> List[str]:
    """Render a whole tree into a fresh list of lines."""
    lines: List[str] = []
    render_tree_structure(root, lines, indent_unit=indent_unit, sort_children=sort_children)
    return lines

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _ordered_children(node: TreeNode, sort_children: bool) -> List[TreeNode]:
    children = list(node.children.values())
    if sort_children:
        children.sort(key=lambda child: child.name.text)
    return children

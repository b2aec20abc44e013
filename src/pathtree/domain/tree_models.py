from __future__ import annotations

"""
Path Tree Data Models.

Provides the segment tagged union produced by path decomposition and the
recursive node structure that the path tree is built from.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List

from pathtree.domain.constants import CURRENT_DIR_TEXT, PARENT_DIR_TEXT

# -----------------------------------------------------------------------------
# SEGMENTS
# -----------------------------------------------------------------------------

class SegmentKind(str, Enum):
    """Kinds of component a path decomposes into."""
    ROOT = "root"
    NORMAL = "normal"
    CURRENT = "current"
    PARENT = "parent"


_MARKER_TEXT: Dict[SegmentKind, str] = {
    SegmentKind.ROOT: "/",
    SegmentKind.CURRENT: CURRENT_DIR_TEXT,
    SegmentKind.PARENT: PARENT_DIR_TEXT,
}


@dataclass(frozen=True)
class Segment:
    """
    One component of a decomposed path.

    Equality and hashing are structural on (kind, text). Marker kinds carry
    a fixed text, so two root markers always compare equal; normal segments
    compare by their exact, case-sensitive text.

    Attributes:
        kind: Component kind.
        text: Display text of the component.
    """
    kind: SegmentKind
    text: str

    @classmethod
    def root(cls) -> Segment:
        return cls(SegmentKind.ROOT, _MARKER_TEXT[SegmentKind.ROOT])

    @classmethod
    def current(cls) -> Segment:
        return cls(SegmentKind.CURRENT, _MARKER_TEXT[SegmentKind.CURRENT])

    @classmethod
    def parent(cls) -> Segment:
        return cls(SegmentKind.PARENT, _MARKER_TEXT[SegmentKind.PARENT])

    @classmethod
    def normal(cls, text: str) -> Segment:
        return cls(SegmentKind.NORMAL, text)

    @property
    def is_root(self) -> bool:
        return self.kind is SegmentKind.ROOT

    def __str__(self) -> str:
        return self.text

# -----------------------------------------------------------------------------
# TREE NODES
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class TreeNode:
    """
    A tree vertex representing one segment at one depth.

    Children are keyed by their segment, which enforces at most one child per
    distinct name. Node identity (equality and hashing) depends on `name`
    only; `level` and `children` are ignored.

    Attributes:
        name: Segment this node represents.
        level: Depth from the root (root = 0).
        children: Child nodes keyed by segment, in first-seen order.
    """
    name: Segment
    level: int = 0
    children: Dict[Segment, TreeNode] = field(default_factory=dict)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeNode):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def child(self, segment: Segment) -> TreeNode | None:
        return self.children.get(segment)

    def iter_descendants(self) -> Iterator[TreeNode]:
        """Yield every node below this one, depth-first, in child order."""
        stack: List[TreeNode] = list(reversed(self.children.values()))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children.values()))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the subtree rooted here into JSON-compatible primitives."""
        result = self._shallow_dict()
        stack = [(self, result)]
        while stack:
            node, entry = stack.pop()
            for child in node.children.values():
                child_entry = child._shallow_dict()
                entry["children"].append(child_entry)
                stack.append((child, child_entry))
        return result

    def _shallow_dict(self) -> Dict[str, Any]:
        return {"name": self.name.text, "level": self.level, "children": []}

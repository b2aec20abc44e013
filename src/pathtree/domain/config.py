from __future__ import annotations

"""
Configuration Domain Model.

Defines the immutable settings that drive path decomposition and tree
rendering, along with the factory for their default values.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from pathtree.domain.constants import DEFAULT_FLAVOR, DEFAULT_INDENT_UNIT


@dataclass(frozen=True)
class TreeConfig:
    """
    Immutable specification for building and rendering a path tree.

    Attributes:
        indent_unit: Text emitted once per depth step below the top level.
        sort_children: Render siblings in lexicographic order instead of
            first-seen order.
        flavor: Path separator rules used to decompose input strings.
    """
    indent_unit: str = DEFAULT_INDENT_UNIT
    sort_children: bool = False
    flavor: str = DEFAULT_FLAVOR

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def get_default_config() -> TreeConfig:
    """
    Generate the default runtime configuration.

    Returns:
        TreeConfig: Default configuration values.
    """
    return TreeConfig()

from __future__ import annotations

"""
Unit tests for the Path Tree Builder.

Covers idempotent insertion, prefix sharing, separation of relative and
absolute inputs, depth bookkeeping and lookups.
"""

import json
import logging

import pytest

from pathtree.core.path_tree import PathTree, insert_components
from pathtree.domain.config import TreeConfig, get_default_config
from pathtree.domain.tree_models import Segment, TreeNode

DEEP_PATH_SEGMENTS = 2000

EXPECTED_SAMPLE_LINES = [
    "usr",
    "  bin",
    "    bash",
    "    python",
    "workdir",
    "  bin",
    "    bash",
    "home",
    "  rusty",
    "    hello.txt",
    "    dummy.txt",
    "  ellie",
    "    workdir",
    "      setup.sh",
]


def _names(node):
    return [child.name.text for child in node.children.values()]


def test_sample_tree_renders_expected_listing(sample_tree):
    assert sample_tree.render() == EXPECTED_SAMPLE_LINES


def test_inserting_same_path_twice_is_idempotent():
    once = PathTree.from_paths(["/usr/bin/bash"])
    twice = PathTree.from_paths(["/usr/bin/bash", "/usr/bin/bash"])

    assert twice.render() == once.render()
    assert twice.to_dict() == once.to_dict()
    assert len(twice) == 3


def test_duplicate_sample_entry_adds_no_nodes(sample_paths):
    without_dup = PathTree.from_paths(sample_paths[:-1])
    with_dup = PathTree.from_paths(sample_paths)

    assert len(with_dup) == len(without_dup) == 14
    assert with_dup.render().count("    bash") == 2  # one per distinct bin node


def test_shared_prefix_reuses_nodes():
    tree = PathTree.from_paths(["/usr/bin/bash", "/usr/bin/python"])

    assert _names(tree.root) == ["usr"]
    usr = tree.find("/usr")
    assert _names(usr) == ["bin"]
    assert _names(tree.find("/usr/bin")) == ["bash", "python"]


def test_relative_path_is_top_level_sibling(sample_tree):
    assert _names(sample_tree.root) == ["usr", "workdir", "home"]
    assert sample_tree.find("workdir").level == 1


def test_convergent_branches(sample_tree):
    assert _names(sample_tree.find("/home")) == ["rusty", "ellie"]
    assert _names(sample_tree.find("/home/rusty")) == ["hello.txt", "dummy.txt"]
    assert _names(sample_tree.find("/home/ellie")) == ["workdir"]

    nested = sample_tree.find("/home/ellie/workdir")
    top = sample_tree.find("workdir")
    assert nested is not top
    assert nested.level == 3
    assert _names(nested) == ["setup.sh"]
    assert _names(top) == ["bin"]


def test_levels_track_depth(sample_tree):
    assert sample_tree.root.level == 0
    assert sample_tree.find("/home").level == 1
    assert sample_tree.find("/home/rusty").level == 2
    assert sample_tree.find("/home/rusty/hello.txt").level == 3


def test_root_marker_is_absorbed_by_root():
    tree = PathTree()
    tree.add_path("/")
    tree.add_path("")

    assert len(tree) == 0
    assert tree.render() == []
    assert tree.find("/") is tree.root


def test_dot_segments_are_distinct_nodes():
    tree = PathTree.from_paths(["./a", "a/../b"])

    assert _names(tree.root) == [".", "a"]
    assert _names(tree.find("a")) == [".."]
    assert tree.render() == [".", "  a", "a", "  ..", "    b"]


def test_add_components_accepts_any_iterable():
    tree = PathTree()
    tree.add_components(iter([Segment.normal("x"), Segment.normal("y")]))
    tree.add_components([Segment.normal("x"), Segment.normal("z")])

    assert tree.render() == ["x", "  y", "  z"]


def test_insert_components_reports_created_nodes():
    root = TreeNode(name=Segment.root())
    parts = [Segment.root(), Segment.normal("usr"), Segment.normal("bin")]

    assert insert_components(root, iter(parts)) == 2
    assert insert_components(root, iter(parts)) == 0
    assert insert_components(root, iter([])) == 0


def test_root_marker_below_root_is_an_ordinary_segment():
    tree = PathTree()
    tree.add_components([Segment.normal("a"), Segment.root()])

    assert tree.render() == ["a", "  /"]


def test_find_and_contains(sample_tree):
    assert "/usr/bin/python" in sample_tree
    assert "/usr/bin/perl" not in sample_tree
    assert "usr" in sample_tree  # root marker is not part of node identity
    assert 42 not in sample_tree
    assert sample_tree.find("/opt") is None


def test_print_tree_writes_to_stdout(sample_tree, capsys):
    sample_tree.print_tree()

    out = capsys.readouterr().out
    assert out == "\n".join(EXPECTED_SAMPLE_LINES) + "\n"


def test_print_tree_never_prints_root(capsys):
    PathTree.from_paths(["/a", "/b"]).print_tree()

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["a", "b"]
    assert "/" not in lines


def test_to_json_round_trips_structure():
    tree = PathTree.from_paths(["/usr/bin"])

    data = json.loads(tree.to_json())
    assert data["name"] == "/"
    assert data["children"][0]["name"] == "usr"
    assert data["children"][0]["children"][0] == {"name": "bin", "level": 2, "children": []}


# -----------------------------------------------------------------------------
# Deep Paths
# -----------------------------------------------------------------------------
@pytest.fixture
def deep_tree() -> PathTree:
    """Tree holding one absolute and one relative path, each 2000 segments deep."""
    tree = PathTree()
    tree.add_path("/" + "/".join(["d"] * DEEP_PATH_SEGMENTS))
    tree.add_path("/".join(["r"] * DEEP_PATH_SEGMENTS))
    return tree


def test_deep_path_insertion_tracks_levels(deep_tree):
    assert len(deep_tree) == 2 * DEEP_PATH_SEGMENTS

    leaf = deep_tree.find("/" + "/".join(["d"] * DEEP_PATH_SEGMENTS))
    assert leaf is not None
    assert leaf.level == DEEP_PATH_SEGMENTS
    assert leaf.children == {}


def test_deep_path_reinsertion_creates_nothing(deep_tree):
    parts = [Segment.root()] + [Segment.normal("d")] * DEEP_PATH_SEGMENTS

    assert insert_components(deep_tree.root, parts) == 0
    assert len(deep_tree) == 2 * DEEP_PATH_SEGMENTS


def test_deep_path_renders_every_level_in_order(deep_tree):
    lines = deep_tree.render()

    assert len(lines) == 2 * DEEP_PATH_SEGMENTS
    assert lines[0] == "d"
    assert lines[DEEP_PATH_SEGMENTS - 1] == "  " * (DEEP_PATH_SEGMENTS - 1) + "d"
    assert lines[DEEP_PATH_SEGMENTS] == "r"
    assert lines[-1] == "  " * (DEEP_PATH_SEGMENTS - 1) + "r"


def test_deep_path_to_dict_keeps_nesting(deep_tree):
    entry = deep_tree.to_dict()["children"][0]
    depth = 0
    while entry["children"]:
        assert len(entry["children"]) == 1
        entry = entry["children"][0]
        depth += 1

    assert depth == DEEP_PATH_SEGMENTS - 1
    assert entry["name"] == "d"
    assert entry["level"] == DEEP_PATH_SEGMENTS


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------
def test_unsupported_flavor_falls_back_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="pathtree.core.path_tree"):
        tree = PathTree(TreeConfig(flavor="amiga"))

    assert tree.config.flavor == get_default_config().flavor
    assert "flavor" in caplog.text

    tree.add_path("/usr")
    assert tree.render() == ["usr"]


def test_valid_config_is_kept_without_warnings(caplog):
    config = TreeConfig(sort_children=True, flavor="windows")

    with caplog.at_level(logging.WARNING, logger="pathtree.core.path_tree"):
        tree = PathTree(config)

    assert tree.config == config
    assert caplog.records == []


def test_from_paths_skips_node_count_when_info_disabled(monkeypatch, caplog):
    def _fail():
        raise AssertionError("node_count should not run")

    caplog.set_level(logging.WARNING, logger="pathtree.core.path_tree")
    monkeypatch.setattr(PathTree, "node_count", lambda self: _fail())

    tree = PathTree.from_paths(["/usr/bin"])
    assert tree.render() == ["usr", "  bin"]


def test_from_paths_logs_node_count_at_info(caplog):
    with caplog.at_level(logging.INFO, logger="pathtree.core.path_tree"):
        PathTree.from_paths(["/usr/bin/bash"])

    assert "Built path tree with 3 node(s)" in caplog.text

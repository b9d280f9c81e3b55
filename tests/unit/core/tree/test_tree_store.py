from __future__ import annotations

"""
Unit tests for the Tree Store.

Verifies path-addressed insertion (overwrite, atomic failure), lookup
semantics, size aggregation on the reference tree and enumeration of
every node location.
"""

import pytest

from sizetree.core.tree.store import TreeStore, new_directory, new_file
from sizetree.domain.errors import NodeNotADirectoryError, NodeNotFoundError
from sizetree.domain.tree_models import DirectoryNode, FileNode


def test_insert_at_adds_entry_to_nested_directory(example_store: TreeStore) -> None:
    """Mirrors the reference scenario: a new file lands in /a/e only."""
    node = new_file(1234)
    example_store.insert_at(["a", "e"], "kevin.txt", node)

    expected = new_directory({
        "a": new_directory({
            "e": new_directory({"i": new_file(584), "kevin.txt": new_file(1234)}),
            "f": new_file(29116),
            "g": new_file(2557),
            "h.lst": new_file(62596),
        }),
        "b.txt": new_file(14848514),
        "c.dat": new_file(8504156),
        "d": new_directory({
            "j": new_file(4060174),
            "d.log": new_file(8033020),
            "d.ext": new_file(5626152),
            "k": new_file(7214296),
        }),
    })
    assert example_store.root == expected
    assert example_store.get_at(["a", "e", "kevin.txt"]) is node
    assert node.name == "kevin.txt"


def test_insert_at_root_with_empty_path() -> None:
    store = TreeStore()
    store.insert_at([], "x", new_file(5))
    assert store.get_at(["x"]) == FileNode(name="x", size=5)


def test_insert_at_overwrites_instead_of_merging() -> None:
    store = TreeStore()
    store.insert_at([], "dir", new_directory())
    store.insert_at(["dir"], "old.txt", new_file(10))

    store.insert_at([], "dir", new_directory())

    replaced = store.get_at(["dir"])
    assert isinstance(replaced, DirectoryNode)
    assert replaced.children == {}
    assert store.total_size() == 0


def test_insert_at_does_not_touch_ancestors(example_store: TreeStore) -> None:
    before = set(example_store.root.children)
    example_store.insert_at(["d"], "new", new_file(1))
    assert set(example_store.root.children) == before


def test_insert_at_missing_segment_raises_and_leaves_tree_unchanged(example_store: TreeStore) -> None:
    before_paths = sorted(map(tuple, example_store.walk()))

    with pytest.raises(NodeNotFoundError) as exc_info:
        example_store.insert_at(["a", "missing", "deeper"], "x", new_file(1))

    assert exc_info.value.path == ("a", "missing", "deeper")
    assert exc_info.value.segment_index == 1
    assert sorted(map(tuple, example_store.walk())) == before_paths


def test_insert_at_through_file_raises_not_a_directory(example_store: TreeStore) -> None:
    with pytest.raises(NodeNotADirectoryError):
        example_store.insert_at(["b.txt"], "x", new_file(1))

    with pytest.raises(NodeNotADirectoryError):
        example_store.insert_at(["a", "f", "z"], "x", new_file(1))


def test_get_at_empty_path_is_root(example_store: TreeStore) -> None:
    assert example_store.get_at([]) is example_store.root


def test_get_at_returns_none_for_missing_or_through_file(example_store: TreeStore) -> None:
    assert example_store.get_at(["nope"]) is None
    assert example_store.get_at(["a", "e", "nope"]) is None
    assert example_store.get_at(["b.txt", "x"]) is None


@pytest.mark.parametrize(
    "path, expected_size",
    [
        (["a", "e"], 584),
        (["a"], 94853),
        (["d"], 24933642),
        ([], 48381165),
        (["b.txt"], 14848514),
    ],
)
def test_total_size(example_store: TreeStore, path, expected_size) -> None:
    node = example_store.get_at(path)
    assert node is not None
    assert example_store.total_size(node) == expected_size


def test_total_size_is_recomputed_after_insertion(example_store: TreeStore) -> None:
    assert example_store.total_size() == 48381165
    example_store.insert_at(["a", "e"], "more", new_file(16))
    assert example_store.total_size() == 48381181
    assert example_store.total_size(example_store.get_at(["a", "e"])) == 600


def test_walk_yields_every_path_once(example_store: TreeStore) -> None:
    paths = list(example_store.walk())

    assert len(paths) == 14
    assert len({tuple(p) for p in paths}) == 14
    assert [] in paths
    assert ["a", "e", "i"] in paths
    assert ["d", "d.log"] in paths
    assert example_store.node_count() == 14


def test_walk_paths_are_independent_objects(example_store: TreeStore) -> None:
    paths = list(example_store.walk())
    paths[1].append("mutated")
    fresh = list(example_store.walk())
    assert all("mutated" not in p for p in fresh)
    assert len({id(p) for p in paths}) == len(paths)


def test_walk_from_subdirectory_is_relative(example_store: TreeStore) -> None:
    paths = sorted(example_store.walk(example_store.get_at(["a"])))
    assert paths == [[], ["e"], ["e", "i"], ["f"], ["g"], ["h.lst"]]


def test_get_at_returns_node_created_by_insertion() -> None:
    store = TreeStore()
    created = {}
    for parent, name, node in [
        ([], "x", new_directory()),
        (["x"], "y", new_directory()),
        (["x", "y"], "z", new_file(3)),
        ([], "w", new_file(4)),
    ]:
        store.insert_at(parent, name, node)
        created[tuple(parent) + (name,)] = node

    for path, node in created.items():
        assert store.get_at(list(path)) is node


def test_new_file_rejects_negative_size() -> None:
    with pytest.raises(ValueError):
        new_file(-1)


def test_new_directory_names_children_after_keys() -> None:
    directory = new_directory({"renamed": new_file(1, name="original")})
    assert directory.children["renamed"].name == "renamed"
    assert directory.size == 0


def test_store_exposes_constructors() -> None:
    assert TreeStore.new_file(7) == FileNode(name="", size=7)
    assert TreeStore.new_directory() == DirectoryNode(name="")


def test_deep_hierarchy_does_not_hit_recursion_limit() -> None:
    store = TreeStore()
    path = []
    for level in range(2000):
        store.insert_at(path, f"d{level}", new_directory())
        path.append(f"d{level}")
    store.insert_at(path, "leaf", new_file(42))

    assert store.total_size() == 42
    assert store.get_at(path + ["leaf"]).size == 42
    assert store.node_count() == 2002

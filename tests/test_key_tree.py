"""Test cases for the dotted-key tree (put and find)."""

import pytest

from dotprops import NodeNotFoundError, PropertiesNode


def test_put_then_find_returns_value():
    """Test that every stored key can be found again with its value.

    Given an empty tree
    When several dotted keys are put
    Then find returns each value unchanged
    """
    root = PropertiesNode()
    pairs = {
        "source": "some source",
        "section1.float": "4.5",
        "section1.bool.true": "yes",
        "a.b.c.d": "deep",
    }
    for key, value in pairs.items():
        root.put(key, value)

    for key, value in pairs.items():
        node = root.find(key)
        assert node.value == value
        assert node.key == key


def test_intermediate_nodes_have_no_value():
    """Test that intermediate segments are created as valueless nodes."""
    root = PropertiesNode()
    root.put("section1.bool.true", "yes")

    section = root.find("section1")
    assert section.key == "section1"
    assert section.value == ""
    assert set(section.children) == {"bool"}
    assert root.find("section1.bool").key == "section1.bool"


def test_put_overwrites_without_duplicating():
    """Test that putting the same key twice keeps only the latest value.

    Given a key already stored
    When the same key is put with a new value
    Then find yields the new value and no extra child appears
    """
    root = PropertiesNode()
    root.put("server.port", "8080")
    root.put("server.port", "9090")

    assert root.find("server.port").value == "9090"
    assert list(root.children) == ["server"]
    assert list(root.find("server").children) == ["port"]


def test_value_and_children_coexist():
    """Test that an intermediate node can receive a value without losing children."""
    root = PropertiesNode()
    root.put("section1.float", "4.5")
    root.put("section1", "direct")

    section = root.find("section1")
    assert section.value == "direct"
    assert section.find("section1.float").value == "4.5"


def test_find_missing_key_raises():
    """Test that a missing path raises NodeNotFoundError carrying the key."""
    root = PropertiesNode()
    root.put("section1.float", "4.5")

    with pytest.raises(NodeNotFoundError) as exc_info:
        root.find("section1.missing")
    assert exc_info.value.key == "section1.missing"

    # NodeNotFoundError is also a KeyError for dict-style callers
    with pytest.raises(KeyError):
        root.find("missing")


def test_empty_key_resolves_to_root():
    """Test that the empty key finds the root and cannot be assigned."""
    root = PropertiesNode()
    root.put("a.b", "1")

    assert root.find("") is root
    assert root.key == ""
    with pytest.raises(KeyError):
        root.put("", "value")
    assert root.value == ""


def test_lookup_from_subtree_restarts_at_root():
    """Test that keys outside a node's subtree are resolved from the root.

    Given a tree with two sections
    When find and put are called on one section with a key of the other
    Then the operation is delegated to the root
    """
    root = PropertiesNode()
    root.put("left.a", "1")
    root.put("right.b", "2")
    left = root.find("left")

    assert left.find("right.b").value == "2"

    left.put("right.c", "3")
    assert root.find("right.c").value == "3"
    assert "right" not in left.children


def test_child_nodes_share_root():
    """Test that lazily created nodes reference the tree root."""
    root = PropertiesNode()
    root.put("a.b.c", "1")

    assert root.root is root
    assert all(node.root is root for node in root.walk())


def test_dotted_edge_keys_pass_through():
    """Test that keys with empty segments are stored as-is."""
    root = PropertiesNode()
    root.put(".lead", "1")
    root.put("trail.", "2")
    root.put("double..dot", "3")

    assert root.find(".lead").value == "1"
    assert root.find("trail.").value == "2"
    assert root.find("double..dot").value == "3"
    assert root.find("double").value == ""


def test_flatten_skips_valueless_nodes():
    """Test flattening collects only assigned values in insertion order."""
    root = PropertiesNode()
    root.put("source", "s")
    root.put("section1.float", "4.5")
    root.put("section1.bool.true", "yes")

    assert root.flatten() == {
        "source": "s",
        "section1.float": "4.5",
        "section1.bool.true": "yes",
    }
    assert [node.key for node in root.walk()] == [
        "source",
        "section1",
        "section1.float",
        "section1.bool",
        "section1.bool.true",
    ]


def test_very_deep_keys():
    """Test that keys with thousands of segments are stored and walked.

    Given a key of 1500 segments
    When it is put, found and flattened
    Then no recursion limit is hit and sibling keys stay reachable
    """
    deep_key = ".".join(["a"] * 1500)
    root = PropertiesNode()
    root.put(deep_key, "v")
    root.put(deep_key + ".leaf", "w")

    assert root.find(deep_key).value == "v"
    assert root.find(deep_key).find(deep_key + ".leaf").value == "w"
    assert root.flatten() == {deep_key: "v", deep_key + ".leaf": "w"}
    assert len(list(root.walk())) == 1501

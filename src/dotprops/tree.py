"""Hierarchical key tree addressed by dotted keys."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from .exceptions import NodeNotFoundError


class PropertiesNode:
    """Tree element holding an optional scalar value and named children.

    Every node stores its full dotted key, so a lookup that leaves the current
    subtree can restart from the root without walking parent links.
    """

    __slots__ = ("key", "value", "children", "root")

    def __init__(self, key: str = "", value: str = "", root: Optional[PropertiesNode] = None):
        """Initialize a node.

        Args:
            key: Full dotted path from the root  # ("" for the root itself)
            value: Scalar value  # ("" means no value was assigned)
            root: Root of the tree  # (None makes this node its own root)
        """
        self.key = key
        self.value = value
        self.children: Dict[str, PropertiesNode] = {}
        self.root = root if root is not None else self

    def put(self, key: str, value: str) -> None:
        """Insert or overwrite the value at a dotted key.

        Intermediate segments are created as valueless nodes.

        Args:
            key: Full dotted key  # (e.g., "section1.bool.true")
            value: Value to store at the terminal segment

        Raises:
            KeyError: If key is empty (the root never holds a value)
        """
        if not key:
            raise KeyError("cannot assign a value to the root node")

        node, segments = self._start(key)
        for segment in segments:
            child = node.children.get(segment)
            if child is None:
                child_key = f"{node.key}.{segment}" if node.root is not node else segment
                child = PropertiesNode(child_key, "", node.root)
                node.children[segment] = child
            node = child

        node.value = value

    def find(self, key: str) -> PropertiesNode:
        """Find the node at a dotted key.

        Args:
            key: Full dotted key  # ("" resolves to the root)

        Returns:
            Node stored at the key

        Raises:
            NodeNotFoundError: If no node exists at the key
        """
        node, segments = self._start(key)
        for segment in segments:
            node = node.children.get(segment)
            if node is None:
                raise NodeNotFoundError(key)
        return node

    def _start(self, key: str) -> Tuple[PropertiesNode, List[str]]:
        """Pick the node a lookup starts from and the segments left to descend.

        Keys outside this node's subtree restart from the root.

        Returns:
            Starting node and remaining path segments  # (empty when key names the start node)
        """
        if key == self.key:
            return self, []
        node = self
        if node.root is not node:
            prefix = node.key + "."
            if key.startswith(prefix):
                return node, key[len(prefix) :].split(".")
            node = node.root
            if key == node.key:
                return node, []
        return node, key.split(".")

    def walk(self) -> Iterator[PropertiesNode]:
        """Iterate over all descendants depth-first, in insertion order."""
        stack = list(reversed(self.children.values()))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children.values()))

    def flatten(self) -> Dict[str, str]:
        """Collect every assigned value below this node.

        Returns:
            Mapping of full dotted key to value  # (valueless nodes are skipped)
        """
        return {node.key: node.value for node in self.walk() if node.value}

    def __repr__(self) -> str:
        """String representation."""
        return f"PropertiesNode(key={self.key!r}, value={self.value!r}, children={sorted(self.children)})"

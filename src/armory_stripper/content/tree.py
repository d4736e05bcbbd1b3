"""
Navigable view over parsed JSON documents.

orjson returns plain dicts and lists without any way to walk back up the
tree. JsonNode wraps a value together with a non-owning link to the node that
contains it, so a match deep in a quest file can be traced to the record that
holds it and detached from its container.
"""

from enum import Enum
from typing import Any, Iterator, List, Optional, Union

NodeKey = Union[str, int, None]


class NodeKind(Enum):
    """JSON value kinds."""
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    NULL = "null"


def kind_of(value: Any) -> NodeKind:
    """Return the JSON kind of a parsed value."""
    if isinstance(value, dict):
        return NodeKind.OBJECT
    if isinstance(value, list):
        return NodeKind.ARRAY
    if isinstance(value, str):
        return NodeKind.STRING
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return NodeKind.BOOL
    if value is None:
        return NodeKind.NULL
    return NodeKind.NUMBER


class JsonNode:
    """A value in a parsed JSON document plus its position in the tree."""

    __slots__ = ("value", "parent", "key")

    def __init__(self, value: Any, parent: Optional["JsonNode"] = None, key: NodeKey = None):
        self.value = value
        self.parent = parent
        self.key = key

    def __repr__(self) -> str:
        return f"JsonNode({self.kind.value} at '{self.path}')"

    @classmethod
    def root(cls, document: Any) -> "JsonNode":
        """Wrap a whole parsed document."""
        return cls(document)

    @property
    def kind(self) -> NodeKind:
        return kind_of(self.value)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def children(self) -> Iterator["JsonNode"]:
        """Yield direct children in document order."""
        if isinstance(self.value, dict):
            for key, child in self.value.items():
                yield JsonNode(child, self, key)
        elif isinstance(self.value, list):
            for index, child in enumerate(self.value):
                yield JsonNode(child, self, index)

    def descendants(self) -> Iterator["JsonNode"]:
        """Yield every node below this one, depth first, in document order."""
        stack: List[Iterator[JsonNode]] = [self.children()]
        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
                continue
            yield child
            if child.kind in (NodeKind.OBJECT, NodeKind.ARRAY):
                stack.append(child.children())

    def ancestors(self) -> Iterator["JsonNode"]:
        """Yield parent, grandparent, ... up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    @property
    def path(self) -> str:
        """Dotted path from the root, e.g. ``rewards.Success[0].items``."""
        segments: List[str] = []
        node: Optional[JsonNode] = self
        while node is not None and node.parent is not None:
            if isinstance(node.key, int):
                segments.append(f"[{node.key}]")
            elif _is_plain_key(node.key):
                segments.append(f".{node.key}")
            else:
                escaped = str(node.key).replace("'", "\\'")
                segments.append(f"['{escaped}']")
            node = node.parent
        return "".join(reversed(segments)).lstrip(".")

    def enclosing_record(self) -> Optional["JsonNode"]:
        """Return the object holding this value as one of its properties.

        A match on a property value (``{"id": "<item>", "count": 1}``) resolves
        to the whole object, two hops up from the string through its property.
        Array elements are not properties, so they have no enclosing record.
        """
        if self.parent is None or not isinstance(self.key, str):
            return None
        if self.parent.kind is not NodeKind.OBJECT:
            return None
        return self.parent

    def detach(self) -> bool:
        """Remove this node from its owning container.

        Returns False when the node is already gone from its container.
        Raises ValueError for the root node, which has no container.
        """
        if self.parent is None:
            raise ValueError("Cannot detach the root of a document")

        container = self.parent.value
        if isinstance(container, list):
            # Indices shift after earlier removals, find the element by identity
            for index, item in enumerate(container):
                if item is self.value:
                    del container[index]
                    return True
            return False

        if isinstance(container, dict) and container.get(self.key) is self.value:
            del container[self.key]
            return True
        return False


def _is_plain_key(key: NodeKey) -> bool:
    if not isinstance(key, str) or not key:
        return False
    return not any(ch in key for ch in ".[]() '\"\t\n")


def find_strings(root: JsonNode, text: str) -> List[JsonNode]:
    """Find string nodes equal to ``text``, ignoring case."""
    folded = text.lower()
    return [
        node
        for node in root.descendants()
        if node.kind is NodeKind.STRING and node.value.lower() == folded
    ]

"""An in-memory XML element tree with attributes and text."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from itertools import chain


@dataclass
class Attribute:
    """A name and value pair on an element."""

    name: str
    value: str


@dataclass(eq=False)
class TreeNode:
    """An XML element with attributes, optional text and ordered children."""

    tag_name: str
    text: str | None = None
    attributes: list[Attribute] = field(default_factory=list)
    children: list[TreeNode] = field(default_factory=list)
    parent: TreeNode | None = field(default=None, repr=False)

    def add_tag(self, tag_name: str) -> TreeNode:
        """Append a new child element and return it."""
        child = TreeNode(tag_name, parent=self)
        self.children.append(child)
        return child

    def delete_child(self, tag_name: str) -> TreeNode | None:
        """Remove the first child with the given tag name and return it, if any."""
        for index, child in enumerate(self.children):
            if child.tag_name == tag_name:
                del self.children[index]
                child.parent = None
                return child
        return None

    def add_attribute(self, name: str, value: str) -> None:
        """Add an attribute in front of the existing ones."""
        self.attributes.insert(0, Attribute(name, value))

    def change_attribute(self, name: str, new_value: str) -> bool:
        """Set the value of the first attribute with this name; tell whether one was found."""
        for attribute in self.attributes:
            if attribute.name == name:
                attribute.value = new_value
                return True
        return False

    def get_attribute(self, name: str) -> str:
        """Return the value of the first attribute with this name."""
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute.value
        raise KeyError(name)

    def find(self, tag_name: str) -> TreeNode | None:
        """Return the first element in this subtree, in document order, with the tag name."""
        return next((node for node in self.walk() if node.tag_name == tag_name), None)

    def walk(self) -> Iterator[TreeNode]:
        """Yield this element and all its descendants in document order."""
        yield self
        for child in self.children:
            yield from child.walk()


def _following_siblings(node: TreeNode) -> list[TreeNode]:
    if node.parent is None:
        return []
    siblings = node.parent.children
    for index, sibling in enumerate(siblings):
        if sibling is node:
            return siblings[index + 1 :]
    return []


def _search(root: TreeNode, tag_name: str) -> TreeNode | None:
    candidates = chain(root.walk(), *(s.walk() for s in _following_siblings(root)))
    return next((node for node in candidates if node.tag_name == tag_name), None)


def search_and_print_tag(root: TreeNode | None, tag_name: str | None) -> bool:
    """Print the first matching tag from root onward; tell whether one was found."""
    if root is None or tag_name is None:
        print("[search_and_print_tag] Root node or tag name is not valid.")
        return False
    node = _search(root, tag_name)
    if node is None:
        return False
    print(f"[search_and_print_tag] Found tag: <{node.tag_name}>")
    return True


def search_and_print(root: TreeNode | None, tag_name: str | None) -> bool:
    """Print the text of the first matching tag from root onward; tell whether one was found."""
    if root is None or tag_name is None:
        return False
    node = _search(root, tag_name)
    if node is None:
        return False
    content = node.text if node.text is not None else "No content"
    print(f"[search_and_print] Content of tag <{node.tag_name}>: {content}")
    return True
"""Serialise an element tree as indented XML text."""

from __future__ import annotations

import io
import os
from typing import TextIO

from .tree import TreeNode

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
_INDENT = "    "


def write_tag(stream: TextIO, node: TreeNode | None, indent: int = 0) -> None:
    """Write one element and its subtree at the given indentation level."""
    if node is None:
        return
    pad = _INDENT * indent
    stream.write(f"{pad}<{node.tag_name}")
    for attribute in node.attributes:
        stream.write(f' {attribute.name}="{attribute.value}"')

    if node.children or node.text:
        stream.write(">")
        if node.text:
            stream.write(node.text)
        if node.children:
            stream.write("\n")
            for child in node.children:
                write_tag(stream, child, indent + 1)
            stream.write(pad)
        stream.write(f"</{node.tag_name}>\n")
    else:
        stream.write("/>\n")


def to_xml_string(root: TreeNode | None) -> str:
    """Return the XML document, declaration included, for a tree."""
    buffer = io.StringIO()
    buffer.write(XML_DECLARATION)
    write_tag(buffer, root, 0)
    return buffer.getvalue()


def write_xml_file(filename: str | os.PathLike[str], root: TreeNode | None) -> None:
    """Write the XML document for a tree to a file."""
    with open(filename, "w", encoding="utf-8") as stream:
        stream.write(XML_DECLARATION)
        write_tag(stream, root, 0)
"""Tag name rules and a tag-balance check for XML text."""

from __future__ import annotations

import os
import string
from pathlib import Path

from .tagstack import TagStack

_NAME_START = frozenset(string.ascii_letters + "_")
_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_-.")
_WHITESPACE = " \t\n\v\f\r"


class InvalidTagNameError(ValueError):
    """Raised when a tag name breaks the naming rules."""


class XMLValidationError(ValueError):
    """Raised when XML text has unbalanced or malformed tags."""

    def __init__(self, message: str, line: int | None = None, tag: str | None = None) -> None:
        self.line = line
        self.tag = tag
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


def check_tag_name(tag_name: str | None) -> str:
    """Return the tag name if it is valid, otherwise raise InvalidTagNameError."""
    if not tag_name:
        raise InvalidTagNameError("tag name must not be empty")
    if tag_name[:3].lower() == "xml":
        raise InvalidTagNameError("tag name must not start with 'xml'")
    if tag_name[0] not in _NAME_START:
        raise InvalidTagNameError("tag name must start with a letter or an underscore")
    if any(ch not in _NAME_CHARS for ch in tag_name[1:]):
        raise InvalidTagNameError(
            "tag name may only contain letters, digits, underscores, hyphens and dots"
        )
    return tag_name


def is_valid_tag(tag_name: str | None) -> bool:
    """Tell whether a tag name follows the naming rules."""
    try:
        check_tag_name(tag_name)
    except InvalidTagNameError:
        return False
    return True


def _checked(name: str, line: int, shown: str) -> str:
    try:
        return check_tag_name(name)
    except InvalidTagNameError as exc:
        raise XMLValidationError(f"invalid tag name {shown}: {exc}", line, name) from exc


def validate_xml(text: str) -> list[str]:
    """Check that every opening tag in the text is closed in order.

    Returns the names of the opening tags in document order.
    """
    stack = TagStack()
    opened: list[str] = []
    pos = text.find("<")
    while pos != -1:
        line = text.count("\n", 0, pos) + 1
        end = text.find(">", pos)
        marker = text[pos + 1 : pos + 2]

        if marker == "?":
            if end == -1:
                raise XMLValidationError("XML declaration is not closed", line)
        elif marker == "/":
            if end == -1:
                raise XMLValidationError("closing tag is not terminated", line)
            name = text[pos + 2 : end].strip(_WHITESPACE)
            _checked(name, line, f"</{name}>")
            if stack.is_empty():
                raise XMLValidationError(
                    f"closing tag </{name}> has no matching opening tag", line, name
                )
            expected = stack.pop()
            if expected != name:
                raise XMLValidationError(
                    f"closing tag </{name}> does not match opening tag <{expected}>",
                    line,
                    name,
                )
        else:
            if end == -1:
                raise XMLValidationError("opening tag is not closed", line)
            name = text[pos + 1 : end].split(" ", 1)[0].strip(_WHITESPACE)
            _checked(name, line, f"<{name}>")
            stack.push(name)
            opened.append(name)

        pos = text.find("<", end + 1)

    if not stack.is_empty():
        unclosed = stack.peek()
        raise XMLValidationError(f"tag <{unclosed}> is never closed", tag=unclosed)
    return opened


def is_valid_xml_file(filename: str | os.PathLike[str]) -> bool:
    """Tell whether a file exists, is not empty and has balanced, well-named tags."""
    try:
        text = Path(filename).read_text(encoding="utf-8", errors="surrogateescape")
    except OSError:
        return False
    if not text:
        return False
    try:
        validate_xml(text)
    except XMLValidationError:
        return False
    return True
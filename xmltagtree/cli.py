"""Command that checks an XML file and writes a sample element tree."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from .tree import TreeNode, search_and_print, search_and_print_tag
from .validation import XMLValidationError, validate_xml
from .writer import write_xml_file

DEFAULT_INPUT = "../input/xml_input.txt"
DEFAULT_OUTPUT = "../output/output.xml"


def build_sample_tree() -> TreeNode:
    """Build the sample library tree with its attributes and texts."""
    root = TreeNode("library")
    book = root.add_tag("book")
    magazine = root.add_tag("magazine")
    book_title = book.add_tag("title")
    author = book.add_tag("author")
    magazine_title = magazine.add_tag("title")
    editor = magazine.add_tag("editor")

    root.add_attribute("location", "Hanoi")
    book.add_attribute("id", "b001")
    magazine.add_attribute("id", "m001")
    book_title.add_attribute("lang", "en")
    magazine_title.add_attribute("lang", "vn")

    book_title.text = "C Programming"
    author.text = "Nguyen Van A"
    magazine_title.text = "Tech Magazine"
    editor.text = "Le Thi B"

    book.change_attribute("id", "b002")
    return root


def _report_validation(filename: str) -> bool:
    try:
        text = Path(filename).read_text(encoding="utf-8", errors="surrogateescape")
    except OSError:
        print(f"Cannot open file: {filename}")
        return False
    if not text:
        print(f"File is empty: {filename}")
        return False
    try:
        validate_xml(text)
    except XMLValidationError as exc:
        print(f"Error: {exc}")
        return False
    return True


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="xmltagtree",
        description="Check the tags of an XML file and write a sample XML tree.",
    )
    parser.add_argument("--input", default=DEFAULT_INPUT, help="XML file to check")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="file to write the sample tree to")
    args = parser.parse_args(argv)

    print("Starting XML validation...")
    if _report_validation(args.input):
        print("XML file is valid.")
    else:
        print("XML file is not valid.")

    print("\nBuilding sample XML tree...")
    root = build_sample_tree()

    print("\nSearching for tag 'author':")
    search_and_print_tag(root, "author")

    print("\nPrinting content of tag 'title':")
    search_and_print(root, "title")

    print("\nDeleting tag 'magazine'...")
    root.delete_child("magazine")

    print("\nWriting XML tree to file...")
    try:
        write_xml_file(args.output, root)
    except OSError as exc:
        print(f"Cannot open file for writing: {exc}")
    else:
        print(f'Wrote XML file to "{args.output}"')
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
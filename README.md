# xmltagtree

A small toolkit for two everyday XML chores:

* **Checking tag nesting.** It walks through a document and keeps its open tags
  on a stack. It reports the first closing tag that does not match, any tag
  left open, and any tag name that breaks the naming rules.
* **Working with a tag tree in memory.** You can build a tree of elements with
  attributes and text, edit it, search it and write it out as indented XML.

The package has no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Checking a document

```python
from xmltagtree.validation import is_valid_xml_file, validate_xml, XMLValidationError

is_valid_xml_file("input.xml")          # True or False

validate_xml("<a><b></b></a>")          # ["a", "b"]: opening tags in order

try:
    validate_xml("<a><b></a></b>")
except XMLValidationError as exc:
    print(exc)                          # "line 1: closing tag </a> does not match opening tag <b>"
    exc.line, exc.tag                   # (1, "a")
```

`validate_xml` returns the names of the opening tags in document order. It
raises `XMLValidationError` when one of these is true:

* a tag is not terminated with `>`;
* a tag name is not valid;
* a closing tag has no opening tag to match;
* a closing tag does not match the opening tag it closes;
* a tag is never closed.

The error carries `line` and `tag` attributes where they are known.
`is_valid_xml_file` returns `False` when the file cannot be read, when it is
empty, or when `validate_xml` rejects its contents.

`<?...?>` declarations are skipped. The name of an opening tag is everything
up to the first space, so attributes are allowed, but their contents are not
checked.

A tag name is accepted when it meets all of these rules:

* it is not empty;
* it does not start with `xml`, in any mix of upper and lower case;
* it starts with an ASCII letter or an underscore;
* every other character is an ASCII letter, a digit, `_`, `-` or `.`.

`check_tag_name` returns the name, or raises `InvalidTagNameError` when the
name breaks a rule. `is_valid_tag` returns `True` or `False` instead.

`xmltagtree.tagstack.TagStack` is the stack used for the check. It has `push`,
`pop`, `peek`, `is_empty`, `clear` and `len()`. `pop` and `peek` raise
`EmptyStackError` (an `IndexError`) when the stack is empty.

## Building and writing a tree

```python
from xmltagtree.tree import TreeNode
from xmltagtree.writer import to_xml_string, write_xml_file

root = TreeNode("library")
book = root.add_tag("book")             # returns the new child
book.add_attribute("id", "b001")
title = book.add_tag("title")
title.text = "C Programming"

book.change_attribute("id", "b002")     # True if the attribute was found
book.get_attribute("id")                # "b002"; KeyError if missing
root.find("title").text                 # "C Programming"
[node.tag_name for node in root.walk()] # ["library", "book", "title"]

root.delete_child("book")               # removes and returns the first "book" child

print(to_xml_string(root))
write_xml_file("output.xml", root)
```

`TreeNode` has `tag_name`, `text`, `attributes` (a list of `Attribute` with
`name` and `value`), `children` and `parent`. `add_attribute` puts the new
attribute in front of the existing ones, so attributes are written newest
first.

`search_and_print_tag(root, name)` and `search_and_print(root, name)` look
for the first element with that name. They search the subtree of `root` and
then the siblings that follow `root`. They print the tag, or its text, and
return whether they found it.

When a tree is written, a node that has no children and no text becomes a
self-closing tag, for example `<editor/>`. Children are indented by four
spaces per level. `write_tag(stream, node, indent)` writes one subtree to any
text stream. Every document from `to_xml_string` and `write_xml_file` starts
with the declaration `<?xml version="1.0" encoding="UTF-8"?>`.

## Command line

```
xmltagtree --input input.xml --output output.xml
```

The command checks the input file and prints whether it is valid, with the
reason when it is not. It then builds a sample library tree and prints search
results from that tree. It removes the `magazine` branch and writes the rest
to the output file. The defaults are `../input/xml_input.txt` and
`../output/output.xml`. Run `xmltagtree --help` to see the options.

## What it does not do

* It does not parse a document into a `TreeNode` tree. Trees are built in
  code only.
* The check looks at tag nesting and tag names only. It does not understand
  comments, CDATA sections or self-closing tags such as `<br/>`, and it does
  not check attributes or entities.
* The writer does not escape special characters in text or attribute values.
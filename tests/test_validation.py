import pytest

from xmltagtree.validation import (
    InvalidTagNameError,
    XMLValidationError,
    check_tag_name,
    is_valid_tag,
    is_valid_xml_file,
    validate_xml,
)

VALID_NAMES = ["book", "_private", "a1", "first-name", "v1.2", "Title", "x"]
INVALID_NAMES = [
    "",
    None,
    "xmlfoo",
    "XMLdata",
    "XmL",
    "1abc",
    "-dash",
    ".dot",
    "a b",
    "ns:tag",
    "a/",
    "caf\u00e9",
    "!--",
]


@pytest.mark.parametrize("name", VALID_NAMES)
def test_valid_names_pass(name):
    assert check_tag_name(name) == name
    assert is_valid_tag(name)


@pytest.mark.parametrize("name", INVALID_NAMES)
def test_invalid_names_rejected(name):
    with pytest.raises(InvalidTagNameError):
        check_tag_name(name)
    assert not is_valid_tag(name)


def test_validate_returns_opening_tags_in_order():
    text = '<?xml version="1.0"?>\n<library id="1">\n  <book>\n  </book>\n  <magazine></magazine>\n</library>\n'
    assert validate_xml(text) == ["library", "book", "magazine"]


def test_whitespace_inside_closing_tag_is_trimmed():
    assert validate_xml("<a>text</ a >") == ["a"]


def test_text_without_tags_is_valid():
    assert validate_xml("just some words") == []


def test_mismatched_closing_tag_reports_line_and_tag():
    with pytest.raises(XMLValidationError) as info:
        validate_xml("<a>\n<b>\n</c>\n</a>")
    assert info.value.tag == "c"
    assert info.value.line == 3


def test_closing_without_opening():
    with pytest.raises(XMLValidationError) as info:
        validate_xml("</lonely>")
    assert info.value.tag == "lonely"


def test_unclosed_tag_reported():
    with pytest.raises(XMLValidationError) as info:
        validate_xml("<outer><inner></inner>")
    assert info.value.tag == "outer"
    assert info.value.line is None


@pytest.mark.parametrize(
    "text",
    ["<?xml version='1.0'", "<a></a", "<a", "<a></a><", "<xmlthing></xmlthing>", "<1a></1a>"],
)
def test_malformed_documents_raise(text):
    with pytest.raises(XMLValidationError):
        validate_xml(text)


def test_self_closing_tag_is_rejected():
    with pytest.raises(XMLValidationError):
        validate_xml("<root><empty/></root>")


def test_invalid_name_error_is_chained():
    with pytest.raises(XMLValidationError) as info:
        validate_xml("<ns:tag></ns:tag>")
    assert isinstance(info.value.__cause__, InvalidTagNameError)


def test_valid_file(tmp_path):
    path = tmp_path / "in.xml"
    path.write_text("<root><child>x</child></root>", encoding="utf-8")
    assert is_valid_xml_file(path)


def test_invalid_file(tmp_path):
    path = tmp_path / "in.xml"
    path.write_text("<root><child></root>", encoding="utf-8")
    assert not is_valid_xml_file(path)


def test_empty_file_is_invalid(tmp_path):
    path = tmp_path / "empty.xml"
    path.write_text("", encoding="utf-8")
    assert not is_valid_xml_file(path)


def test_missing_file_is_invalid(tmp_path):
    assert not is_valid_xml_file(tmp_path / "absent.xml")
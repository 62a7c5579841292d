import pytest

from printspec.core.errors import MalformedInputError
from printspec.core.records import MAX_XML_UPLOAD_BYTES, Record, is_xml_filename, parse_record_xml
from tests.helpers._record_builders import VALID_FIELDS, make_record_xml


def test_parse_record_xml_extracts_all_fields() -> None:
    record = parse_record_xml(make_record_xml())
    assert record == Record(**VALID_FIELDS)


def test_parse_record_xml_trims_and_defaults_missing_fields() -> None:
    xml = b"<record><isbn>\n  9781108000000  \n</isbn><paper> Navigator 80 gsm </paper></record>"
    record = parse_record_xml(xml)
    assert record.isbn == "9781108000000"
    assert record.paper == "Navigator 80 gsm"
    assert record.title == ""
    assert record.binding_style == ""


def test_parse_record_xml_finds_nested_record_and_fields() -> None:
    xml = (
        "<batch><record><spec><title>Nested <i>Title</i></title></spec>"
        "<isbn>9780000000001</isbn></record><record><isbn>ignored</isbn></record></batch>"
    )
    record = parse_record_xml(xml)
    assert record.isbn == "9780000000001"
    assert record.title == "Nested Title"


def test_parse_record_xml_accepts_text_with_encoding_declaration() -> None:
    record = parse_record_xml(make_record_xml().decode("utf-8"))
    assert record.isbn == VALID_FIELDS["isbn"]


def test_parse_record_xml_reads_default_namespaced_record() -> None:
    xml = make_record_xml().replace(b"<record>", b'<record xmlns="http://example.com/cup">')
    record = parse_record_xml(xml)
    assert record == Record(**VALID_FIELDS)


def test_parse_record_xml_finds_prefixed_record_inside_wrapper() -> None:
    xml = (
        b'<batch xmlns:cup="http://example.com/cup">'
        b"<cup:record><cup:isbn>9780000000002</cup:isbn><cup:paper>Clairjet 90 gsm</cup:paper></cup:record>"
        b"</batch>"
    )
    record = parse_record_xml(xml)
    assert record.isbn == "9780000000002"
    assert record.paper == "Clairjet 90 gsm"


def test_parse_record_xml_text_ignores_declared_encoding() -> None:
    xml = '<?xml version="1.0" encoding="ISO-8859-1"?><record><title>Caf\u00e9</title></record>'
    assert parse_record_xml(xml).title == "Caf\u00e9"


def test_parse_record_xml_rejects_malformed_xml() -> None:
    with pytest.raises(MalformedInputError) as excinfo:
        parse_record_xml(b"<record><isbn>1</record>")
    assert excinfo.value.check_name == "XML Format"
    assert excinfo.value.message.startswith("Invalid XML format:")


def test_parse_record_xml_rejects_missing_record_element() -> None:
    with pytest.raises(MalformedInputError) as excinfo:
        parse_record_xml(b"<book><isbn>1</isbn></book>")
    assert excinfo.value.check_name == "XML Structure"
    assert excinfo.value.message == "Missing root record element"


def test_parse_record_xml_rejects_empty_and_non_text_input() -> None:
    with pytest.raises(MalformedInputError) as empty:
        parse_record_xml(b"   ")
    assert empty.value.check_name == "XML Format"

    with pytest.raises(MalformedInputError) as wrong_type:
        parse_record_xml(12345)  # type: ignore[arg-type]
    assert wrong_type.value.message == "Invalid XML content type"


def test_parse_record_xml_rejects_oversized_documents() -> None:
    payload = b"<record>" + b" " * MAX_XML_UPLOAD_BYTES + b"</record>"
    with pytest.raises(MalformedInputError) as excinfo:
        parse_record_xml(payload)
    assert excinfo.value.check_name == "File Error"


def test_parse_record_xml_does_not_expand_external_entities(tmp_path) -> None:
    secret = tmp_path / "secret.txt"
    secret.write_text("leaked", encoding="utf-8")
    xml = (
        f'<?xml version="1.0"?><!DOCTYPE record [<!ENTITY x SYSTEM "file://{secret}">]>'
        "<record><title>&x;</title></record>"
    ).encode("utf-8")
    record = parse_record_xml(xml)
    assert "leaked" not in record.title


def test_record_from_mapping_strips_and_defaults() -> None:
    record = Record.from_mapping({"isbn": " 978 ", "extent": 64, "paper": None, "unknown": "x"})
    assert record.isbn == "978"
    assert record.extent == "64"
    assert record.paper == ""


def test_is_xml_filename() -> None:
    assert is_xml_filename("title.XML") is True
    assert is_xml_filename("notes.txt") is False
    assert is_xml_filename(None) is False

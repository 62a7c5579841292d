"""Print-specification records and their extraction from XML."""

from dataclasses import dataclass, fields
from typing import Any, Mapping

from lxml import etree

from .errors import MalformedInputError

MAX_XML_UPLOAD_BYTES = 5 * 1024 * 1024
RECORD_ELEMENT = "record"


@dataclass(frozen=True)
class Record:
    isbn: str = ""
    title: str = ""
    trim_height: str = ""
    trim_width: str = ""
    extent: str = ""
    paper: str = ""
    colour: str = ""
    quality: str = ""
    binding_style: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Record":
        values = {}
        for item in fields(cls):
            raw = data.get(item.name)
            values[item.name] = str(raw).strip() if raw is not None else ""
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


RECORD_FIELDS: tuple[str, ...] = tuple(item.name for item in fields(Record))


def _build_parser(encoding: str | None = None) -> etree.XMLParser:
    # Uploads are untrusted: no DTD loading, no entity expansion, no network.
    return etree.XMLParser(
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        huge_tree=False,
        remove_comments=True,
    )


def _element_text(record_node: etree._Element, tag: str) -> str:
    found = record_node.find(f".//{{*}}{tag}")
    if found is None:
        return ""
    return "".join(found.itertext()).strip()


def _find_record_node(root: etree._Element) -> etree._Element | None:
    if etree.QName(root).localname == RECORD_ELEMENT:
        return root
    return root.find(f".//{{*}}{RECORD_ELEMENT}")


def parse_record_xml(data: bytes | str) -> Record:
    """Extract a :class:`Record` from one XML document.

    Raises :class:`MalformedInputError` when the document is empty, is not
    well-formed, or has no ``<record>`` element.
    """
    # Text was already decoded; its XML declaration no longer describes the bytes.
    encoding = None
    if isinstance(data, str):
        payload = data.encode("utf-8")
        encoding = "utf-8"
    elif isinstance(data, bytes):
        payload = data
    else:
        raise MalformedInputError("XML Format", "Invalid XML content type")

    if not payload.strip():
        raise MalformedInputError("XML Format", "Invalid XML format: document is empty")
    if len(payload) > MAX_XML_UPLOAD_BYTES:
        raise MalformedInputError("File Error", "XML file exceeds 5 MB limit.")

    try:
        root = etree.fromstring(payload, parser=_build_parser(encoding))
    except etree.XMLSyntaxError as exc:
        raise MalformedInputError("XML Format", f"Invalid XML format: {exc}") from exc

    record_node = _find_record_node(root)
    if record_node is None:
        raise MalformedInputError("XML Structure", "Missing root record element")

    return Record(**{name: _element_text(record_node, name) for name in RECORD_FIELDS})


def is_xml_filename(filename: str | None) -> bool:
    return str(filename or "").strip().lower().endswith(".xml")


__all__ = [
    "MAX_XML_UPLOAD_BYTES",
    "RECORD_FIELDS",
    "Record",
    "is_xml_filename",
    "parse_record_xml",
]

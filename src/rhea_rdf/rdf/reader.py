"""Streaming decoder for Rhea RDF/XML dumps."""

from __future__ import annotations

import gzip
import io
import zlib
from pathlib import Path
from typing import Any, BinaryIO, Iterator

import lxml.etree as LET

from rhea_rdf.core.exceptions import RecordDecodeError
from rhea_rdf.core.logging import get_logger

from .records import (
    BOOLEAN_FIELDS,
    INTEGER_FIELDS,
    RESOURCE_FIELDS,
    RESOURCE_LIST_FIELDS,
    TEXT_FIELDS,
    Property,
    Record,
)

LOGGER = get_logger(__name__)

GZIP_MAGIC = b"\x1f\x8b"
ROOT_ELEMENT = "RDF"
RECORD_ELEMENT = "Description"

_TRUE_LITERALS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_LITERALS = {"0", "f", "F", "FALSE", "false", "False"}


def read_rhea(path: Path | str) -> bytes:
    """Return the decompressed bytes of a Rhea dump.

    Gzip input is detected from its magic number, so an already decompressed
    `.rdf` file is returned unchanged.
    """
    raw = Path(path).read_bytes()
    if not raw.startswith(GZIP_MAGIC):
        return raw
    try:
        return gzip.decompress(raw)
    except (gzip.BadGzipFile, EOFError, zlib.error) as exc:
        raise RecordDecodeError(f"Corrupt gzip stream in {path}") from exc


def load_records(path: Path | str) -> list[Record]:
    """Decode every record of a dump file without materialising its bytes."""
    source = Path(path)
    with source.open("rb") as handle:
        compressed = handle.read(2) == GZIP_MAGIC
    opener = gzip.open if compressed else open
    with opener(source, "rb") as handle:
        try:
            records = list(iter_records(handle))
        except (gzip.BadGzipFile, EOFError, zlib.error) as exc:
            raise RecordDecodeError(f"Corrupt gzip stream in {source}") from exc
    LOGGER.info("reader.decoded", path=str(source), record_count=len(records))
    return records


def decode_records(data: bytes) -> list[Record]:
    """Decode an in-memory RDF/XML payload into records."""
    records = list(iter_records(io.BytesIO(data)))
    LOGGER.debug("reader.decoded", byte_count=len(data), record_count=len(records))
    return records


def iter_records(source: BinaryIO) -> Iterator[Record]:
    """Yield one record per top-level `rdf:Description`, clearing parsed elements."""
    context = LET.iterparse(
        source,
        events=("start", "end"),
        resolve_entities=False,
        huge_tree=True,
    )
    root: Any = None
    depth = 0
    try:
        for event, elem in context:
            if event == "start":
                if root is None:
                    root = elem
                    if _local_name(elem) != ROOT_ELEMENT:
                        raise RecordDecodeError(
                            f"Expected <{ROOT_ELEMENT}> root element, found <{_local_name(elem)}>"
                        )
                depth += 1
                continue
            depth -= 1
            if depth != 1:
                continue
            if _local_name(elem) == RECORD_ELEMENT:
                yield _decode_record(elem)
            elem.clear()
            while elem.getprevious() is not None:
                del root[0]
    except LET.XMLSyntaxError as exc:
        raise RecordDecodeError(f"Malformed RDF/XML: {exc}") from exc
    if root is None:
        raise RecordDecodeError("RDF/XML payload is empty")


def _decode_record(elem: Any) -> Record:
    about = _attribute(elem, "about") or _attribute(elem, "nodeID")
    if not about:
        raise RecordDecodeError(f"<{RECORD_ELEMENT}> on line {elem.sourceline} has no identifier")

    fields: dict[str, Any] = {"about": about}
    lists: dict[str, list[str]] = {}
    properties: list[Property] = []

    for child in elem:
        if not isinstance(child.tag, str):
            continue
        name = _local_name(child)
        if name in TEXT_FIELDS:
            fields[TEXT_FIELDS[name]] = _text(child)
        elif name in INTEGER_FIELDS:
            fields[INTEGER_FIELDS[name]] = _parse_int(name, _text(child), about)
        elif name in BOOLEAN_FIELDS:
            fields[BOOLEAN_FIELDS[name]] = _parse_bool(name, _text(child), about)
        elif name in RESOURCE_FIELDS:
            fields[RESOURCE_FIELDS[name]] = _attribute(child, "resource")
        elif name in RESOURCE_LIST_FIELDS:
            resource = _attribute(child, "resource")
            if resource:
                lists.setdefault(RESOURCE_LIST_FIELDS[name], []).append(resource)
        else:
            properties.append(Property(name, _attribute(child, "resource")))

    for key, values in lists.items():
        fields[key] = tuple(values)
    fields["properties"] = tuple(properties)
    return Record(**fields)


def _local_name(elem: Any) -> str:
    return LET.QName(elem).localname


def _attribute(elem: Any, local_name: str) -> str:
    for key, value in elem.attrib.items():
        if LET.QName(key).localname == local_name:
            return value
    return ""


def _text(elem: Any) -> str:
    return "".join(elem.itertext())


def _parse_int(name: str, text: str, about: str) -> int:
    value = text.strip()
    if not value:
        return 0
    try:
        return int(value)
    except ValueError as exc:
        raise RecordDecodeError(f"`{name}` on {about} is not an integer: {value!r}") from exc


def _parse_bool(name: str, text: str, about: str) -> bool:
    value = text.strip()
    if not value or value in _FALSE_LITERALS:
        return False
    if value in _TRUE_LITERALS:
        return True
    raise RecordDecodeError(f"`{name}` on {about} is not a boolean: {value!r}")

"""Flat record model for decoded `rdf:Description` elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Iterator, NamedTuple


class Property(NamedTuple):
    """An element whose tag name is not part of the known record schema."""

    name: str
    value: str


@dataclass(slots=True, frozen=True)
class Record:
    """One `rdf:Description` element before classification.

    Only the fields relevant to the entity kind selected by `subclasses` are
    populated; everything else keeps its zero value. Elements outside the known
    schema are kept, in document order, in `properties`.
    """

    about: str
    id: int = 0
    accession: str = ""
    subclasses: tuple[str, ...] = ()

    # Reaction
    equation: str = ""
    html_equation: str = ""
    is_chemically_balanced: bool = False
    is_transport: bool = False
    status: str = ""
    comment: str = ""
    ec: str = ""
    location: str = ""
    citations: tuple[str, ...] = ()
    substrates: tuple[str, ...] = ()
    products: tuple[str, ...] = ()
    substrates_or_products: tuple[str, ...] = ()

    # Reaction side and participant
    directional_reactions: tuple[str, ...] = ()
    bidirectional_reactions: tuple[str, ...] = ()
    side: str = ""
    see_also: str = ""
    transformable_to: str = ""
    curated_order: int = 0
    contains: str = ""
    compound: str = ""

    # Compound and reactive part
    name: str = ""
    html_name: str = ""
    formula: str = ""
    charge: str = ""
    chebi: str = ""
    underlying_chebi: str = ""
    reactive_part: str = ""
    position: str = ""
    polymerization_index: str = ""

    properties: tuple[Property, ...] = ()

    def iter_properties(self, prefix: str = "") -> Iterator[Property]:
        for prop in self.properties:
            if prop.name.startswith(prefix):
                yield prop


# Element local name -> record attribute, grouped by how the value is read.
TEXT_FIELDS: Final[dict[str, str]] = {
    "accession": "accession",
    "equation": "equation",
    "htmlEquation": "html_equation",
    "comment": "comment",
    "name": "name",
    "htmlName": "html_name",
    "formula": "formula",
    "charge": "charge",
    "position": "position",
    "polymerizationIndex": "polymerization_index",
}

INTEGER_FIELDS: Final[dict[str, str]] = {
    "id": "id",
    "curatedOrder": "curated_order",
}

BOOLEAN_FIELDS: Final[dict[str, str]] = {
    "isChemicallyBalanced": "is_chemically_balanced",
    "isTransport": "is_transport",
}

RESOURCE_FIELDS: Final[dict[str, str]] = {
    "status": "status",
    "ec": "ec",
    "location": "location",
    "side": "side",
    "seeAlso": "see_also",
    "transformableTo": "transformable_to",
    "contains": "contains",
    "compound": "compound",
    "chebi": "chebi",
    "underlyingChebi": "underlying_chebi",
    "reactivePart": "reactive_part",
}

RESOURCE_LIST_FIELDS: Final[dict[str, str]] = {
    "subClassOf": "subclasses",
    "citation": "citations",
    "substrates": "substrates",
    "products": "products",
    "substratesOrProducts": "substrates_or_products",
    "directionalReaction": "directional_reactions",
    "bidirectionalReaction": "bidirectional_reactions",
}


def is_known_field(local_name: str) -> bool:
    return (
        local_name in TEXT_FIELDS
        or local_name in INTEGER_FIELDS
        or local_name in BOOLEAN_FIELDS
        or local_name in RESOURCE_FIELDS
        or local_name in RESOURCE_LIST_FIELDS
    )

"""Classification of records by their `subClassOf` assertions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Final, Literal, cast

from rhea_rdf.core.constants import (
    BIDIRECTIONAL_REACTION,
    CHEBI_MARKER,
    DIRECTIONAL_REACTION,
    GENERIC_HETEROPOLYSACCHARIDE,
    GENERIC_POLYNUCLEOTIDE,
    GENERIC_POLYPEPTIDE,
    POLYMER,
    REACTIVE_PART,
    SMALL_MOLECULE,
    strip_namespace,
)
from rhea_rdf.core.models import Compound, CompoundKind, Reaction, ReactivePart
from rhea_rdf.rdf.records import Record

SubclassKind = Literal[
    "directional_reaction",
    "bidirectional_reaction",
    "compound_with_part",
    "generic_compound",
    "reactive_part",
]

SUBCLASS_KINDS: Final[dict[str, SubclassKind]] = {
    DIRECTIONAL_REACTION: "directional_reaction",
    BIDIRECTIONAL_REACTION: "bidirectional_reaction",
    SMALL_MOLECULE: "compound_with_part",
    POLYMER: "compound_with_part",
    GENERIC_POLYPEPTIDE: "generic_compound",
    GENERIC_POLYNUCLEOTIDE: "generic_compound",
    GENERIC_HETEROPOLYSACCHARIDE: "generic_compound",
    REACTIVE_PART: "reactive_part",
}


@dataclass(slots=True)
class Classification:
    """Entities produced from a single record, in encounter order."""

    reactions: list[Reaction] = field(default_factory=list)
    compounds: list[Compound] = field(default_factory=list)
    reactive_parts: list[ReactivePart] = field(default_factory=list)
    unrecognized: list[str] = field(default_factory=list)


def classify(record: Record) -> Classification:
    """Produce the entities selected by the record's subclass assertions.

    Assertions outside `SUBCLASS_KINDS` produce nothing. ChEBI assertions are
    expected on compounds and only feed `ReactivePart.subclass_of_chebi`; every
    other unknown value is reported in `Classification.unrecognized`.
    """
    result = Classification()
    for subclass in record.subclasses:
        kind = SUBCLASS_KINDS.get(subclass)
        if kind is None:
            if CHEBI_MARKER not in subclass:
                result.unrecognized.append(subclass)
            continue
        _BUILDERS[kind](record, subclass, result)
    return result


def parent_chebi(record: Record) -> str:
    """Return the last ChEBI parent classification asserted by the record."""
    found = ""
    for subclass in record.subclasses:
        if CHEBI_MARKER in subclass:
            found = subclass
    return found


def _build_reaction(record: Record, directional: bool) -> Reaction:
    return Reaction(
        id=record.id,
        about=record.about,
        accession=record.accession,
        directional=directional,
        status=record.status,
        comment=record.comment,
        equation=record.equation,
        html_equation=record.html_equation,
        is_chemically_balanced=record.is_chemically_balanced,
        is_transport=record.is_transport,
        ec=record.ec,
        location=record.location,
        citations=record.citations,
        substrates=record.substrates,
        products=record.products,
        substrates_or_products=record.substrates_or_products,
    )


def _add_directional_reaction(record: Record, subclass: str, result: Classification) -> None:
    result.reactions.append(_build_reaction(record, directional=True))


def _add_bidirectional_reaction(record: Record, subclass: str, result: Classification) -> None:
    result.reactions.append(_build_reaction(record, directional=False))


def _add_compound_with_part(record: Record, subclass: str, result: Classification) -> None:
    kind = cast(CompoundKind, strip_namespace(subclass))
    result.compounds.append(
        Compound(
            id=record.id,
            about=record.about,
            accession=record.accession,
            kind=kind,
            name=record.name,
            html_name=record.html_name,
            reactive_part=record.accession,
        )
    )
    chebi = record.underlying_chebi if subclass == POLYMER else record.chebi
    result.reactive_parts.append(_build_reactive_part(record, chebi=chebi, compound=record.about))


def _add_generic_compound(record: Record, subclass: str, result: Classification) -> None:
    result.compounds.append(
        Compound(
            id=record.id,
            about=record.about,
            accession=record.accession,
            kind=cast(CompoundKind, strip_namespace(subclass)),
            name=record.name,
            html_name=record.html_name,
            reactive_part=record.reactive_part,
        )
    )


def _add_reactive_part(record: Record, subclass: str, result: Classification) -> None:
    result.reactive_parts.append(_build_reactive_part(record, chebi=record.chebi))


def _build_reactive_part(record: Record, *, chebi: str, compound: str = "") -> ReactivePart:
    return ReactivePart(
        id=record.id,
        about=record.about,
        accession=record.accession,
        position=record.position,
        name=record.name,
        html_name=record.html_name,
        formula=record.formula,
        charge=record.charge,
        chebi=chebi,
        subclass_of_chebi=parent_chebi(record),
        polymerization_index=record.polymerization_index,
        compound=compound,
    )


_BUILDERS: Final[dict[SubclassKind, Callable[[Record, str, Classification], None]]] = {
    "directional_reaction": _add_directional_reaction,
    "bidirectional_reaction": _add_bidirectional_reaction,
    "compound_with_part": _add_compound_with_part,
    "generic_compound": _add_generic_compound,
    "reactive_part": _add_reactive_part,
}

"""Unit tests for subclass classification."""

from __future__ import annotations

from rhea_rdf.core.constants import (
    BIDIRECTIONAL_REACTION,
    DIRECTIONAL_REACTION,
    GENERIC_HETEROPOLYSACCHARIDE,
    GENERIC_POLYNUCLEOTIDE,
    GENERIC_POLYPEPTIDE,
    POLYMER,
    REACTIVE_PART,
    SMALL_MOLECULE,
)
from rhea_rdf.rdf.records import Record
from rhea_rdf.resolution.classifier import classify

CHEBI_PARENT = "http://purl.obolibrary.org/obo/CHEBI_33579"


def _compound_record(*subclasses: str) -> Record:
    return Record(
        about="http://rdf.rhea-db.org/Compound_1",
        id=1,
        accession="CHEBI:1",
        subclasses=subclasses,
        name="water",
        html_name="water",
        formula="H2O",
        charge="0",
        chebi="http://purl.obolibrary.org/obo/CHEBI_15377",
        underlying_chebi="http://purl.obolibrary.org/obo/CHEBI_15841",
        reactive_part="http://rdf.rhea-db.org/Compound_1_rp1",
        polymerization_index="n",
    )


def test_directional_and_bidirectional_reactions() -> None:
    directional = classify(Record(about="r1", subclasses=(DIRECTIONAL_REACTION,), equation="a = b"))
    bidirectional = classify(Record(about="r2", subclasses=(BIDIRECTIONAL_REACTION,)))

    assert [reaction.directional for reaction in directional.reactions] == [True]
    assert directional.reactions[0].equation == "a = b"
    assert [reaction.directional for reaction in bidirectional.reactions] == [False]
    assert directional.compounds == [] and directional.reactive_parts == []


def test_small_molecule_uses_direct_chebi() -> None:
    result = classify(_compound_record(SMALL_MOLECULE, CHEBI_PARENT))

    (compound,) = result.compounds
    (part,) = result.reactive_parts
    assert compound.kind == "SmallMolecule"
    assert compound.reactive_part == "CHEBI:1"
    assert part.chebi == "http://purl.obolibrary.org/obo/CHEBI_15377"
    assert part.subclass_of_chebi == CHEBI_PARENT
    assert part.compound == "http://rdf.rhea-db.org/Compound_1"
    assert result.unrecognized == []


def test_polymer_uses_underlying_chebi() -> None:
    result = classify(_compound_record(POLYMER))

    assert result.compounds[0].kind == "Polymer"
    assert result.reactive_parts[0].chebi == "http://purl.obolibrary.org/obo/CHEBI_15841"
    assert result.reactive_parts[0].polymerization_index == "n"
    assert result.reactive_parts[0].subclass_of_chebi == ""


def test_generic_compounds_reference_their_reactive_part() -> None:
    for subclass, kind in (
        (GENERIC_POLYPEPTIDE, "GenericPolypeptide"),
        (GENERIC_POLYNUCLEOTIDE, "GenericPolynucleotide"),
        (GENERIC_HETEROPOLYSACCHARIDE, "GenericHeteropolysaccharide"),
    ):
        result = classify(_compound_record(subclass))
        (compound,) = result.compounds
        assert compound.kind == kind
        assert compound.reactive_part == "http://rdf.rhea-db.org/Compound_1_rp1"
        assert result.reactive_parts == []


def test_standalone_reactive_part() -> None:
    result = classify(_compound_record(REACTIVE_PART, CHEBI_PARENT))

    (part,) = result.reactive_parts
    assert result.compounds == []
    assert part.chebi == "http://purl.obolibrary.org/obo/CHEBI_15377"
    assert part.subclass_of_chebi == CHEBI_PARENT
    assert part.compound == ""


def test_unknown_subclasses_produce_nothing() -> None:
    result = classify(
        Record(
            about="side",
            subclasses=("http://rdf.rhea-db.org/ReactionSide", CHEBI_PARENT),
        )
    )

    assert result.reactions == [] and result.compounds == [] and result.reactive_parts == []
    assert result.unrecognized == ["http://rdf.rhea-db.org/ReactionSide"]


def test_record_matching_two_kinds_produces_both() -> None:
    result = classify(_compound_record(DIRECTIONAL_REACTION, SMALL_MOLECULE))

    assert len(result.reactions) == 1
    assert len(result.compounds) == 1
    assert len(result.reactive_parts) == 1

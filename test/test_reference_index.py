"""Tests for consumer-side resolution of string references."""

from __future__ import annotations

from pathlib import Path

from rhea_rdf.core.config import Settings
from rhea_rdf.core.models import ReactionSide, Rhea
from rhea_rdf.rdf import decode_records
from rhea_rdf.rdf.records import Record
from rhea_rdf.resolution import ReferenceIndex, resolve

SAMPLE_PATH = Path(__file__).parent / "data" / "rhea_sample.rdf"
RHEA = "http://rdf.rhea-db.org/"


def _index() -> tuple[ReferenceIndex, Rhea]:
    records = decode_records(SAMPLE_PATH.read_bytes())
    rhea = resolve(records, Settings())
    return ReferenceIndex.build(records, rhea), rhea


def test_compound_for_side_follows_participant() -> None:
    index, rhea = _index()

    compounds = [index.compound_for_side(side).accession for side in rhea.reaction_sides]

    assert compounds == ["CHEBI:15377", "POLYMER:9999", "CHEBI:15377", "GENERIC:10594"]


def test_compound_for_side_accepts_direct_compound_reference() -> None:
    index, _ = _index()
    side = ReactionSide(RHEA + "x_L", 1, False, False, False, RHEA + "Compound_1283")

    assert index.compound_for_side(side).accession == "CHEBI:15377"


def test_dangling_side_reference_returns_none() -> None:
    index, _ = _index()
    side = ReactionSide(RHEA + "x_L", 1, False, False, False, RHEA + "Participant_missing")

    assert index.compound_for_side(side) is None


def test_reactive_part_lookup_by_compound_kind() -> None:
    index, rhea = _index()
    small_molecule, polymer, generic = rhea.compounds

    assert index.reactive_part_for(small_molecule).chebi.endswith("CHEBI_15377")
    assert index.reactive_part_for(polymer).chebi.endswith("CHEBI_15841")
    assert index.reactive_part_for(generic).about == RHEA + "Compound_10594_rp2"


def test_owner_of_standalone_reactive_part() -> None:
    index, rhea = _index()
    standalone = rhea.reactive_parts[2]

    assert index.owner_of(standalone).accession == "GENERIC:10594"
    assert index.owner_of(rhea.reactive_parts[0]).accession == "CHEBI:15377"


def test_owner_of_uses_bare_compound_descriptions() -> None:
    records = [
        Record(about=RHEA + "Compound_7", reactive_part=RHEA + "Compound_7_rp1"),
        Record(
            about=RHEA + "Compound_7_rp1",
            subclasses=(RHEA + "ReactivePart",),
            accession="RP:7",
        ),
    ]
    rhea = resolve(records, Settings())
    index = ReferenceIndex.build(records, rhea)

    assert index.reactive_part_owners == {RHEA + "Compound_7_rp1": RHEA + "Compound_7"}
    # The owning compound has no subclass assertion, so it is not an entity.
    assert index.owner_of(rhea.reactive_parts[0]) is None


def test_sides_and_compounds_of_reaction() -> None:
    index, rhea = _index()
    directional = rhea.reactions[0]

    sides = index.sides_of(directional)

    assert [side.accession for side in sides] == [RHEA + "10001_L"] * 2 + [RHEA + "10001_R"] * 2
    assert [compound.accession for compound in index.compounds_of(directional)] == [
        "CHEBI:15377",
        "POLYMER:9999",
        "CHEBI:15377",
        "GENERIC:10594",
    ]

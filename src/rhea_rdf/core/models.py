"""Shared data models."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Literal

CompoundKind = Literal[
    "SmallMolecule",
    "Polymer",
    "GenericPolypeptide",
    "GenericPolynucleotide",
    "GenericHeteropolysaccharide",
]


@dataclass(slots=True, frozen=True)
class Reaction:
    id: int
    about: str
    accession: str
    directional: bool
    status: str = ""
    comment: str = ""
    equation: str = ""
    html_equation: str = ""
    is_chemically_balanced: bool = False
    is_transport: bool = False
    ec: str = ""
    location: str = ""
    citations: tuple[str, ...] = ()
    substrates: tuple[str, ...] = ()
    products: tuple[str, ...] = ()
    substrates_or_products: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class Compound:
    id: int
    about: str
    accession: str
    kind: CompoundKind
    name: str = ""
    html_name: str = ""
    # Accession of the reactive part for simple kinds, its URI for generic kinds.
    reactive_part: str = ""


@dataclass(slots=True, frozen=True)
class ReactivePart:
    id: int
    about: str
    accession: str
    position: str = ""
    name: str = ""
    html_name: str = ""
    formula: str = ""
    charge: str = ""
    chebi: str = ""
    subclass_of_chebi: str = ""
    polymerization_index: str = ""
    compound: str = ""


@dataclass(slots=True, frozen=True)
class ReactionSide:
    accession: str
    multiplicity: int
    indefinite: bool
    minus: bool
    plus: bool
    compound: str


@dataclass(slots=True)
class Rhea:
    """Aggregate of every entity resolved from a Rhea dump."""

    reactions: list[Reaction] = field(default_factory=list)
    compounds: list[Compound] = field(default_factory=list)
    reactive_parts: list[ReactivePart] = field(default_factory=list)
    reaction_sides: list[ReactionSide] = field(default_factory=list)

    def extend(self, other: Rhea) -> None:
        self.reactions.extend(other.reactions)
        self.compounds.extend(other.compounds)
        self.reactive_parts.extend(other.reactive_parts)
        self.reaction_sides.extend(other.reaction_sides)

    def counts(self) -> dict[str, int]:
        return {
            "reactions": len(self.reactions),
            "compounds": len(self.compounds),
            "reactive_parts": len(self.reactive_parts),
            "reaction_sides": len(self.reaction_sides),
        }

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)

"""Consumer-side lookup of the string references left by the resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, Sequence

from rhea_rdf.core.logging import get_logger
from rhea_rdf.core.models import Compound, CompoundKind, Reaction, ReactionSide, ReactivePart, Rhea
from rhea_rdf.rdf.records import Record

LOGGER = get_logger(__name__)

GENERIC_KINDS: Final[frozenset[CompoundKind]] = frozenset(
    {"GenericPolypeptide", "GenericPolynucleotide", "GenericHeteropolysaccharide"}
)


@dataclass(slots=True)
class ReferenceIndex:
    """Lookup tables over a resolved aggregate.

    `participant_compounds` maps participant URIs to compound URIs and
    `reactive_part_owners` maps reactive part URIs to the compound that
    declares them. Both are filled from the records because neither link is
    kept on the resolved entities. Lookups on dangling references return
    `None` or an empty list.
    """

    participant_compounds: dict[str, str] = field(default_factory=dict)
    reactive_part_owners: dict[str, str] = field(default_factory=dict)
    compounds: dict[str, Compound] = field(default_factory=dict)
    reactive_parts: dict[str, ReactivePart] = field(default_factory=dict)
    parts_by_compound: dict[str, ReactivePart] = field(default_factory=dict)
    parts_by_accession: dict[str, ReactivePart] = field(default_factory=dict)
    sides: dict[str, list[ReactionSide]] = field(default_factory=dict)

    @classmethod
    def build(cls, records: Sequence[Record], rhea: Rhea) -> ReferenceIndex:
        index = cls()
        for record in records:
            if record.compound:
                index.participant_compounds[record.about] = record.compound
            # Bare compound descriptions only point at their reactive part.
            if not record.subclasses and record.reactive_part:
                index.reactive_part_owners[record.reactive_part] = record.about
        for compound in rhea.compounds:
            index.compounds.setdefault(compound.about, compound)
            if compound.kind in GENERIC_KINDS and compound.reactive_part:
                index.reactive_part_owners[compound.reactive_part] = compound.about
        for part in rhea.reactive_parts:
            index.reactive_parts.setdefault(part.about, part)
            index.parts_by_accession.setdefault(part.accession, part)
            if part.compound:
                index.parts_by_compound.setdefault(part.compound, part)
        for side in rhea.reaction_sides:
            index.sides.setdefault(side.accession, []).append(side)
        LOGGER.debug(
            "linking.indexed",
            participants=len(index.participant_compounds),
            reactive_part_owners=len(index.reactive_part_owners),
            sides=len(index.sides),
        )
        return index

    def compound_for_side(self, side: ReactionSide) -> Compound | None:
        """Follow a side's compound reference, directly or through its participant."""
        compound = self.compounds.get(side.compound)
        if compound is not None:
            return compound
        target = self.participant_compounds.get(side.compound)
        if target is None:
            return None
        return self.compounds.get(target)

    def reactive_part_for(self, compound: Compound) -> ReactivePart | None:
        if compound.kind in GENERIC_KINDS:
            return self.reactive_parts.get(compound.reactive_part)
        return self.parts_by_compound.get(compound.about) or self.parts_by_accession.get(
            compound.reactive_part
        )

    def owner_of(self, part: ReactivePart) -> Compound | None:
        owner = part.compound or self.reactive_part_owners.get(part.about)
        if not owner:
            return None
        return self.compounds.get(owner)

    def sides_of(self, reaction: Reaction) -> list[ReactionSide]:
        """Return the reaction's side memberships, substrates first."""
        result: list[ReactionSide] = []
        for accession in (
            *reaction.substrates,
            *reaction.products,
            *reaction.substrates_or_products,
        ):
            result.extend(self.sides.get(accession, ()))
        return result

    def compounds_of(self, reaction: Reaction) -> list[Compound]:
        resolved = (self.compound_for_side(side) for side in self.sides_of(reaction))
        return [compound for compound in resolved if compound is not None]

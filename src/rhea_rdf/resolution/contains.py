"""Decoding of `contains*` property names into reaction-side multiplicities.

Rhea writes the stoichiometry of a reaction side into the property name itself:
`contains1`, `contains2`, ... for fixed coefficients and four literal suffixes
for polymer coefficients expressed in terms of `n`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Iterator

from rhea_rdf.core.constants import CONTAINS_PREFIX
from rhea_rdf.core.exceptions import ContainsDecodeError
from rhea_rdf.core.models import ReactionSide
from rhea_rdf.rdf.records import Record

INTEGER_SUFFIX = re.compile(r"[+-]?[0-9]+")


@dataclass(slots=True, frozen=True)
class Multiplicity:
    multiplicity: int
    indefinite: bool = False
    minus: bool = False
    plus: bool = False


SPECIAL_SUFFIXES: Final[dict[str, Multiplicity]] = {
    "N": Multiplicity(1, indefinite=True),
    "2n": Multiplicity(2, indefinite=True),
    "Nminus1": Multiplicity(1, indefinite=True, minus=True),
    "Nplus1": Multiplicity(1, indefinite=True, plus=True),
}


def is_contains_property(name: str) -> bool:
    return name.startswith(CONTAINS_PREFIX)


def decode_contains(name: str, *, about: str | None = None) -> Multiplicity:
    """Decode the multiplicity encoded in a `contains*` property name."""
    if not is_contains_property(name):
        raise ContainsDecodeError(name, about)
    suffix = name[len(CONTAINS_PREFIX) :]
    special = SPECIAL_SUFFIXES.get(suffix)
    if special is not None:
        return special
    if not INTEGER_SUFFIX.fullmatch(suffix):
        raise ContainsDecodeError(name, about)
    return Multiplicity(int(suffix))


def iter_reaction_sides(record: Record) -> Iterator[ReactionSide]:
    """Yield one reaction side per `contains*` property of the record."""
    for prop in record.iter_properties(CONTAINS_PREFIX):
        decoded = decode_contains(prop.name, about=record.about)
        yield ReactionSide(
            accession=record.about,
            multiplicity=decoded.multiplicity,
            indefinite=decoded.indefinite,
            minus=decoded.minus,
            plus=decoded.plus,
            compound=prop.value,
        )

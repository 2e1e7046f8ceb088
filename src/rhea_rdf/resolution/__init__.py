"""Resolution of flat Rhea records into typed entities."""

from .classifier import Classification, classify
from .contains import Multiplicity, decode_contains, iter_reaction_sides
from .linking import ReferenceIndex
from .resolver import RheaResolver, parse_rhea, resolve

__all__ = [
    "Classification",
    "Multiplicity",
    "ReferenceIndex",
    "RheaResolver",
    "classify",
    "decode_contains",
    "iter_reaction_sides",
    "parse_rhea",
    "resolve",
]
